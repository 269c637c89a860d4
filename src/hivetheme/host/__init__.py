"""
Host platform collaborators.

Abstract interfaces for the services components borrow from the host, plus
plain implementations for the CLI and tests.
"""

from hivetheme.host.base import (
    BlockRenderer,
    Response,
    Sanitizer,
    Site,
    Translator,
)
from hivetheme.host.bundle import Host
from hivetheme.host.plain import (
    BufferResponse,
    DictTranslator,
    PlainRenderer,
    PlainSanitizer,
    StaticSite,
)

__all__ = [
    "BlockRenderer",
    "BufferResponse",
    "DictTranslator",
    "Host",
    "PlainRenderer",
    "PlainSanitizer",
    "Response",
    "Sanitizer",
    "Site",
    "StaticSite",
    "Translator",
]
