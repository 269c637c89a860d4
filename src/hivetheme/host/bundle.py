"""
Bundle of host collaborators handed to components.
"""

from __future__ import annotations

import dataclasses as _dataclasses

import hivetheme.host.base as base
import hivetheme.host.plain as plain


@_dataclasses.dataclass
class Host:
    """
    The host services available to components for one request.

    Attributes:
        translator: String tables and translations
        sanitizer: HTML sanitization and URL escaping
        renderer: Template rendering
        site: Site and request queries
        response: Output written by actions
    """

    translator: base.Translator
    sanitizer: base.Sanitizer
    renderer: base.BlockRenderer
    site: base.Site
    response: base.Response

    @classmethod
    def plain(
        cls,
        *,
        translator: base.Translator | None = None,
        sanitizer: base.Sanitizer | None = None,
        renderer: base.BlockRenderer | None = None,
        site: base.Site | None = None,
        response: base.Response | None = None,
    ) -> Host:
        """Create a Host from plain collaborators, overriding any given."""
        return cls(
            translator=translator or plain.DictTranslator(),
            sanitizer=sanitizer or plain.PlainSanitizer(),
            renderer=renderer or plain.PlainRenderer(),
            site=site or plain.StaticSite(),
            response=response or plain.BufferResponse(),
        )
