"""
Hook names and callback registrations.

These define the core data structures for the hook system:
- HookKind: Whether a callback transforms a value (filter) or only runs (action)
- HookName: Extension points the theme hooks into
- HookCallback: One registered callback
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import typing as _typing

DEFAULT_PRIORITY = 10
"""Priority used when a callback doesn't ask for one."""

TEMPLATE_HOOK_PREFIX = "hivepress/v1/templates/"


class HookKind(_enum.Enum):
    """How the hook manager treats a callback's return value."""

    FILTER = "filter"
    """Receives a value and returns the (possibly modified) value."""

    ACTION = "action"
    """Runs for its side effects. Return value is ignored."""


class HookName(str, _enum.Enum):
    """
    Extension points used by the theme.

    Any string is a valid hook name; these are the ones the theme
    registers against or fires itself.
    """

    ADMIN_NOTICES = "hivepress/v1/admin_notices"
    """Filter over the dict of admin notices. Admin context only."""

    SITE_HEADER = "hivetheme/v1/areas/site_header"
    """Filter over the site header HTML."""

    PAGE_HEADER = "hivetheme/v1/areas/page_header"
    """Filter over the page header HTML."""

    ACCOUNT_CONTENT = "woocommerce_account_content"
    """Action fired while rendering the WooCommerce account page."""

    def __str__(self) -> str:
        return self.value


def template_hook(template_name: str) -> str:
    """
    Get the filter name for a template description.

    Args:
        template_name: Template identifier, e.g. "listing_view_block".

    Returns:
        Hook name, e.g. "hivepress/v1/templates/listing_view_block".
    """
    return f"{TEMPLATE_HOOK_PREFIX}{template_name}"


def hook_key(name: str | HookName) -> str:
    """Normalize a hook name to its plain string form."""
    return name.value if isinstance(name, HookName) else str(name)


@_dataclasses.dataclass(frozen=True)
class HookCallback:
    """
    A callback registered against a hook.

    Attributes:
        name: Hook name the callback is registered on
        callback: The callable to run
        priority: Lower runs first; ties run in registration order
        kind: Filter or action
    """

    name: str
    callback: _typing.Callable[..., _typing.Any]
    priority: int = DEFAULT_PRIORITY
    kind: HookKind = HookKind.FILTER

    @property
    def callback_name(self) -> str:
        """Readable name of the callback for logs and listings."""
        qualname = getattr(self.callback, "__qualname__", None)
        return qualname or repr(self.callback)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "callback": self.callback_name,
            "priority": self.priority,
            "kind": self.kind.value,
        }
