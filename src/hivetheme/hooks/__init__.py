"""
Hook system for hivetheme.

Components register callbacks against named extension points. The host
fires those points while handling a request: filters transform a value in
transit, actions run for their side effects.

Example usage:
    from hivetheme.hooks import HookManager, template_hook

    manager = HookManager()
    manager.add_filter(template_hook("listing_view_block"), alter_template)
    template = manager.apply_filters(
        template_hook("listing_view_block"),
        template,
    )
"""

from hivetheme.hooks.events import (
    DEFAULT_PRIORITY,
    HookCallback,
    HookKind,
    HookName,
    template_hook,
)
from hivetheme.hooks.manager import HookManager

__all__ = [
    "DEFAULT_PRIORITY",
    "HookCallback",
    "HookKind",
    "HookManager",
    "HookName",
    "template_hook",
]
