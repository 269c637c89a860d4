"""
Hook manager - registry and dispatcher for filters and actions.

Callbacks are grouped by hook name and run in ascending priority. Callbacks
with equal priority run in registration order.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import hivetheme.hooks.events as events

_logger = _logging.getLogger(__name__)


class HookManager:
    """
    Central registry for hook callbacks.

    Filters pass a value through each callback in turn, every callback
    receiving the previous one's result. Actions run each callback for its
    side effects.

    A callback that raises is logged and skipped. For filters the value
    continues unchanged to the next callback.
    """

    def __init__(self) -> None:
        self._hooks: dict[str, list[events.HookCallback]] = {}

    def add_filter(
        self,
        name: str | events.HookName,
        callback: _typing.Callable[..., _typing.Any],
        priority: int = events.DEFAULT_PRIORITY,
    ) -> events.HookCallback:
        """
        Register a filter callback.

        Args:
            name: Hook name.
            callback: Called with the value (plus extra arguments) and
                returns the new value.
            priority: Lower runs first.

        Returns:
            The registration record.
        """
        return self._add(name, callback, priority, events.HookKind.FILTER)

    def add_action(
        self,
        name: str | events.HookName,
        callback: _typing.Callable[..., _typing.Any],
        priority: int = events.DEFAULT_PRIORITY,
    ) -> events.HookCallback:
        """
        Register an action callback.

        Args:
            name: Hook name.
            callback: Called with the action's arguments.
            priority: Lower runs first.

        Returns:
            The registration record.
        """
        return self._add(name, callback, priority, events.HookKind.ACTION)

    def _add(
        self,
        name: str | events.HookName,
        callback: _typing.Callable[..., _typing.Any],
        priority: int,
        kind: events.HookKind,
    ) -> events.HookCallback:
        key = events.hook_key(name)
        registration = events.HookCallback(
            name=key,
            callback=callback,
            priority=priority,
            kind=kind,
        )
        self._hooks.setdefault(key, []).append(registration)
        _logger.debug(
            "Registered %s %s on %s (priority %d)",
            kind.value,
            registration.callback_name,
            key,
            priority,
        )
        return registration

    def remove_filter(
        self,
        name: str | events.HookName,
        callback: _typing.Callable[..., _typing.Any],
    ) -> bool:
        """
        Unregister every registration of callback on a hook.

        Args:
            name: Hook name.
            callback: The callable passed at registration.

        Returns:
            True if anything was removed.
        """
        key = events.hook_key(name)
        registered = self._hooks.get(key, [])
        remaining = [r for r in registered if r.callback != callback]
        if len(remaining) == len(registered):
            return False

        if remaining:
            self._hooks[key] = remaining
        else:
            del self._hooks[key]
        return True

    remove_action = remove_filter

    def apply_filters(
        self,
        name: str | events.HookName,
        value: _typing.Any,
        *args: _typing.Any,
    ) -> _typing.Any:
        """
        Pass a value through every callback registered on a hook.

        Args:
            name: Hook name.
            value: Initial value.
            *args: Extra arguments passed to every callback.

        Returns:
            The value returned by the last callback, or the initial value if
            no callbacks are registered.
        """
        key = events.hook_key(name)
        for registration in self.get_hooks(key):
            try:
                value = registration.callback(value, *args)
            except Exception as e:
                _logger.warning(
                    "Filter %s on %s failed with error: %s",
                    registration.callback_name,
                    key,
                    e,
                )
                # Failing filters leave the value untouched
                continue
        return value

    def do_action(self, name: str | events.HookName, *args: _typing.Any) -> None:
        """
        Run every callback registered on a hook.

        Args:
            name: Hook name.
            *args: Arguments passed to every callback.
        """
        key = events.hook_key(name)
        for registration in self.get_hooks(key):
            try:
                registration.callback(*args)
            except Exception as e:
                _logger.warning(
                    "Action %s on %s failed with error: %s",
                    registration.callback_name,
                    key,
                    e,
                )

    def get_hooks(self, name: str | events.HookName) -> list[events.HookCallback]:
        """Get callbacks registered on a hook, in execution order."""
        registered = self._hooks.get(events.hook_key(name), [])
        # sorted() is stable, so equal priorities keep registration order
        return sorted(registered, key=lambda r: r.priority)

    def has_hooks(self, name: str | events.HookName) -> bool:
        """Check if any callbacks are registered on a hook."""
        return bool(self._hooks.get(events.hook_key(name)))

    def hook_names(self) -> list[str]:
        """Get names of all hooks with registered callbacks."""
        return sorted(self._hooks)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert registrations to a JSON-serializable dict."""
        return {
            name: [r.to_dict() for r in self.get_hooks(name)]
            for name in self.hook_names()
        }
