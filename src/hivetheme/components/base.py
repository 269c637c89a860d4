"""
Base class for theme components.

A component bundles the callbacks for one integration (e.g. one plugin).
It declares the features it requires; the theme only constructs and
registers components whose requirements the environment satisfies.
"""

from __future__ import annotations

import abc as _abc
import dataclasses as _dataclasses
import typing as _typing

if _typing.TYPE_CHECKING:
    import hivetheme.config as config
    import hivetheme.environment as environment
    import hivetheme.hooks as hooks
    import hivetheme.host as host


@_dataclasses.dataclass
class ComponentContext:
    """
    Everything a component may use.

    Attributes:
        hooks: Hook manager to register callbacks on
        environment: Capability queries (read-only)
        host: Host collaborators
        settings: Theme settings
    """

    hooks: hooks.HookManager
    environment: environment.Environment
    host: host.Host
    settings: config.Settings


class Component(_abc.ABC):
    """
    Abstract base class for theme components.

    Subclasses set `name` and `requires` and implement `register()`.
    """

    name: _typing.ClassVar[str]
    """Identifier used by Theme.get_component()."""

    requires: _typing.ClassVar[tuple[str, ...]] = ()
    """Features that must be available for the component to load."""

    def __init__(self, context: ComponentContext, **args: _typing.Any) -> None:
        """
        Initialize the component.

        Args:
            context: Hooks, environment, host and settings.
            **args: Component arguments.
        """
        self._context = context
        self._args = args

    @classmethod
    def is_available(cls, env: environment.Environment) -> bool:
        """Check if every required feature is available."""
        return env.has_all(cls.requires)

    @_abc.abstractmethod
    def register(self) -> None:
        """Register the component's callbacks on the hook manager."""
        ...

    @property
    def hooks(self) -> hooks.HookManager:
        return self._context.hooks

    @property
    def environment(self) -> environment.Environment:
        return self._context.environment

    @property
    def host(self) -> host.Host:
        return self._context.host

    @property
    def settings(self) -> config.Settings:
        return self._context.settings

    @property
    def args(self) -> dict[str, _typing.Any]:
        """Arguments the component was created with."""
        return dict(self._args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
