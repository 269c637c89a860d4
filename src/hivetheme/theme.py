"""
Theme composition root.

The Theme wires settings, environment, hook manager and host collaborators
together, then registers every component whose requirements hold. The
environment is consulted here, once, and nowhere in the tree logic.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import hivetheme.components as components
import hivetheme.config as config
import hivetheme.environment as environment
import hivetheme.hooks as hooks
import hivetheme.host as host
import hivetheme.utils.trees as trees

_logger = _logging.getLogger(__name__)


class Theme:
    """
    The theme for one request.

    Example:
        >>> theme = Theme(config.Settings())
        >>> theme.filter_template("listing_view_block", template)
    """

    def __init__(
        self,
        settings: config.Settings,
        *,
        host: host.Host | None = None,
        environment: environment.Environment | None = None,
        component_classes: _typing.Iterable[type[components.Component]] | None = None,
    ) -> None:
        """
        Build the theme and register available components.

        Args:
            settings: Theme settings.
            host: Host collaborators. Defaults to plain implementations with
                the configured string table.
            environment: Capability queries. Defaults to the environment
                described by settings.
            component_classes: Components to try, in order. Defaults to the
                built-in components.
        """
        self._settings = settings
        self._environment = environment or _default_environment(settings)
        self._host = host or _default_host(settings)
        self._hooks = hooks.HookManager()
        self._components: dict[str, components.Component] = {}

        context = components.ComponentContext(
            hooks=self._hooks,
            environment=self._environment,
            host=self._host,
            settings=self._settings,
        )
        if component_classes is None:
            component_classes = components.BUILTIN_COMPONENTS
        for component_cls in component_classes:
            if not component_cls.is_available(self._environment):
                _logger.debug(
                    "Skipping component %s: requires %s",
                    component_cls.name,
                    ", ".join(component_cls.requires),
                )
                continue
            component = component_cls(context)
            component.register()
            self._components[component_cls.name] = component
            _logger.debug("Registered component %s", component_cls.name)

    @property
    def settings(self) -> config.Settings:
        return self._settings

    @property
    def environment(self) -> environment.Environment:
        return self._environment

    @property
    def host(self) -> host.Host:
        return self._host

    @property
    def hooks(self) -> hooks.HookManager:
        return self._hooks

    @property
    def components(self) -> list[components.Component]:
        """Registered components, in registration order."""
        return list(self._components.values())

    def get_name(self) -> str:
        """Get the theme display name."""
        return self._settings.theme_name

    def get_component(self, name: str) -> components.Component | None:
        """
        Get a registered component by name.

        Returns:
            The component, or None if it isn't registered.
        """
        return self._components.get(name)

    def filter_template(self, name: str, template: trees.Tree) -> trees.Tree:
        """
        Run the template-description filter for a template.

        Args:
            name: Template identifier, e.g. "listing_view_block".
            template: Template description tree. Not modified.

        Returns:
            The filtered template.
        """
        return self._hooks.apply_filters(hooks.template_hook(name), template)

    def render_area(self, area: hooks.HookName | str, output: str = "") -> str:
        """Run an area filter (e.g. the site header) over its HTML."""
        return self._hooks.apply_filters(area, output)

    def admin_notices(
        self,
        notices: dict[str, dict[str, _typing.Any]] | None = None,
    ) -> dict[str, dict[str, _typing.Any]]:
        """Run the admin notices filter."""
        return self._hooks.apply_filters(hooks.HookName.ADMIN_NOTICES, dict(notices or {}))

    def run_action(self, name: hooks.HookName | str, *args: _typing.Any) -> None:
        """Fire an action."""
        self._hooks.do_action(name, *args)


def _default_environment(settings: config.Settings) -> environment.Environment:
    return environment.SettingsEnvironment(settings)


def _default_host(settings: config.Settings) -> host.Host:
    return host.Host.plain(
        translator=host.DictTranslator(strings=settings.strings),
        site=host.StaticSite(template=settings.theme.template),
    )
