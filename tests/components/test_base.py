"""Tests for the Component base class."""

import hivetheme.components as components
import hivetheme.config as config
import hivetheme.environment as environment
import hivetheme.hooks as hooks
import hivetheme.host as host


class _Greeter(components.Component):
    name = "greeter"
    requires = ("hivepress", "woocommerce")

    def register(self) -> None:
        self.hooks.add_filter("greeting", lambda text: f"{text}, {self.args['who']}")


def _context(settings: config.Settings, *features: str) -> components.ComponentContext:
    return components.ComponentContext(
        hooks=hooks.HookManager(),
        environment=environment.StaticEnvironment(features),
        host=host.Host.plain(),
        settings=settings,
    )


class TestComponent:
    def test_is_available_checks_all_requirements(self) -> None:
        assert _Greeter.is_available(
            environment.StaticEnvironment(["hivepress", "woocommerce"])
        )
        assert not _Greeter.is_available(environment.StaticEnvironment(["hivepress"]))

    def test_no_requirements_always_available(self) -> None:
        class Anywhere(components.Component):
            name = "anywhere"

            def register(self) -> None:
                pass

        assert Anywhere.is_available(environment.StaticEnvironment())

    def test_exposes_context_and_args(self, settings: config.Settings) -> None:
        context = _context(settings, "hivepress")
        component = _Greeter(context, who="world")

        assert component.hooks is context.hooks
        assert component.environment is context.environment
        assert component.host is context.host
        assert component.settings is settings
        assert component.args == {"who": "world"}

    def test_register_uses_args(self, settings: config.Settings) -> None:
        context = _context(settings)
        _Greeter(context, who="world").register()

        assert context.hooks.apply_filters("greeting", "Hello") == "Hello, world"

    def test_repr(self, settings: config.Settings) -> None:
        assert repr(_Greeter(_context(settings), who="x")) == "_Greeter(name='greeter')"

    def test_builtin_components(self) -> None:
        assert components.BUILTIN_COMPONENTS == (components.HivePress,)
