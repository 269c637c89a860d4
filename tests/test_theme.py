"""Tests for the Theme composition root."""

import logging as _logging
import typing as _typing

import pytest as _pytest

import hivetheme.components as components
import hivetheme.config as config
import hivetheme.environment as environment
import hivetheme.hooks as hooks
import hivetheme.theme as theme

ThemeFactory = _typing.Callable[..., theme.Theme]


class _Counter(components.Component):
    """Records how often it was registered."""

    name = "counter"
    requires = ("woocommerce",)
    registrations = 0

    def register(self) -> None:
        type(self).registrations += 1
        self.hooks.add_filter("count", lambda value: value + 1)


@_pytest.fixture(autouse=True)
def _reset_counter() -> None:
    _Counter.registrations = 0


class TestComponentRegistration:
    def test_registers_available_components(self, make_theme: ThemeFactory) -> None:
        site_theme = make_theme("hivepress")

        assert [c.name for c in site_theme.components] == ["hivepress"]
        assert isinstance(site_theme.get_component("hivepress"), components.HivePress)

    def test_skips_unavailable_components(
        self,
        make_theme: ThemeFactory,
        caplog: _pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(_logging.DEBUG, logger="hivetheme.theme"):
            site_theme = make_theme()

        assert site_theme.components == []
        assert site_theme.get_component("hivepress") is None
        assert "Skipping component hivepress" in caplog.text

    def test_components_registered_once(self, make_theme: ThemeFactory) -> None:
        site_theme = make_theme(
            "woocommerce",
            component_classes=[_Counter, components.HivePress],
        )

        assert _Counter.registrations == 1
        assert [c.name for c in site_theme.components] == ["counter"]
        assert site_theme.hooks.apply_filters("count", 1) == 2

    def test_empty_component_list(self, make_theme: ThemeFactory) -> None:
        site_theme = make_theme("hivepress", component_classes=[])

        assert site_theme.hooks.hook_names() == []


class TestDefaults:
    def test_environment_from_settings(self, settings: config.Settings) -> None:
        site_theme = theme.Theme(settings)

        assert isinstance(site_theme.environment, environment.SettingsEnvironment)
        assert site_theme.environment.has("hivepress")
        assert not site_theme.environment.has("admin")
        assert site_theme.get_component("hivepress") is not None

    def test_host_uses_configured_strings(self) -> None:
        settings = config.Settings.construct_without_dotenv(
            strings={"listing": "Listing"},
            theme={"template": "rentalhive"},
        )
        site_theme = theme.Theme(settings)

        assert site_theme.host.translator.get_string("listing") == "Listing"
        assert site_theme.host.site.get_template() == "rentalhive"

    def test_get_name(self, make_theme: ThemeFactory) -> None:
        assert make_theme().get_name() == "ListingHive"


class TestRequestHelpers:
    def test_filter_template_without_filters_returns_input(
        self,
        make_theme: ThemeFactory,
    ) -> None:
        template = {"blocks": {"a": {}}}

        assert make_theme("hivepress").filter_template("unknown", template) is template

    def test_render_area_defaults_to_empty_output(self, make_theme: ThemeFactory) -> None:
        site_theme = make_theme("hivepress")

        assert site_theme.render_area(hooks.HookName.SITE_HEADER) == (
            "<!-- template:site_header_block -->"
        )

    def test_admin_notices_defaults_to_empty(self, make_theme: ThemeFactory) -> None:
        assert make_theme("admin").admin_notices() == {}

    def test_run_action_passes_arguments(self, make_theme: ThemeFactory) -> None:
        received: list[tuple] = []
        site_theme = make_theme()
        site_theme.hooks.add_action("custom", lambda *args: received.append(args))

        site_theme.run_action("custom", 1, "two")

        assert received == [(1, "two")]
