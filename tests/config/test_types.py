"""Tests for config section types."""

import hivetheme.config.types as types


class TestConfigBase:
    def test_extra_fields_preserved(self) -> None:
        theme = types.ThemeConfig(name="X", colour="blue")

        assert theme.get_extra_fields() == {"colour": "blue"}

    def test_no_extra_fields(self) -> None:
        assert types.LoggingConfig().get_extra_fields() == {}


class TestEnvironmentConfig:
    def test_default_plugins_not_shared(self) -> None:
        first = types.EnvironmentConfig()
        first.active_plugins.append("woocommerce")

        assert types.EnvironmentConfig().active_plugins == ["hivepress"]
