"""Tests for Settings precedence and accessors."""

import pathlib as _pathlib

import pydantic as _pydantic
import pytest as _pytest

import hivetheme.config as config


class TestSettingsDefaults:
    """Built-in defaults when no other source is present."""

    def test_theme_defaults(self, settings: config.Settings) -> None:
        assert settings.theme.name == "ListingHive"
        assert settings.theme.template == "listinghive"
        assert settings.theme.docs_url == "https://hivepress.io/docs/themes/"
        assert settings.theme_name == "ListingHive"

    def test_environment_defaults(self, settings: config.Settings) -> None:
        assert settings.environment.active_plugins == ["hivepress"]
        assert settings.environment.admin is False
        assert settings.active_plugins == ["hivepress"]

    def test_logging_and_strings_defaults(self, settings: config.Settings) -> None:
        assert settings.logging.level == "warning"
        assert settings.strings == {}

    def test_demo_docs_url(self, settings: config.Settings) -> None:
        assert settings.get_demo_docs_url() == (
            "https://hivepress.io/docs/themes/listinghive/#importing-demo-content"
        )
        assert settings.get_demo_docs_url("rentalhive") == (
            "https://hivepress.io/docs/themes/rentalhive/#importing-demo-content"
        )


class TestSettingsPrecedence:
    """Constructor > env > project > user > built-in."""

    def test_user_config_overrides_builtin(self, isolated_config: _pathlib.Path) -> None:
        (isolated_config / "config.yaml").write_text(
            "theme:\n  name: MyHive\n",
            encoding="utf-8",
        )

        settings = config.Settings.construct_without_dotenv()

        assert settings.theme.name == "MyHive"
        # Sibling keys from the built-in layer survive the merge
        assert settings.theme.template == "listinghive"

    def test_project_config_overrides_user(
        self,
        isolated_config: _pathlib.Path,
    ) -> None:
        (isolated_config / "config.yaml").write_text(
            "theme:\n  name: UserHive\nlogging:\n  level: info\n",
            encoding="utf-8",
        )
        project_dir = _pathlib.Path.cwd() / ".hivetheme"
        project_dir.mkdir()
        (project_dir / "config.yaml").write_text(
            "theme:\n  name: ProjectHive\n",
            encoding="utf-8",
        )

        settings = config.Settings.construct_without_dotenv()

        assert settings.theme.name == "ProjectHive"
        assert settings.logging.level == "info"

    def test_project_config_found_from_subdirectory(
        self,
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        root = _pathlib.Path.cwd()
        (root / ".hivetheme").mkdir()
        (root / ".hivetheme" / "config.yaml").write_text(
            "environment:\n  admin: true\n",
            encoding="utf-8",
        )
        nested = root / "wp-content" / "themes"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        settings = config.Settings.construct_without_dotenv()

        assert settings.environment.admin is True

    def test_config_lists_replace(self, isolated_config: _pathlib.Path) -> None:
        (isolated_config / "config.yaml").write_text(
            "environment:\n  active_plugins: [woocommerce]\n",
            encoding="utf-8",
        )

        settings = config.Settings.construct_without_dotenv()

        assert settings.environment.active_plugins == ["woocommerce"]

    def test_env_var_overrides_config(
        self,
        isolated_config: _pathlib.Path,
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        (isolated_config / "config.yaml").write_text(
            "theme:\n  name: FileHive\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("HIVETHEME_THEME__NAME", "EnvHive")

        settings = config.Settings.construct_without_dotenv()

        assert settings.theme.name == "EnvHive"

    def test_constructor_overrides_everything(
        self,
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("HIVETHEME_LOGGING__LEVEL", "error")

        settings = config.Settings.construct_without_dotenv(logging={"level": "debug"})

        assert settings.logging.level == "debug"


class TestSettingsValidation:
    def test_invalid_log_level_rejected(self) -> None:
        with _pytest.raises(_pydantic.ValidationError):
            config.Settings.construct_without_dotenv(logging={"level": "loud"})

    def test_docs_url_gets_trailing_slash(self) -> None:
        settings = config.Settings.construct_without_dotenv(
            theme={"docs_url": "https://example.com/docs"},
        )

        assert settings.theme.docs_url == "https://example.com/docs/"

    def test_malformed_user_config_raises(self, isolated_config: _pathlib.Path) -> None:
        (isolated_config / "config.yaml").write_text("theme: [unclosed\n", encoding="utf-8")

        with _pytest.raises(config.ConfigFileError, match="invalid YAML"):
            config.Settings.construct_without_dotenv()


class TestFindProjectRoot:
    def test_falls_back_to_start_path(self, tmp_path: _pathlib.Path) -> None:
        start = tmp_path / "no-marker"
        start.mkdir()

        assert config.find_project_root(start) == start

    def test_finds_marker_directory(self, tmp_path: _pathlib.Path) -> None:
        (tmp_path / "site" / ".hivetheme").mkdir(parents=True)
        nested = tmp_path / "site" / "a" / "b"
        nested.mkdir(parents=True)

        assert config.find_project_root(nested) == (tmp_path / "site").resolve()
