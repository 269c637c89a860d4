"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with HIVETHEME_ prefix
3. .env file (if HIVETHEME_ENV_FILE points at one)
4. Layered YAML config files:
   - Project config: .hivetheme/config.yaml (highest)
   - User config: ~/.config/hivetheme/config.yaml
   - Built-in defaults: bundled defaults/config.yaml (lowest)

Nested config uses double underscore delimiter:
  HIVETHEME_THEME__NAME=MyHive
  HIVETHEME_ENVIRONMENT__ADMIN=true
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import hivetheme.config.sources as sources
import hivetheme.config.types as types


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only HIVETHEME_ENV_FILE is honoured. If it is set but the file doesn't
    exist, no .env is loaded rather than falling back silently.
    """
    if env_file := _os.environ.get("HIVETHEME_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


def find_project_root(start_path: _pathlib.Path | None = None) -> _pathlib.Path:
    """
    Find the project root directory.

    Walks up from start_path looking for a .hivetheme directory. Falls
    back to start_path itself when none is found.

    Args:
        start_path: Starting path for search. Defaults to cwd.
    """
    if start_path is None:
        start_path = _pathlib.Path.cwd()

    current = start_path.resolve()
    while True:
        if (current / sources.PROJECT_CONFIG_DIR).is_dir():
            return current
        if current == current.parent:
            return start_path
        current = current.parent


class Settings(_pydantic_settings.BaseSettings):
    """
    hivetheme configuration settings.

    All settings can be overridden via environment variables with HIVETHEME_
    prefix. For nested config, use double underscore:
    HIVETHEME_ENVIRONMENT__ADMIN=true

    Config precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (HIVETHEME_*)
    3. .env file
    4. Project config (.hivetheme/config.yaml)
    5. User config (~/.config/hivetheme/config.yaml)
    6. Built-in defaults
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="HIVETHEME_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) (highest)
        2. env_settings (HIVETHEME_* env vars)
        3. dotenv_settings (.env file)
        4. yaml_settings (layered config.yaml files)
        5. (defaults via Field definitions) (lowest)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.LayeredYamlSettingsSource(settings_cls, find_project_root()),
            file_secret_settings,
        )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation and reproducing issues without .env
        interference.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    # =========================================================================
    # Config version (for future migrations)
    # =========================================================================

    version: int = _pydantic.Field(default=1, description="Config schema version")

    # =========================================================================
    # Nested config sections
    # =========================================================================

    theme: types.ThemeConfig = _pydantic.Field(default_factory=types.ThemeConfig)
    """Theme identity (name, template slug, docs URL)."""

    environment: types.EnvironmentConfig = _pydantic.Field(
        default_factory=types.EnvironmentConfig
    )
    """Active plugins and request context."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Logging settings."""

    strings: dict[str, str] = _pydantic.Field(default_factory=dict)
    """String table used by the plain translator."""

    # =========================================================================
    # Convenience accessors
    # =========================================================================

    @property
    def theme_name(self) -> str:
        """Theme display name (alias to theme.name)."""
        return self.theme.name

    @property
    def active_plugins(self) -> list[str]:
        """Active plugin slugs (alias to environment.active_plugins)."""
        return self.environment.active_plugins

    def get_demo_docs_url(self, template: str | None = None) -> str:
        """
        Get the documentation URL for importing demo content.

        Args:
            template: Template slug. Defaults to theme.template.
        """
        slug = template or self.theme.template
        return f"{self.theme.docs_url}{slug}/#importing-demo-content"
