"""Configuration type definitions for hivetheme settings.

This module defines the Pydantic models nested within the main Settings
class:
- ThemeConfig: theme name, template slug, documentation URL
- EnvironmentConfig: active plugins, admin context
- LoggingConfig: log level

All types use `extra="allow"` to preserve unknown fields, so config files
can be audited for typos with `get_extra_fields()`.
"""

import typing as _typing

import pydantic as _pydantic


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    Unknown fields are preserved rather than silently dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}


# =============================================================================
# Theme Settings
# =============================================================================


class ThemeConfig(ConfigBase):
    """
    Theme identity.

    YAML section: theme.*
    """

    name: str = "ListingHive"
    """Display name used in notices."""

    template: str = "listinghive"
    """Template slug used in documentation links."""

    docs_url: str = "https://hivepress.io/docs/themes/"
    """Base URL of the theme documentation. The template slug is appended."""

    @_pydantic.field_validator("docs_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"


# =============================================================================
# Environment Settings
# =============================================================================


class EnvironmentConfig(ConfigBase):
    """
    Features of the host the theme runs in.

    YAML section: environment.*
    """

    active_plugins: list[str] = _pydantic.Field(
        default_factory=lambda: ["hivepress"]
    )
    """Slugs of active plugins (e.g. hivepress, woocommerce)."""

    admin: bool = False
    """Whether requests are handled in the admin dashboard context."""


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingConfig(ConfigBase):
    """
    Logging settings.

    YAML section: logging.*
    """

    level: _typing.Literal["debug", "info", "warning", "error"] = "warning"
    """Log level."""
