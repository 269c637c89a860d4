"""
Runtime capability queries.

The composition root asks the environment which features are available
(active plugins, admin context) once, before registering components. Tree
and template logic never query the environment directly.
"""

from __future__ import annotations

import abc as _abc
import typing as _typing

if _typing.TYPE_CHECKING:
    import hivetheme.config as config

ADMIN = "admin"
"""Feature present while handling an admin (dashboard) request."""

HIVEPRESS = "hivepress"
"""Marketplace plugin the theme integrates with."""

WOOCOMMERCE = "woocommerce"
"""Shop plugin providing the account pages."""


class Environment(_abc.ABC):
    """Answers whether a feature is available for the current request."""

    @_abc.abstractmethod
    def has(self, feature: str) -> bool:
        """
        Check if a feature is available.

        Args:
            feature: Plugin slug (e.g. "hivepress") or context name ("admin").

        Returns:
            True if the feature is available.
        """
        ...

    def has_all(self, features: _typing.Iterable[str]) -> bool:
        """Check if every feature in features is available."""
        return all(self.has(feature) for feature in features)


class StaticEnvironment(Environment):
    """Environment backed by a fixed set of feature names."""

    def __init__(self, features: _typing.Iterable[str] = ()) -> None:
        self._features = frozenset(features)

    def has(self, feature: str) -> bool:
        return feature in self._features

    @property
    def features(self) -> frozenset[str]:
        """All available features."""
        return self._features

    def __repr__(self) -> str:
        return f"StaticEnvironment({sorted(self._features)!r})"


class SettingsEnvironment(StaticEnvironment):
    """
    Environment read from settings.

    Active plugins come from `environment.active_plugins`; the `admin`
    feature is present when `environment.admin` is set.
    """

    def __init__(self, settings: config.Settings) -> None:
        features = set(settings.environment.active_plugins)
        if settings.environment.admin:
            features.add(ADMIN)
        super().__init__(features)
