"""
Theme components.

Each component registers the callbacks for one integration.
"""

from hivetheme.components.base import Component, ComponentContext
from hivetheme.components.hivepress import HivePress

BUILTIN_COMPONENTS: tuple[type[Component], ...] = (HivePress,)
"""Components the theme tries to load, in registration order."""

__all__ = ["BUILTIN_COMPONENTS", "Component", "ComponentContext", "HivePress"]
