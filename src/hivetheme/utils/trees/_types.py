"""
Type aliases for template-description trees.

- Tree: a mapping node, a list node, or a scalar leaf
- Path: tuple of keys locating a node inside nested mappings
"""

from __future__ import annotations

import typing as _typing

# A tree node is a dict (mapping node), a list (list node) or a scalar.
# Scalars are never descended into.
if _typing.TYPE_CHECKING:
    Tree: _typing.TypeAlias = (
        "dict[str, Tree] | list[Tree] | str | int | float | bool | None"
    )
else:
    Tree: _typing.TypeAlias = _typing.Any

# Example: ("blocks", "listing_category") is template["blocks"]["listing_category"]
Path: _typing.TypeAlias = tuple[str, ...]

ORDER_KEY = "_order"
"""Sibling order hint consulted by the block renderer."""
