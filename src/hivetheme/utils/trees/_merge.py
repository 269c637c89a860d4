"""
Recursive merge of template trees.

Merge rules, applied at every matching key:
- Mapping into mapping: key union, merged recursively
- Anything else (scalar, list, or a type mismatch): override wins wholesale

Lists are atomic. An override list replaces the base list, there is no
element-wise merge.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy

import hivetheme.utils.trees._types as _types


def merge(base: _types.Tree, override: _types.Tree) -> _types.Tree:
    """
    Merge override into base, with override taking priority.

    Keys keep base's order; keys only present in override are appended in
    override's order. Neither argument is modified and the result shares no
    mutable containers with them.

    Args:
        base: The tree to merge into.
        override: The fragment to apply.

    Returns:
        New merged tree.

    Example:
        >>> merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}, "e": 5})
        {'a': 1, 'b': {'c': 2, 'd': 3}, 'e': 5}
    """
    if not (isinstance(base, _abc.Mapping) and isinstance(override, _abc.Mapping)):
        return _copy.deepcopy(override)

    result = {key: _copy.deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        if key in base:
            result[key] = merge(base[key], value)
        else:
            result[key] = _copy.deepcopy(value)
    return result


def with_order(node: _types.Tree, order: int | float) -> dict[str, _types.Tree]:
    """
    Return a copy of a mapping node with its order hint set.

    Non-mapping nodes are treated as empty mappings.

    Args:
        node: Block description to copy.
        order: Value for the `_order` key.

    Returns:
        New mapping with `_order` set (last if it wasn't present).
    """
    result = dict(_copy.deepcopy(node)) if isinstance(node, _abc.Mapping) else {}
    result[_types.ORDER_KEY] = order
    return result
