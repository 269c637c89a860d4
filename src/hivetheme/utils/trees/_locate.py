"""
Path lookup inside nested template trees.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing

import hivetheme.utils.trees._types as _types


def locate(tree: _types.Tree, path: _typing.Iterable[str]) -> _types.Tree:
    """
    Get the subtree found by descending through each key of path.

    A missing key, or a list or scalar reached while keys remain, is not an
    error: the result is an empty mapping.

    Args:
        tree: Tree to search. Any node is accepted for an empty path.
        path: Keys to descend through, outermost first.

    Returns:
        Independent copy of the subtree, or {} if path doesn't exist.

    Example:
        >>> locate({"a": {"b": 1}}, ["a", "b"])
        1
        >>> locate({"a": {"b": 1}}, ["a", "x"])
        {}
    """
    current = tree
    for key in path:
        if not isinstance(current, _abc.Mapping) or key not in current:
            return {}
        current = current[key]
    return _copy.deepcopy(current)
