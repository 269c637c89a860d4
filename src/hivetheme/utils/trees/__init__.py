"""
Template tree lookup and merging.

Trees are plain nested dicts, lists and scalars describing a page's blocks.
Both operations are pure: they never modify their arguments.

Example:
    >>> from hivetheme.utils import trees
    >>> template = {"blocks": {"title": {"tag": "h2"}}}
    >>> trees.locate(template, ["blocks", "title"])
    {'tag': 'h2'}
    >>> trees.merge(template, {"blocks": {"title": {"tag": "h3"}}})
    {'blocks': {'title': {'tag': 'h3'}}}
"""

from hivetheme.utils.trees._locate import locate
from hivetheme.utils.trees._merge import merge, with_order
from hivetheme.utils.trees._types import ORDER_KEY, Path, Tree

__all__ = ["ORDER_KEY", "Path", "Tree", "locate", "merge", "with_order"]
