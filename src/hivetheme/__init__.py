"""
hivetheme - HivePress integration layer for the ListingHive theme

Registers theme callbacks on HivePress extension points and rewrites
template descriptions by merging small override trees into them.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("hivetheme")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "HivePress Contributors"

from hivetheme.config import Settings  # noqa: E402
from hivetheme.theme import Theme  # noqa: E402

__all__ = ["__version__", "__version_info__", "Settings", "Theme"]
