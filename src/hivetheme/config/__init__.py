"""
Configuration module for hivetheme.

Uses pydantic-settings for environment variable loading and layered YAML
files for persistent configuration.
"""

from hivetheme.config.settings import Settings, find_project_root
from hivetheme.config.sources import ConfigFileError

__all__ = ["ConfigFileError", "Settings", "find_project_root"]
