"""
CLI module for hivetheme.

Provides the command-line interface using Click.
"""

from hivetheme.cli.main import cli, main

__all__ = ["main", "cli"]
