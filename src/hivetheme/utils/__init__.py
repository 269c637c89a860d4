"""
Utility functions for hivetheme.

General-purpose helpers that don't belong to a specific component.
"""

import hivetheme.utils.trees as trees

__all__ = ["trees"]
