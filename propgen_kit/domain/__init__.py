"""
Domain value objects for propgen-kit.
"""

from .split_path import Direction, SplitPath

__all__ = ["Direction", "SplitPath"]
