"""
Services package for propgen-kit.

Contains tooling built on the core, such as replaying a recorded generation
path.
"""

from .replay_service import ReplayService

__all__ = ["ReplayService"]
