"""
Test fixtures package for propgen-kit.

Provides exact source trees and helpers for drawing independent sources.
"""

from .sources import (
    RecordingSource,
    SourceFixtures,
    independent_sources,
    source_for_offset,
    unmix64,
)

__all__ = [
    "RecordingSource",
    "SourceFixtures",
    "independent_sources",
    "source_for_offset",
    "unmix64",
]
