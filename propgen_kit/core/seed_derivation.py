"""
Split-path seed derivation.

Walks a root source along a recorded path so that a sub-stream used during
generation can be re-derived later for replay.
"""

from dataclasses import dataclass, field
from functools import reduce

from ..domain.split_path import Direction, SplitPath
from .types import RandomSource


def step(source: RandomSource, direction: Direction) -> RandomSource:
    """Take one child of ``source``."""
    left, right = source.split()
    return left if direction.is_left() else right


def follow_path(path: SplitPath, source: RandomSource) -> RandomSource:
    """
    Re-derive the sub-source at ``path`` below ``source``.

    Pure left fold over the path; the empty path returns ``source`` itself.
    Only ``split`` is used along the way, never ``bits``.
    """
    return reduce(step, path, source)


@dataclass(frozen=True)
class TracedSource:
    """
    Source wrapper that remembers the path from its root.

    Splitting a traced source yields traced children whose paths are extended
    by one direction, so any value drawn while generating can be attributed
    to a coordinate that ``follow_path`` can reproduce.
    """

    source: RandomSource
    path: SplitPath = field(default_factory=SplitPath.empty)

    def split(self) -> tuple["TracedSource", "TracedSource"]:
        left, right = self.source.split()
        return (
            TracedSource(left, self.path.left()),
            TracedSource(right, self.path.right()),
        )

    def bits(self) -> int:
        return self.source.bits()
