"""
SplitPath value object for coordinates in the random tree.

A path is an ordered sequence of left/right choices taken from a root source.
Recording the path of a sub-stream lets replay tooling re-derive exactly that
sub-stream from the same root seed.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from ..utilities.constants import ValidationError
from ..utilities.formatters import format_path


class Direction(Enum):
    """Branch taken when splitting a source."""

    LEFT = "L"
    RIGHT = "R"

    def is_left(self) -> bool:
        """Check if this direction takes the first child."""
        return self == Direction.LEFT

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """Parse 'L' or 'R' (case-insensitive)."""
        try:
            return cls(char.upper())
        except ValueError as e:
            raise ValidationError(f"Invalid direction: {char!r}. Expected 'L' or 'R'") from e


@dataclass(frozen=True)
class SplitPath:
    """
    Immutable sequence of split directions.

    Paths compose left to right: ``a + b`` first walks ``a`` and then ``b``.
    """

    directions: tuple[Direction, ...] = ()

    def __post_init__(self):
        """Normalise to a tuple and validate members."""
        directions = tuple(self.directions)
        for direction in directions:
            if not isinstance(direction, Direction):
                raise ValidationError(f"Split path entries must be Direction, got: {direction!r}")
        object.__setattr__(self, "directions", directions)

    @classmethod
    def empty(cls) -> "SplitPath":
        """The root coordinate."""
        return cls(())

    @classmethod
    def of(cls, directions: Iterable[Direction]) -> "SplitPath":
        """Create a path from any iterable of directions."""
        return cls(tuple(directions))

    @classmethod
    def from_string(cls, text: str) -> "SplitPath":
        """
        Parse a path written as letters, e.g. 'LRRL'.

        The root marker '<root>' and the empty string both give the empty path.
        """
        text = text.strip()
        if text in ("", "<root>"):
            return cls.empty()
        return cls(tuple(Direction.from_char(char) for char in text))

    def then(self, direction: Direction) -> "SplitPath":
        """Extend the path by one step."""
        return SplitPath(self.directions + (direction,))

    def left(self) -> "SplitPath":
        return self.then(Direction.LEFT)

    def right(self) -> "SplitPath":
        return self.then(Direction.RIGHT)

    def is_prefix_of(self, other: "SplitPath") -> bool:
        """Check if ``other`` continues this path."""
        return other.directions[: len(self.directions)] == self.directions

    def to_string(self) -> str:
        """Convert to the letter representation accepted by from_string."""
        return format_path(self.directions)

    def __add__(self, other: "SplitPath") -> "SplitPath":
        return SplitPath(self.directions + other.directions)

    def __len__(self) -> int:
        return len(self.directions)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self.directions)

    def __str__(self) -> str:
        return self.to_string()
