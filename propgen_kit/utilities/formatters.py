"""
Formatting utilities for random words, split paths and sources.

Used by logging and reprs so that seeds and coordinates can be copied out of
a log and fed back into replay tooling.
"""

from collections.abc import Iterable

from .constants import WORD_BITS


def format_word(word: int) -> str:
    """Format a random word as zero-padded hex."""
    digits = (WORD_BITS + 3) // 4
    return f"0x{word:0{digits}x}"


def format_path(directions: Iterable) -> str:
    """Format a sequence of directions as 'LRRL', or '<root>' when empty."""
    text = "".join(str(direction.value) for direction in directions)
    return text or "<root>"


def format_source(source: object) -> str:
    """Short human-readable description of a random source."""
    seed = getattr(source, "seed", None)
    gamma = getattr(source, "gamma", None)
    if seed is None or gamma is None:
        return repr(source)
    return f"{type(source).__name__}(seed={seed:#018x}, gamma={gamma:#018x})"
