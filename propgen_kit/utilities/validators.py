"""
Input validation utilities.

This module provides the precondition checks used by the sampler, the
interval instances and the configuration layer.
"""

from .constants import MAX_WORD, InvalidBound, ValidationError


def validate_positive_bound(bound: int, name: str = "bound") -> None:
    """Validate that a sample bound is a positive integer."""
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise InvalidBound(f"{name} must be an integer, got {type(bound).__name__}")
    if bound <= 0:
        raise InvalidBound(f"{name} must be positive, got {bound}")


def validate_non_negative(value: int, name: str) -> None:
    """Validate that an integer is zero or greater."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


def validate_positive_number(value: int, name: str) -> None:
    """Validate that a number is positive."""
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")


def validate_word(word: int) -> None:
    """Validate that a value fits in one random word."""
    if isinstance(word, bool) or not isinstance(word, int):
        raise ValidationError(f"word must be an integer, got {type(word).__name__}")
    if word < 0 or word > MAX_WORD:
        raise ValidationError(f"word must be between 0 and {MAX_WORD}, got {word}")


def parse_int_setting(raw: str, name: str) -> int:
    """Parse an integer setting, raising ValidationError on malformed text."""
    try:
        return int(raw.strip(), 0)
    except (ValueError, AttributeError) as e:
        raise ValidationError(f"{name} must be an integer, got {raw!r}") from e
