"""
Utilities package for propgen-kit.

Constants, error types, validators and formatters shared by the core.
"""

from .constants import (
    MAX_WORD,
    WORD_BITS,
    ContractViolation,
    IncorrectGenerator,
    InvalidBound,
    InvalidInterval,
    MalformedSizeMetric,
    NonMonotonicGenerator,
    OrderingLawViolation,
    ValidationError,
)
from .formatters import format_path, format_source, format_word
from .validators import (
    validate_non_negative,
    validate_positive_bound,
    validate_positive_number,
    validate_word,
)

__all__ = [
    # Constants
    "MAX_WORD",
    "WORD_BITS",
    # Errors
    "ContractViolation",
    "IncorrectGenerator",
    "InvalidBound",
    "InvalidInterval",
    "MalformedSizeMetric",
    "NonMonotonicGenerator",
    "OrderingLawViolation",
    "ValidationError",
    # Formatting utilities
    "format_path",
    "format_source",
    "format_word",
    # Validation utilities
    "validate_non_negative",
    "validate_positive_bound",
    "validate_positive_number",
    "validate_word",
]
