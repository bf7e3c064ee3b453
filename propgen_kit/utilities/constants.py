"""
Constants and error types for propgen-kit.

Word sizes, SplitMix parameters and defaults live here together with the
exception hierarchy used throughout the package.
"""

# Random words are 63 bits wide to stay clear of sign issues in 64-bit code
WORD_BITS = 63
MAX_WORD = (1 << WORD_BITS) - 1

MASK_64 = (1 << 64) - 1
GOLDEN_GAMMA = 0x9E3779B97F4A7C15

# Generation defaults
DEFAULT_MAX_SIZE = 10
DEFAULT_CHECK_SAMPLES = 1000
DEFAULT_SHRINK_LIMIT = 64
SUCH_THAT_MAYBE_TRIES = 10

# Environment variable names
ENV_SEED = "PROPGEN_SEED"
ENV_MAX_SIZE = "PROPGEN_MAX_SIZE"
ENV_CHECK_SAMPLES = "PROPGEN_CHECK_SAMPLES"
ENV_SHRINK_LIMIT = "PROPGEN_SHRINK_LIMIT"


class ValidationError(ValueError):
    """Raised when a caller violates a documented precondition."""

    pass


class InvalidBound(ValidationError):
    """Raised when a sample bound is not a positive integer."""

    pass


class InvalidInterval(ValidationError):
    """Raised when an interval is empty or its endpoints are out of domain."""

    pass


class ContractViolation(AssertionError):
    """Base class for generator and size-metric contract failures found by checkers."""

    pass


class MalformedSizeMetric(ContractViolation):
    """Size function and its set-builders disagree."""

    pass


class NonMonotonicGenerator(ContractViolation):
    """A larger size produced fewer values than a smaller one."""

    pass


class IncorrectGenerator(ContractViolation):
    """Generated values do not match the size metric's sets."""

    pass


class OrderingLawViolation(ContractViolation):
    """An ordering is not a reflexive, transitive, antisymmetric total order."""

    pass
