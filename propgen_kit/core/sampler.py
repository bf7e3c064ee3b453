"""
Bounded sampling on top of splittable random sources.

Values are produced by reducing random words modulo the bound. The result is
approximately uniform: with ``MAX = MAX_WORD`` every outcome has probability
between ``floor(MAX / bound) / MAX`` and ``(floor(MAX / bound) + 1) / MAX``.
Bounds wider than one word are served by accumulating several words, taking
each from a fresh left child of the source.
"""

from fractions import Fraction

from ..utilities.constants import MAX_WORD, WORD_BITS
from ..utilities.validators import validate_positive_bound
from .types import RandomSource


def sample(source: RandomSource, bound: int) -> int:
    """
    Draw a value in ``[0, bound - 1]`` from a single word.

    Raises:
        InvalidBound: If ``bound`` is not a positive integer
    """
    validate_positive_bound(bound)
    return source.bits() % bound


def chunks_for_bound(bound: int) -> int:
    """Number of words needed to cover every offset below ``bound``."""
    validate_positive_bound(bound)
    needed = (bound - 1).bit_length()
    return max(1, -(-needed // WORD_BITS))


def sample_wide(source: RandomSource, bound: int) -> int:
    """
    Draw a value in ``[0, bound - 1]`` for bounds of any size.

    For ``k`` chunks the source is split ``k - 1`` times; each left child
    contributes one word and the walk continues on the right child, whose own
    word is the last chunk. Words are accumulated most significant first.
    With a single chunk this is exactly ``sample``.
    """
    chunks = chunks_for_bound(bound)
    accumulated = 0
    current = source
    for _ in range(chunks - 1):
        left, current = current.split()
        accumulated = (accumulated << WORD_BITS) | left.bits()
    accumulated = (accumulated << WORD_BITS) | current.bits()
    return accumulated % bound


def overrepresented_count(bound: int) -> int:
    """Number of outcomes that receive one extra preimage under modulo reduction."""
    validate_positive_bound(bound)
    return MAX_WORD % bound


def bias_window(bound: int) -> tuple[Fraction, Fraction]:
    """
    Analytic probability window of a single-word draw.

    Returns:
        (min_probability, max_probability) for any single outcome, as exact
        fractions
    """
    validate_positive_bound(bound)
    per_outcome = MAX_WORD // bound
    return Fraction(per_outcome, MAX_WORD), Fraction(per_outcome + 1, MAX_WORD)


def sample_range(source: RandomSource, low, high, instance=None):
    """
    Draw a value in the closed interval ``[low, high]``.

    The interval instance is resolved from the type of ``low`` unless given
    explicitly.

    Raises:
        InvalidInterval: If ``low > high`` or an endpoint is out of domain
    """
    from .ordering import interval_for

    if instance is None:
        instance = interval_for(low)
    return instance.sample_range(source, low, high)
