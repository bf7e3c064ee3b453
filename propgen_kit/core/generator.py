"""
Generator primitives.

A ``Gen`` maps an ambient size and a random source to a value. Generators
never hand back the unused part of the source: composition splits the source
instead, giving each part of a composite value its own independent subtree.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, TypeVar

from ..utilities.constants import SUCH_THAT_MAYBE_TRIES, ValidationError
from ..utilities.validators import validate_non_negative
from .ordering import ChoosableFromInterval, interval_for
from .sampler import sample_wide
from .types import GenSized, RandomSource

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


class Gen(Generic[A]):
    """Generator of values of type ``A``."""

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[int, RandomSource], A]) -> None:
        self._run = run

    @classmethod
    def pure(cls, value: A) -> "Gen[A]":
        """Generator that always returns ``value`` and ignores its source."""
        return cls(lambda size, source: value)

    def generate(self, size: int, source: RandomSource) -> A:
        """
        Run the generator.

        Args:
            size: Ambient size budget (non-negative)
            source: Random source, used once
        """
        validate_non_negative(size, "size")
        return self._run(size, source)

    def map(self, fn: Callable[[A], B]) -> "Gen[B]":
        """Apply ``fn`` to every generated value."""
        run = self._run
        return Gen(lambda size, source: fn(run(size, source)))

    def bind(self, fn: Callable[[A], "Gen[B]"]) -> "Gen[B]":
        """
        Sequence two generators.

        The left child of the source feeds this generator, the right child
        feeds the generator chosen by ``fn``.
        """
        run = self._run

        def bound(size: int, source: RandomSource) -> B:
            left, right = source.split()
            return fn(run(size, left))._run(size, right)

        return Gen(bound)


def sized(fn: Callable[[int], Gen[A]]) -> Gen[A]:
    """Build a generator from one indexed by the ambient size."""
    return Gen(lambda size, source: fn(size)._run(size, source))


def resize(size: int, gen: Gen[A]) -> Gen[A]:
    """Run ``gen`` at a fixed size regardless of the ambient one."""
    validate_non_negative(size, "size")
    return Gen(lambda _size, source: gen._run(size, source))


def choose(low, high, instance: ChoosableFromInterval | None = None) -> Gen:
    """
    Generator of values in ``[low, high]``.

    The interval is validated when the generator is built.

    Raises:
        InvalidInterval: If ``low > high`` or endpoints are out of domain
    """
    if instance is None:
        instance = interval_for(low)
    instance.validate(low, high)
    return Gen(lambda size, source: instance.sample_range(source, low, high))


def elements(values: Iterable[A]) -> Gen[A]:
    """Pick one of ``values`` uniformly."""
    pool = list(values)
    if not pool:
        raise ValidationError("elements requires at least one value")
    return Gen(lambda size, source: pool[sample_wide(source, len(pool))])


def one_of(gens: Sequence[Gen[A]]) -> Gen[A]:
    """Pick one of ``gens`` uniformly and run it."""
    pool = list(gens)
    if not pool:
        raise ValidationError("one_of requires at least one generator")
    return choose(0, len(pool) - 1).bind(pool.__getitem__)


def such_that_maybe(
    gen: Gen[A], predicate: Callable[[A], bool], tries: int = SUCH_THAT_MAYBE_TRIES
) -> Gen[A | None]:
    """
    Generate a value satisfying ``predicate``, or None.

    Each retry draws from a fresh left child and runs ``gen`` at a larger
    size (``2 * size + attempt``).
    """
    validate_non_negative(tries, "tries")

    def run(size: int, source: RandomSource) -> A | None:
        current = source
        for attempt in range(tries):
            left, current = current.split()
            value = gen._run(2 * size + attempt, left)
            if predicate(value):
                return value
        return None

    return Gen(run)


def sample(
    gen: Gen[A], source: RandomSource | None = None, sizes: Iterable[int] | None = None
) -> list[A]:
    """
    Draw one value per size.

    Defaults to a fresh root source and sizes ``0..max_size`` from the
    process configuration.
    """
    if source is None or sizes is None:
        from ..config import get_config

        config = get_config()
        if sizes is None:
            sizes = config.sizes()
        if source is None:
            from .random_source import new_random_source

            source = new_random_source(config)

    values = []
    current = source
    for size in sizes:
        validate_non_negative(size, "size")
        left, current = current.split()
        values.append(gen._run(size, left))

    logger.debug(f"Sampled {len(values)} values")
    return values


def generate(sized_gen: Any, size: int, source: RandomSource):
    """
    Generate one value from a size-indexed generator at ``size``.

    Accepts anything with ``arbitrary_sized`` or a plain ``size -> Gen``
    callable.
    """
    if isinstance(sized_gen, GenSized):
        gen = sized_gen.arbitrary_sized(size)
    else:
        gen = sized_gen(size)
    return gen.generate(size, source)
