"""
Size-indexed generation, shrinking, and their composition.

``SizedGenerator`` and ``Shrinker`` are independent capabilities.
``Arbitrary`` is their union and adds no behaviour of its own. A plain
generator is always obtained from a sized one through ``SizedGenerator.plain``,
which reads the ambient size at generation time.
"""

from collections.abc import Callable
from dataclasses import dataclass
from itertools import islice
from typing import Generic, TypeVar

from ..utilities.constants import ValidationError
from ..utilities.validators import validate_non_negative
from .generator import Gen, choose, elements, sized

A = TypeVar("A")


@dataclass(frozen=True)
class SizedGenerator(Generic[A]):
    """Generator family indexed by a size budget."""

    fn: Callable[[int], Gen[A]]

    def arbitrary_sized(self, size: int) -> Gen[A]:
        validate_non_negative(size, "size")
        return self.fn(size)

    def plain(self) -> Gen[A]:
        """The size-independent generator: delegate at the ambient size."""
        return sized(self.fn)


@dataclass(frozen=True)
class Shrinker(Generic[A]):
    """Finite list of smaller candidates for a value."""

    fn: Callable[[A], list[A]]

    def shrink(self, value: A) -> list[A]:
        return list(self.fn(value))


@dataclass(frozen=True)
class Arbitrary(Generic[A]):
    """Generation and shrinking for one type."""

    generator: Gen[A]
    shrinker: Shrinker[A]
    sized_generator: SizedGenerator[A] | None = None

    def arbitrary(self) -> Gen[A]:
        return self.generator

    def arbitrary_sized(self, size: int) -> Gen[A]:
        if self.sized_generator is None:
            raise ValidationError("This Arbitrary was not built from a sized generator")
        return self.sized_generator.arbitrary_sized(size)

    def shrink(self, value: A) -> list[A]:
        return self.shrinker.shrink(value)


def arbitrary_from(sized_generator: SizedGenerator[A], shrinker: Shrinker[A]) -> Arbitrary[A]:
    """Combine a sized generator and a shrinker into an Arbitrary."""
    return Arbitrary(
        generator=sized_generator.plain(),
        shrinker=shrinker,
        sized_generator=sized_generator,
    )


def shrink_candidates(arbitrary: Arbitrary[A], value: A, limit: int | None = None) -> list[A]:
    """First ``limit`` shrink candidates of ``value``, defaulting to the configured limit."""
    if limit is None:
        from ..config import get_config

        limit = get_config().shrink_limit
    validate_non_negative(limit, "limit")
    return list(islice(arbitrary.shrink(value), limit))


def shrink_bool(value: bool) -> list[bool]:
    """True shrinks to False; False is minimal."""
    return [False] if value else []


def shrink_nat(value: int) -> list[int]:
    """Halve repeatedly toward zero: 10 -> [5, 2, 1, 0]."""
    candidates = []
    while value > 0:
        value //= 2
        candidates.append(value)
    return candidates


def shrink_int(value: int) -> list[int]:
    """
    Shrink toward zero keeping the sign.

    A negative value also offers its positive mirror first.
    """
    magnitude = abs(value)
    candidates = [magnitude] if value < 0 else []
    sign = -1 if value < 0 else 1
    candidates.extend(sign * candidate for candidate in shrink_nat(magnitude))
    return candidates


def _bool_sized(size: int) -> Gen[bool]:
    return elements([False, True])


def _nat_sized(size: int) -> Gen[int]:
    return choose(0, size)


def _int_sized(size: int) -> Gen[int]:
    return choose(-size, size)


SIZED_BOOL: SizedGenerator[bool] = SizedGenerator(_bool_sized)
SIZED_NAT: SizedGenerator[int] = SizedGenerator(_nat_sized)
SIZED_INT: SizedGenerator[int] = SizedGenerator(_int_sized)

ARBITRARY_BOOL: Arbitrary[bool] = arbitrary_from(SIZED_BOOL, Shrinker(shrink_bool))
ARBITRARY_NAT: Arbitrary[int] = arbitrary_from(SIZED_NAT, Shrinker(shrink_nat))
ARBITRARY_INT: Arbitrary[int] = arbitrary_from(SIZED_INT, Shrinker(shrink_int))

_ARBITRARIES: dict[type, Arbitrary] = {
    bool: ARBITRARY_BOOL,
    int: ARBITRARY_INT,
}


def register_arbitrary(python_type: type, arbitrary: Arbitrary) -> None:
    """Make ``arbitrary`` the default instance for ``python_type``."""
    _ARBITRARIES[python_type] = arbitrary


def arbitrary_for(python_type: type) -> Arbitrary:
    """
    Look up the registered Arbitrary for a type.

    Raises:
        ValidationError: If the type has no instance
    """
    try:
        return _ARBITRARIES[python_type]
    except KeyError as e:
        raise ValidationError(f"No Arbitrary registered for {python_type.__name__}") from e
