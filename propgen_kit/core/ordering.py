"""
Ordering and interval capabilities.

Any type that can be sampled within bounds supplies an ``OrdType`` and a
``ChoosableFromInterval`` instance. The interval instance only has to embed
its type into offsets from the lower endpoint; the multi-word sampling itself
is shared through ``sample_wide``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..utilities.constants import InvalidInterval, OrderingLawViolation
from .sampler import sample_wide
from .types import RandomSource

T = TypeVar("T")


@dataclass(frozen=True)
class OrdType(Generic[T]):
    """Total order given by a ``leq`` relation."""

    name: str
    leq: Callable[[T, T], bool]

    def lt(self, a: T, b: T) -> bool:
        return self.leq(a, b) and not self.leq(b, a)

    def between(self, low: T, value: T, high: T) -> bool:
        """Check ``low <= value <= high``."""
        return self.leq(low, value) and self.leq(value, high)


def check_ordering_laws(ord_type: OrdType[T], a: T, b: T, c: T) -> list[str]:
    """
    Check the order laws on one triple of values.

    Returns:
        Descriptions of every violated law, empty when all hold
    """
    leq = ord_type.leq
    violations = []

    if not leq(a, a):
        violations.append(f"{ord_type.name}: leq is not reflexive at {a!r}")
    if leq(a, b) and leq(b, c) and not leq(a, c):
        violations.append(f"{ord_type.name}: leq is not transitive on {a!r}, {b!r}, {c!r}")
    if leq(a, b) and leq(b, a) and a != b:
        violations.append(f"{ord_type.name}: leq is not antisymmetric on {a!r}, {b!r}")
    if not (leq(a, b) or leq(b, a)):
        violations.append(f"{ord_type.name}: {a!r} and {b!r} are incomparable")

    return violations


def assert_ordering_laws(ord_type: OrdType[T], values: list[T]) -> None:
    """
    Check the order laws on every triple drawn from ``values``.

    Raises:
        OrderingLawViolation: With all violations found
    """
    violations = []
    for a in values:
        for b in values:
            for c in values:
                violations.extend(check_ordering_laws(ord_type, a, b, c))
    if violations:
        raise OrderingLawViolation("; ".join(sorted(set(violations))))


@dataclass(frozen=True)
class ChoosableFromInterval(Generic[T]):
    """
    Interval sampling capability for one type.

    Attributes:
        ord: Order used to validate and describe intervals
        contains_type: Domain check for endpoints
        width: ``width(low, high)`` number of steps from low to high
        offset: ``offset(low, k)`` value ``k`` steps above low
    """

    ord: OrdType[T]
    contains_type: Callable[[Any], bool]
    width: Callable[[T, T], int]
    offset: Callable[[T, int], T]

    @property
    def name(self) -> str:
        return self.ord.name

    def validate(self, low: T, high: T) -> None:
        """
        Check endpoints belong to the domain and ``low <= high``.

        Raises:
            InvalidInterval: On any violation
        """
        for endpoint in (low, high):
            if not self.contains_type(endpoint):
                raise InvalidInterval(f"{endpoint!r} is not a valid {self.name} endpoint")
        if not self.ord.leq(low, high):
            raise InvalidInterval(f"Empty {self.name} interval: low {low!r} > high {high!r}")

    def sample_range(self, source: RandomSource, low: T, high: T) -> T:
        """Draw a value in ``[low, high]`` using the shared wide sampler."""
        self.validate(low, high)
        steps = self.width(low, high)
        return self.offset(low, sample_wide(source, steps + 1))

    def reachable(self, low: T, high: T, value: T) -> bool:
        """The set of values sampling ``(low, high)`` can produce."""
        return self.contains_type(value) and self.ord.between(low, value, high)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_non_negative_int(value: Any) -> bool:
    return _is_int(value) and value >= 0


def _int_leq(a: int, b: int) -> bool:
    return a <= b


BOOL_ORD: OrdType[bool] = OrdType("bool", lambda a, b: (not a) or b)
NAT_ORD: OrdType[int] = OrdType("nat", _int_leq)
N_ORD: OrdType[int] = OrdType("N", _int_leq)
INT_ORD: OrdType[int] = OrdType("int", _int_leq)

BOOL_INTERVAL: ChoosableFromInterval[bool] = ChoosableFromInterval(
    ord=BOOL_ORD,
    contains_type=lambda value: isinstance(value, bool),
    width=lambda low, high: int(high) - int(low),
    offset=lambda low, k: bool(int(low) + k),
)

NAT_INTERVAL: ChoosableFromInterval[int] = ChoosableFromInterval(
    ord=NAT_ORD,
    contains_type=_is_non_negative_int,
    width=lambda low, high: high - low,
    offset=lambda low, k: low + k,
)

# Non-negative binary integers share the nat representation in Python
N_INTERVAL: ChoosableFromInterval[int] = ChoosableFromInterval(
    ord=N_ORD,
    contains_type=_is_non_negative_int,
    width=lambda low, high: high - low,
    offset=lambda low, k: low + k,
)

INT_INTERVAL: ChoosableFromInterval[int] = ChoosableFromInterval(
    ord=INT_ORD,
    contains_type=_is_int,
    width=lambda low, high: high - low,
    offset=lambda low, k: low + k,
)

_INTERVALS: dict[type, ChoosableFromInterval] = {
    bool: BOOL_INTERVAL,
    int: INT_INTERVAL,
}


def register_interval(python_type: type, instance: ChoosableFromInterval) -> None:
    """Make ``instance`` the default interval capability for ``python_type``."""
    _INTERVALS[python_type] = instance


def interval_for(value: Any) -> ChoosableFromInterval:
    """
    Resolve the interval capability for a value's type.

    The exact type is tried first so that bool never resolves to int.

    Raises:
        InvalidInterval: If no instance is registered for the type
    """
    instance = _INTERVALS.get(type(value))
    if instance is not None:
        return instance
    for python_type, candidate in _INTERVALS.items():
        if python_type is not bool and isinstance(value, python_type):
            return candidate
    raise InvalidInterval(f"No interval instance registered for {type(value).__name__}")
