"""
Size metrics and empirical checks of the sized-generator contracts.

A size metric assigns every value a natural number and carries two
set-builders, written as predicates: ``zero_sized`` is the set of values of
size 0 and ``succ_sized`` maps the set ``size <= n`` to ``size <= n + 1``.

The checkers below sample generators and report contract violations:

- monotonic: values reachable at size ``s1`` are reachable at any ``s2 >= s1``
- sized-correct: values reachable at size ``s`` are exactly ``size <= s``
- plain-correct: both of the above, plus the union over sizes covers the
  whole candidate domain

Violations are reported as strings by ``check_*`` and raised as
``ContractViolation`` subclasses by ``assert_*``.
"""

import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..utilities.constants import (
    IncorrectGenerator,
    MalformedSizeMetric,
    NonMonotonicGenerator,
    ValidationError,
)
from ..utilities.validators import validate_non_negative, validate_positive_number
from .generator import Gen, sized
from .types import GenSized, RandomSource

logger = logging.getLogger(__name__)

A = TypeVar("A")
Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class SizeBound:
    """Predicate ``size(value) <= bound`` that remembers its bound."""

    size: Callable[[Any], int]
    bound: int

    def __call__(self, value: Any) -> bool:
        return self.size(value) <= self.bound


@dataclass(frozen=True)
class SizeMetric(Generic[A]):
    """Size function with its zero and successor set-builders."""

    size: Callable[[A], int]
    zero_sized: Predicate
    succ_sized: Callable[[Predicate], Predicate]

    @classmethod
    def canonical(cls, size_fn: Callable[[A], int]) -> "SizeMetric[A]":
        """
        Metric whose set-builders are derived from ``size_fn`` alone.

        The successor only accepts ``SizeBound`` predicates, as produced by
        ``within`` and by this metric's own ``zero_sized`` and ``succ_sized``.
        """

        def succ_sized(within: Predicate) -> SizeBound:
            if not isinstance(within, SizeBound):
                raise ValidationError("canonical succ_sized needs a SizeBound predicate")
            return SizeBound(size_fn, within.bound + 1)

        return cls(size=size_fn, zero_sized=SizeBound(size_fn, 0), succ_sized=succ_sized)

    def within(self, n: int) -> SizeBound:
        """Predicate for ``size(value) <= n`` computed from the size function."""
        return SizeBound(self.size, n)

    def level(self, n: int) -> Predicate:
        """Predicate for the n-th set built from ``zero_sized`` by ``succ_sized``."""
        validate_non_negative(n, "n")
        predicate = self.zero_sized
        for _ in range(n):
            predicate = self.succ_sized(predicate)
        return predicate


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


BOOL_SIZE: SizeMetric[bool] = SizeMetric(
    size=lambda value: 0,
    zero_sized=lambda value: True,
    succ_sized=lambda within: (lambda value: True),
)

NAT_SIZE: SizeMetric[int] = SizeMetric(
    size=lambda value: value,
    zero_sized=lambda value: value == 0,
    succ_sized=lambda within: (lambda value: value == 0 or within(value - 1)),
)

INT_SIZE: SizeMetric[int] = SizeMetric(
    size=abs,
    zero_sized=lambda value: value == 0,
    succ_sized=lambda within: (lambda value: value == 0 or within(value - _sign(value))),
)


def _samples_or_default(samples: int | None) -> int:
    if samples is None:
        from ..config import get_config

        samples = get_config().check_samples
    validate_positive_number(samples, "samples")
    return samples


def _gen_at(sized_gen: Any, size: int) -> Gen:
    if isinstance(sized_gen, GenSized):
        return sized_gen.arbitrary_sized(size)
    return sized_gen(size)


def check_size_metric(metric: SizeMetric[A], values: Iterable[A], max_size: int) -> list[str]:
    """
    Check the zero and successor relations on sampled values.

    Returns:
        Descriptions of every violation, empty when the metric is consistent
    """
    validate_non_negative(max_size, "max_size")
    values = list(values)
    violations = []

    sized_values = []
    for value in values:
        size = metric.size(value)
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            violations.append(f"size({value!r}) = {size!r} is not a natural number")
            continue
        sized_values.append((value, size))
        if metric.zero_sized(value) != (size == 0):
            violations.append(f"zero_sized({value!r}) disagrees with size {size}")

    for n in range(max_size + 1):
        successor = metric.succ_sized(metric.within(n))
        for value, size in sized_values:
            expected = size <= n + 1
            actual = successor(value)
            if actual != expected:
                violations.append(
                    f"succ_sized(size <= {n}) contains {value!r} = {actual}, expected {expected}"
                )

    return violations


def assert_size_metric(metric: SizeMetric[A], values: Iterable[A], max_size: int) -> None:
    """Raise MalformedSizeMetric if ``check_size_metric`` finds violations."""
    violations = check_size_metric(metric, values, max_size)
    if violations:
        logger.warning(f"Size metric check found {len(violations)} violations")
        raise MalformedSizeMetric("; ".join(violations[:10]))


def reachable_values(
    gen: Gen[A], size: int, source: RandomSource, samples: int | None = None
) -> set[A]:
    """
    Empirical set of values ``gen`` produces at ``size``.

    Each draw uses a fresh left child of the running source. Values must be
    hashable.
    """
    samples = _samples_or_default(samples)
    values: set[Hashable] = set()
    current = source
    for _ in range(samples):
        left, current = current.split()
        values.add(gen.generate(size, left))
    return values


def _reachable_by_size(
    sized_gen: Any, sizes: list[int], fuel: int | None, source: RandomSource, samples: int
) -> dict[int, set]:
    """Reachable sets per size; ambient size is ``fuel`` or the size itself."""
    reachable = {}
    current = source
    for size in sizes:
        left, current = current.split()
        ambient = size if fuel is None else fuel
        reachable[size] = reachable_values(_gen_at(sized_gen, size), ambient, left, samples)
    return reachable


def check_monotonic(
    sized_gen: Any,
    sizes: Iterable[int],
    fuels: Iterable[int],
    source: RandomSource,
    samples: int | None = None,
) -> list[str]:
    """
    Check that growing the size never loses values, for every fuel.

    ``fuel`` is the ambient size the generator runs at, held fixed while the
    size index varies.
    """
    samples = _samples_or_default(samples)
    sizes = sorted(set(sizes))
    violations = []
    current = source

    for fuel in fuels:
        left, current = current.split()
        reachable = _reachable_by_size(sized_gen, sizes, fuel, left, samples)
        for i, small in enumerate(sizes):
            for large in sizes[i + 1 :]:
                lost = reachable[small] - reachable[large]
                if lost:
                    violations.append(
                        f"fuel {fuel}: values {sorted(lost, key=repr)!r} reachable at size "
                        f"{small} but not at size {large}"
                    )

    return violations


def assert_monotonic(
    sized_gen: Any,
    sizes: Iterable[int],
    fuels: Iterable[int],
    source: RandomSource,
    samples: int | None = None,
) -> None:
    """Raise NonMonotonicGenerator if ``check_monotonic`` finds violations."""
    violations = check_monotonic(sized_gen, sizes, fuels, source, samples)
    if violations:
        logger.warning(f"Monotonicity check found {len(violations)} violations")
        raise NonMonotonicGenerator("; ".join(violations[:10]))


def check_sized_correct(
    sized_gen: Any,
    metric: SizeMetric[A],
    sizes: Iterable[int],
    domain: Iterable[A],
    source: RandomSource,
    samples: int | None = None,
) -> list[str]:
    """
    Check that the values reachable at size ``s`` are exactly ``size <= s``.

    Soundness is checked on every generated value; completeness on the
    finite candidate ``domain``.
    """
    samples = _samples_or_default(samples)
    sizes = sorted(set(sizes))
    domain = list(domain)
    reachable = _reachable_by_size(sized_gen, sizes, None, source, samples)
    violations = []

    for size in sizes:
        too_big = [value for value in reachable[size] if metric.size(value) > size]
        if too_big:
            violations.append(
                f"size {size}: generated oversized values {sorted(too_big, key=repr)!r}"
            )
        missing = [
            value
            for value in domain
            if metric.size(value) <= size and value not in reachable[size]
        ]
        if missing:
            violations.append(f"size {size}: never generated {missing!r}")

    return violations


def assert_sized_correct(
    sized_gen: Any,
    metric: SizeMetric[A],
    sizes: Iterable[int],
    domain: Iterable[A],
    source: RandomSource,
    samples: int | None = None,
) -> None:
    """Raise IncorrectGenerator if ``check_sized_correct`` finds violations."""
    violations = check_sized_correct(sized_gen, metric, sizes, domain, source, samples)
    if violations:
        logger.warning(f"Sized correctness check found {len(violations)} violations")
        raise IncorrectGenerator("; ".join(violations[:10]))


def check_plain_correct(
    sized_gen: Any,
    metric: SizeMetric[A],
    sizes: Iterable[int],
    domain: Iterable[A],
    source: RandomSource,
    samples: int | None = None,
) -> list[str]:
    """
    Check correctness of the plain generator derived from ``sized_gen``.

    Follows from monotonicity and sized correctness; the union of the
    plain generator's values over ``sizes`` is also checked to cover every
    candidate whose size is within the largest size.
    """
    samples = _samples_or_default(samples)
    sizes = sorted(set(sizes))
    domain = list(domain)
    monotonic_source, correct_source, plain_source = _three_way(source)

    violations = check_monotonic(sized_gen, sizes, sizes, monotonic_source, samples)
    violations += check_sized_correct(sized_gen, metric, sizes, domain, correct_source, samples)

    plain = _plain_of(sized_gen)
    covered: set = set()
    current = plain_source
    for size in sizes:
        left, current = current.split()
        covered |= reachable_values(plain, size, left, samples)
    largest = sizes[-1] if sizes else 0
    uncovered = [
        value for value in domain if metric.size(value) <= largest and value not in covered
    ]
    if uncovered:
        violations.append(f"plain generator never produced {uncovered!r}")

    return violations


def assert_plain_correct(
    sized_gen: Any,
    metric: SizeMetric[A],
    sizes: Iterable[int],
    domain: Iterable[A],
    source: RandomSource,
    samples: int | None = None,
) -> None:
    """Raise IncorrectGenerator if ``check_plain_correct`` finds violations."""
    violations = check_plain_correct(sized_gen, metric, sizes, domain, source, samples)
    if violations:
        logger.warning(f"Plain correctness check found {len(violations)} violations")
        raise IncorrectGenerator("; ".join(violations[:10]))


def _three_way(source: RandomSource) -> tuple[RandomSource, RandomSource, RandomSource]:
    first, rest = source.split()
    second, third = rest.split()
    return first, second, third


def _plain_of(sized_gen: Any) -> Gen:
    plain = getattr(sized_gen, "plain", None)
    if plain is not None:
        return plain()
    return sized(sized_gen)
