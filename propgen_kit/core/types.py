"""
Shared protocol types for structural typing across the generation layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .generator import Gen

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)


@runtime_checkable
class RandomSource(Protocol):
    """Minimal contract of a node in the splittable random tree.

    A node can either be split into two independent children or asked for
    one word. Callers use a node for one of the two, never both.
    """

    def split(self) -> tuple[RandomSource, RandomSource]: ...

    def bits(self) -> int: ...


@runtime_checkable
class GenSized(Protocol[A_co]):
    """Size-indexed generation capability."""

    def arbitrary_sized(self, size: int) -> Gen[A_co]: ...


@runtime_checkable
class Shrink(Protocol[A]):
    """Shrinking capability: finite list of smaller candidates."""

    def shrink(self, value: A) -> list[A]: ...
