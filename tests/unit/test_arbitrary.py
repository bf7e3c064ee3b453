"""
Unit tests for sized generators, shrinkers and Arbitrary composition.
"""

import pytest

from propgen_kit.config import GeneratorConfig, set_config
from propgen_kit.core import arbitrary as arbitrary_module
from propgen_kit.core.arbitrary import (
    ARBITRARY_BOOL,
    ARBITRARY_INT,
    ARBITRARY_NAT,
    SIZED_INT,
    SIZED_NAT,
    Arbitrary,
    Shrinker,
    SizedGenerator,
    arbitrary_for,
    arbitrary_from,
    register_arbitrary,
    shrink_bool,
    shrink_candidates,
    shrink_int,
    shrink_nat,
)
from propgen_kit.core.generator import Gen, choose, elements
from propgen_kit.core.types import GenSized, Shrink
from propgen_kit.utilities.constants import ValidationError

from ..fixtures.sources import independent_sources


class TestShrinkers:
    """Test cases for the built-in shrink policies."""

    def test_shrink_bool(self):
        assert shrink_bool(True) == [False]
        assert shrink_bool(False) == []

    def test_shrink_nat_halves(self):
        assert shrink_nat(10) == [5, 2, 1, 0]
        assert shrink_nat(1) == [0]
        assert shrink_nat(0) == []

    def test_shrink_int_keeps_sign(self):
        assert shrink_int(6) == [3, 1, 0]
        assert shrink_int(-6) == [6, -3, -1, 0]
        assert shrink_int(0) == []

    def test_shrinker_returns_list(self):
        shrinker = Shrinker(lambda value: iter([value - 1]))
        assert shrinker.shrink(5) == [4]

    def test_shrink_candidates_limit(self):
        assert shrink_candidates(ARBITRARY_NAT, 2**40, limit=3) == [2**39, 2**38, 2**37]
        assert shrink_candidates(ARBITRARY_NAT, 100, limit=0) == []

    def test_shrink_candidates_default_limit_from_config(self):
        assert len(shrink_candidates(ARBITRARY_NAT, 1000)) == 10
        set_config(GeneratorConfig(shrink_limit=1))
        assert shrink_candidates(ARBITRARY_NAT, 1000) == [500]
        set_config(GeneratorConfig(shrink_limit=0))
        assert shrink_candidates(ARBITRARY_INT, -7) == []


class TestSizedGenerator:
    """Test cases for size-indexed generation."""

    def test_nat_within_size(self):
        for size in range(8):
            gen = SIZED_NAT.arbitrary_sized(size)
            for source in independent_sources(size, 50):
                assert 0 <= gen.generate(size, source) <= size

    def test_int_within_size(self):
        for size in range(8):
            gen = SIZED_INT.arbitrary_sized(size)
            for source in independent_sources(size, 50):
                assert -size <= gen.generate(size, source) <= size

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            SIZED_NAT.arbitrary_sized(-1)

    def test_plain_uses_ambient_size(self):
        plain = SIZED_NAT.plain()
        for source in independent_sources(4, 100):
            assert plain.generate(3, source) <= 3
        assert plain.generate(0, independent_sources(4, 1)[0]) == 0

    def test_plain_matches_sized_at_same_size(self, root_source):
        for size in range(5):
            expected = SIZED_INT.arbitrary_sized(size).generate(size, root_source)
            assert SIZED_INT.plain().generate(size, root_source) == expected


class TestArbitrary:
    """Test cases for the composed capability."""

    def test_arbitrary_from_composes(self, root_source):
        sized_gen = SizedGenerator(lambda size: choose(0, size * 2))
        shrinker = Shrinker(shrink_nat)
        composed = arbitrary_from(sized_gen, shrinker)

        assert composed.shrink(8) == [4, 2, 1, 0]
        assert composed.arbitrary().generate(3, root_source) == sized_gen.plain().generate(
            3, root_source
        )
        assert composed.arbitrary_sized(2).generate(9, root_source) == sized_gen.arbitrary_sized(
            2
        ).generate(9, root_source)

    def test_arbitrary_without_sized_generator(self):
        plain_only = Arbitrary(generator=Gen.pure(1), shrinker=Shrinker(lambda value: []))
        assert plain_only.arbitrary().generate(0, independent_sources(1, 1)[0]) == 1
        with pytest.raises(ValidationError):
            plain_only.arbitrary_sized(3)

    def test_builtin_bool_generates_both(self):
        values = {ARBITRARY_BOOL.arbitrary().generate(0, s) for s in independent_sources(9, 100)}
        assert values == {False, True}

    def test_protocols(self):
        assert isinstance(SIZED_NAT, GenSized)
        assert isinstance(ARBITRARY_INT, GenSized)
        assert isinstance(ARBITRARY_INT, Shrink)
        assert isinstance(Shrinker(shrink_int), Shrink)


class TestRegistry:
    """Test cases for Arbitrary lookup."""

    def test_builtin_lookup(self):
        assert arbitrary_for(bool) is ARBITRARY_BOOL
        assert arbitrary_for(int) is ARBITRARY_INT

    def test_unknown_type_raises(self):
        with pytest.raises(ValidationError):
            arbitrary_for(str)

    def test_register(self, monkeypatch):
        monkeypatch.setattr(arbitrary_module, "_ARBITRARIES", dict(arbitrary_module._ARBITRARIES))
        letters = arbitrary_from(
            SizedGenerator(lambda size: elements("abc"[: size + 1])),
            Shrinker(lambda value: ["a"] if value != "a" else []),
        )
        register_arbitrary(str, letters)

        assert arbitrary_for(str) is letters
        assert letters.arbitrary_sized(0).generate(0, independent_sources(1, 1)[0]) == "a"
