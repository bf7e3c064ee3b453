"""
Property-based tests for splittable random sources.

Checks determinism and path composition with Hypothesis, word coverage by
inverting the output mixer, and fixed-seed statistical checks that split
children behave like independent streams.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from propgen_kit.core.random_source import SplitMixSource, mix64, new_root_source
from propgen_kit.core.seed_derivation import TracedSource, follow_path
from propgen_kit.domain.split_path import SplitPath
from propgen_kit.utilities.constants import GOLDEN_GAMMA, MASK_64, MAX_WORD, WORD_BITS

from ..fixtures.sources import RecordingSource, independent_sources, unmix64

CI_SETTINGS = settings(max_examples=200, deadline=None)

seeds = st.integers(min_value=-(2**80), max_value=2**80)
paths = st.text(alphabet="LR", max_size=24).map(SplitPath.from_string)
words = st.integers(min_value=0, max_value=MAX_WORD)


@pytest.mark.property
class TestDeterminismProperties:
    """Equal nodes produce equal trees."""

    @CI_SETTINGS
    @given(seeds, paths)
    def test_same_seed_same_subtree(self, seed, path):
        first = follow_path(path, new_root_source(seed))
        second = follow_path(path, new_root_source(seed))
        assert first == second
        assert first.bits() == second.bits()

    @CI_SETTINGS
    @given(seeds, paths, paths)
    def test_paths_compose(self, seed, prefix, suffix):
        root = new_root_source(seed)
        assert follow_path(prefix + suffix, root) == follow_path(suffix, follow_path(prefix, root))

    @CI_SETTINGS
    @given(seeds, paths)
    def test_traced_paths_replay(self, seed, path):
        traced = TracedSource(new_root_source(seed))
        for direction in path:
            left, right = traced.split()
            traced = left if direction.is_left() else right
        assert traced.path == path
        assert follow_path(path, new_root_source(seed)) == traced.source

    @CI_SETTINGS
    @given(paths)
    def test_follow_path_never_draws(self, path):
        node = follow_path(path, RecordingSource("root"))
        assert node.name == "root" + "".join(direction.value for direction in path)

    @CI_SETTINGS
    @given(seeds)
    def test_seed_reduced_modulo_word(self, seed):
        assert new_root_source(seed) == new_root_source(seed + 2**64)


@pytest.mark.property
class TestWordProperties:
    """Words are 63-bit and every 63-bit word occurs."""

    @CI_SETTINGS
    @given(seeds, paths)
    def test_words_fit(self, seed, path):
        assert 0 <= follow_path(path, new_root_source(seed)).bits() <= MAX_WORD

    @CI_SETTINGS
    @given(words, st.integers(0, 1))
    def test_every_word_drawn_by_some_node(self, word, low_bit):
        state = unmix64((word << 1) | low_bit)
        source = SplitMixSource(seed=(state - GOLDEN_GAMMA) & MASK_64, gamma=GOLDEN_GAMMA)
        assert source.bits() == word

    @CI_SETTINGS
    @given(st.integers(0, MASK_64))
    def test_mixer_is_invertible(self, z):
        assert unmix64(mix64(z)) == z

    @CI_SETTINGS
    @given(seeds)
    def test_children_are_odd_gamma_streams(self, seed):
        left, right = new_root_source(seed).split()
        assert left.gamma & 1 and right.gamma & 1
        assert left != right


def _popcount(value: int) -> int:
    return bin(value).count("1")


@pytest.mark.statistical
@pytest.mark.slow
class TestIndependenceStatistics:
    """Children of one split look like unrelated words."""

    PAIRS = 4000

    def _pairs(self, seed):
        for parent in independent_sources(seed, self.PAIRS):
            left, right = parent.split()
            yield parent, left, right

    def test_siblings_differ_in_half_the_bits(self):
        distances = [_popcount(left.bits() ^ right.bits()) for _, left, right in self._pairs(1)]
        mean = sum(distances) / len(distances)
        assert abs(mean - WORD_BITS / 2) < 0.5

    def test_parent_and_child_differ_in_half_the_bits(self):
        distances = [_popcount(parent.bits() ^ left.bits()) for parent, left, _ in self._pairs(2)]
        mean = sum(distances) / len(distances)
        assert abs(mean - WORD_BITS / 2) < 0.5

    def test_sibling_bits_agree_half_the_time(self):
        agreements = [0] * WORD_BITS
        for _, left, right in self._pairs(3):
            same = ~(left.bits() ^ right.bits())
            for bit in range(WORD_BITS):
                agreements[bit] += (same >> bit) & 1

        for bit, count in enumerate(agreements):
            rate = count / self.PAIRS
            assert 0.45 <= rate <= 0.55, f"bit {bit} agrees at rate {rate:.3f}"

    def test_bits_are_balanced(self):
        ones = [0] * WORD_BITS
        for source in independent_sources(4, self.PAIRS):
            word = source.bits()
            for bit in range(WORD_BITS):
                ones[bit] += (word >> bit) & 1

        for bit, count in enumerate(ones):
            rate = count / self.PAIRS
            assert 0.45 <= rate <= 0.55, f"bit {bit} set at rate {rate:.3f}"
