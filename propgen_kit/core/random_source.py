"""
Splittable random sources.

A source is one node of a conceptually infinite binary tree of random words.
Nodes are immutable values: ``split`` derives two child nodes and ``bits``
derives one 63-bit word, both purely from the node's state. The tree is never
materialised; children are computed on demand with the SplitMix64 mixing
functions, so sibling streams are independent and safe to hand to different
threads.
"""

import logging
import os
from dataclasses import dataclass

from ..utilities.constants import GOLDEN_GAMMA, MASK_64
from ..utilities.formatters import format_source, format_word
from ..utilities.validators import validate_word
from .types import RandomSource

logger = logging.getLogger(__name__)


def mix64(z: int) -> int:
    """SplitMix64 output finalizer (a bijection on 64-bit words)."""
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK_64
    return z ^ (z >> 31)


def mix_gamma(z: int) -> int:
    """Derive an odd increment with enough bit transitions for a child stream."""
    z = ((z ^ (z >> 33)) * 0xFF51AFD7ED558CCD) & MASK_64
    z = ((z ^ (z >> 33)) * 0xC4CEB9FE1A85EC53) & MASK_64
    z = (z ^ (z >> 33)) | 1
    # Weak gammas (few 01/10 transitions) produce correlated streams
    if bin(z ^ (z >> 1)).count("1") < 24:
        z ^= 0xAAAAAAAAAAAAAAAA
    return z


@dataclass(frozen=True)
class SplitMixSource:
    """
    Immutable SplitMix64 node.

    ``seed`` is the node state and ``gamma`` the odd increment of its stream.
    The word returned by ``bits`` and the states handed to the children come
    from distinct increments of the state.
    """

    seed: int
    gamma: int

    def _advance(self, steps: int) -> int:
        return (self.seed + steps * self.gamma) & MASK_64

    def bits(self) -> int:
        """Draw the 63-bit word of this node."""
        return mix64(self._advance(1)) >> 1

    def split(self) -> tuple["SplitMixSource", "SplitMixSource"]:
        """Derive the two child nodes."""
        left = SplitMixSource(mix64(self._advance(2)), mix_gamma(self._advance(3)))
        right = SplitMixSource(mix64(self._advance(4)), mix_gamma(self._advance(5)))
        return left, right

    def __repr__(self) -> str:
        return format_source(self)


# Gamma 1 is never produced by mix_gamma and roots always use GOLDEN_GAMMA
DUMMY_SOURCE = SplitMixSource(seed=0, gamma=1)


@dataclass(frozen=True)
class FixedSplitSource:
    """Test fixture whose split returns exactly the given pair and whose bits is 0."""

    left: RandomSource
    right: RandomSource

    def split(self) -> tuple[RandomSource, RandomSource]:
        return self.left, self.right

    def bits(self) -> int:
        return 0


@dataclass(frozen=True)
class FixedBitsSource:
    """Test fixture whose bits returns the given word and whose children are dummies."""

    word: int

    def __post_init__(self):
        validate_word(self.word)

    def split(self) -> tuple[RandomSource, RandomSource]:
        return DUMMY_SOURCE, DUMMY_SOURCE

    def bits(self) -> int:
        return self.word

    def __repr__(self) -> str:
        return f"FixedBitsSource({format_word(self.word)})"


def from_split(left: RandomSource, right: RandomSource) -> FixedSplitSource:
    """Build a source whose split is exactly (left, right)."""
    return FixedSplitSource(left, right)


def from_bits(word: int) -> FixedBitsSource:
    """Build a source whose bits is exactly ``word``."""
    return FixedBitsSource(word)


def new_root_source(seed: int) -> SplitMixSource:
    """
    Create the root of a random tree from an integer seed.

    Deterministic: the same seed always yields the same tree. Any Python int
    is accepted and reduced modulo 2**64.
    """
    root = SplitMixSource(mix64((seed + GOLDEN_GAMMA) & MASK_64), GOLDEN_GAMMA)
    logger.debug(f"Created root source {root!r} from seed {seed}")
    return root


def resolve_seed(config=None) -> int:
    """
    Seed for a fresh run.

    Uses the configured seed when one is set, otherwise draws a seed from
    ``os.urandom``. The seed is logged so that the run can be reproduced.
    """
    if config is None:
        from ..config import get_config

        config = get_config()

    if config.seed is not None:
        logger.info(f"Using configured seed {config.seed}")
        return config.seed

    seed = int.from_bytes(os.urandom(8), "big")
    logger.info(f"Using fresh seed {seed}")
    return seed


def new_random_source(config=None) -> SplitMixSource:
    """Create a root source for a fresh run from ``resolve_seed``."""
    return new_root_source(resolve_seed(config))


def split(source: RandomSource) -> tuple[RandomSource, RandomSource]:
    """Split a source into two independent children."""
    return source.split()


def bits(source: RandomSource) -> int:
    """Draw one 63-bit word from a source."""
    return source.bits()
