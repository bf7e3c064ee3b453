"""
Core generation layer: random sources, sampling, ordering and generators.
"""

from .arbitrary import (
    ARBITRARY_BOOL,
    ARBITRARY_INT,
    ARBITRARY_NAT,
    Arbitrary,
    Shrinker,
    SizedGenerator,
    arbitrary_for,
    arbitrary_from,
    register_arbitrary,
)
from .generator import (
    Gen,
    choose,
    elements,
    generate,
    one_of,
    resize,
    sample,
    sized,
    such_that_maybe,
)
from .ordering import (
    BOOL_INTERVAL,
    INT_INTERVAL,
    N_INTERVAL,
    NAT_INTERVAL,
    ChoosableFromInterval,
    OrdType,
    interval_for,
    register_interval,
)
from .random_source import (
    DUMMY_SOURCE,
    SplitMixSource,
    bits,
    from_bits,
    from_split,
    new_random_source,
    resolve_seed,
    new_root_source,
    split,
)
from .sampler import sample_range, sample_wide
from .seed_derivation import TracedSource, follow_path
from .sized import BOOL_SIZE, INT_SIZE, NAT_SIZE, SizeBound, SizeMetric
from .types import GenSized, RandomSource, Shrink

__all__ = [
    # Random sources
    "DUMMY_SOURCE",
    "RandomSource",
    "SplitMixSource",
    "bits",
    "from_bits",
    "from_split",
    "new_random_source",
    "resolve_seed",
    "new_root_source",
    "split",
    # Sampling and ordering
    "BOOL_INTERVAL",
    "INT_INTERVAL",
    "NAT_INTERVAL",
    "N_INTERVAL",
    "ChoosableFromInterval",
    "OrdType",
    "interval_for",
    "register_interval",
    "sample_range",
    "sample_wide",
    # Seed derivation
    "TracedSource",
    "follow_path",
    # Generators
    "Gen",
    "GenSized",
    "choose",
    "elements",
    "generate",
    "one_of",
    "resize",
    "sample",
    "sized",
    "such_that_maybe",
    # Arbitrary hierarchy
    "ARBITRARY_BOOL",
    "ARBITRARY_INT",
    "ARBITRARY_NAT",
    "Arbitrary",
    "Shrink",
    "Shrinker",
    "SizedGenerator",
    "arbitrary_for",
    "arbitrary_from",
    "register_arbitrary",
    # Size metrics
    "BOOL_SIZE",
    "INT_SIZE",
    "NAT_SIZE",
    "SizeBound",
    "SizeMetric",
]
