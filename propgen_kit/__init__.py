"""
propgen-kit - the generation core of a property-based testing engine.

This package provides:
- Splittable, immutable random sources seeded once per run
- Bounded and multi-word interval sampling
- Split-path derivation for replaying a generation branch
- Ordering and interval capabilities for bool, nat, N and int
- Sized generators, shrinkers and the contracts tying them to size metrics
"""

__version__ = "1.0.0"
__description__ = "Splittable randomness and sized generators for property-based testing"

from . import config, core, domain, services, utilities
from .core import (
    Arbitrary,
    Gen,
    SizedGenerator,
    Shrinker,
    arbitrary_from,
    follow_path,
    from_bits,
    from_split,
    new_root_source,
    sample_range,
)
from .domain import Direction, SplitPath
from .utilities.constants import InvalidBound, InvalidInterval, ValidationError

__all__ = [
    "config",
    "core",
    "domain",
    "services",
    "utilities",
    "Arbitrary",
    "Direction",
    "Gen",
    "InvalidBound",
    "InvalidInterval",
    "Shrinker",
    "SizedGenerator",
    "SplitPath",
    "ValidationError",
    "arbitrary_from",
    "follow_path",
    "from_bits",
    "from_split",
    "new_root_source",
    "sample_range",
]
