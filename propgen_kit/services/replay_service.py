"""
Replay service for reproducing generation from recorded split paths.

A run starts from one root seed. Generating through a traced root records
the split path of every sub-source used; given the same seed and a recorded
path, the service re-derives that sub-source and reruns a generator on it.
"""

import logging
from typing import Any

from ..core.generator import Gen
from ..core.random_source import new_root_source
from ..core.seed_derivation import TracedSource, follow_path
from ..core.types import RandomSource
from ..domain.split_path import SplitPath
from ..utilities.formatters import format_word
from ..utilities.validators import validate_non_negative

logger = logging.getLogger(__name__)


class ReplayService:
    """Re-derives sub-sources of one root seed."""

    def __init__(self, seed: int) -> None:
        """
        Initialize replay service.

        Args:
            seed: Root seed of the run being replayed
        """
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int, got: {type(seed)}")
        self.seed = seed
        self._root = new_root_source(seed)
        logger.info(f"Replay service initialized for seed {seed}")

    def root(self) -> TracedSource:
        """Traced root source; its descendants know their paths."""
        return TracedSource(self._root)

    def rederive(self, path: SplitPath | str) -> RandomSource:
        """
        Sub-source at ``path`` below the root.

        Args:
            path: SplitPath or its letter form, e.g. 'LRR'
        """
        if isinstance(path, str):
            path = SplitPath.from_string(path)
        source = follow_path(path, self._root)
        logger.debug(f"Re-derived source at {path} for seed {self.seed}")
        return source

    def replay(self, gen: Gen, size: int, path: SplitPath | str) -> Any:
        """Rerun ``gen`` at ``size`` on the sub-source at ``path``."""
        validate_non_negative(size, "size")
        source = self.rederive(path)
        value = gen.generate(size, source)
        logger.info(f"Replayed generator at {path} (size {size}): {value!r}")
        return value

    def word_at(self, path: SplitPath | str) -> int:
        """The word drawn at ``path``, for comparing against a recorded draw."""
        word = self.rederive(path).bits()
        logger.debug(f"Word at {path}: {format_word(word)}")
        return word
