"""
Generation settings.

Settings come from explicit construction or from environment variables.
One process-wide instance is created lazily and is never mutated; changing
settings means installing a new instance.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from ..utilities.constants import (
    DEFAULT_CHECK_SAMPLES,
    DEFAULT_MAX_SIZE,
    DEFAULT_SHRINK_LIMIT,
    ENV_CHECK_SAMPLES,
    ENV_MAX_SIZE,
    ENV_SEED,
    ENV_SHRINK_LIMIT,
)
from ..utilities.validators import (
    parse_int_setting,
    validate_non_negative,
    validate_positive_number,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable generation settings.

    Attributes:
        seed: Root seed for reproducible runs, None for a fresh seed per run
        max_size: Largest size used by ``sample`` and generator checks
        check_samples: Draws per size in the contract checkers
        shrink_limit: Maximum shrink candidates requested at once
    """

    seed: int | None = None
    max_size: int = DEFAULT_MAX_SIZE
    check_samples: int = DEFAULT_CHECK_SAMPLES
    shrink_limit: int = DEFAULT_SHRINK_LIMIT

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise TypeError(f"seed must be an int or None, got: {type(self.seed)}")
        validate_non_negative(self.max_size, "max_size")
        validate_positive_number(self.check_samples, "check_samples")
        validate_non_negative(self.shrink_limit, "shrink_limit")

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> "GeneratorConfig":
        """
        Build settings from environment variables.

        Unset or blank variables keep their defaults.

        Raises:
            ValidationError: If a variable is not a valid integer
        """
        if environ is None:
            environ = os.environ

        values = {}
        for key, name in (
            (ENV_SEED, "seed"),
            (ENV_MAX_SIZE, "max_size"),
            (ENV_CHECK_SAMPLES, "check_samples"),
            (ENV_SHRINK_LIMIT, "shrink_limit"),
        ):
            raw = environ.get(key)
            if raw is not None and raw.strip():
                values[name] = parse_int_setting(raw, key)

        config = cls(**values)
        logger.debug(f"Loaded generator config from environment: {config}")
        return config

    def sizes(self) -> range:
        """Sizes ``0..max_size`` inclusive."""
        return range(self.max_size + 1)

    def with_seed(self, seed: int | None) -> "GeneratorConfig":
        """Copy of these settings with a different seed."""
        return GeneratorConfig(
            seed=seed,
            max_size=self.max_size,
            check_samples=self.check_samples,
            shrink_limit=self.shrink_limit,
        )


_config: GeneratorConfig | None = None


def get_config() -> GeneratorConfig:
    """Process-wide settings, loaded from the environment on first use."""
    global _config
    if _config is None:
        _config = GeneratorConfig.from_environment()
    return _config


def set_config(config: GeneratorConfig) -> None:
    """Install new process-wide settings."""
    global _config
    _config = config
    logger.debug(f"Generator config set to {config}")


def reset_config() -> None:
    """Forget the process-wide settings so the next access reloads them."""
    global _config
    _config = None
