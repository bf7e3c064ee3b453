"""
Pytest configuration and shared fixtures for propgen-kit tests.

Registers markers, keeps the process-wide generator config isolated between
tests, and provides the commonly used random sources.
"""

import pytest

from propgen_kit.config import GeneratorConfig, reset_config, set_config
from propgen_kit.core.random_source import from_bits, from_split, new_root_source
from propgen_kit.utilities.constants import (
    ENV_CHECK_SAMPLES,
    ENV_MAX_SIZE,
    ENV_SEED,
    ENV_SHRINK_LIMIT,
)

from .fixtures.sources import SourceFixtures


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as property-based test (Hypothesis)")
    config.addinivalue_line(
        "markers", "statistical: mark test as statistical test over many draws"
    )
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


# Test isolation helpers
@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Start every test from default settings and a clean environment."""
    for key in (ENV_SEED, ENV_MAX_SIZE, ENV_CHECK_SAMPLES, ENV_SHRINK_LIMIT):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def seeded_config() -> GeneratorConfig:
    """Install a fixed-seed config for reproducible default sources."""
    config = GeneratorConfig(seed=SourceFixtures.SEED, max_size=5, check_samples=200)
    set_config(config)
    return config


# Source fixtures
@pytest.fixture
def root_source():
    """Root source from a fixed seed."""
    return new_root_source(SourceFixtures.SEED)


@pytest.fixture
def split_pair():
    """Fixture node with two distinguishable children."""
    left = from_bits(11)
    right = from_bits(22)
    return from_split(left, right), left, right

