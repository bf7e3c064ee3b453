"""
Test package for propgen-kit.

Unit tests, Hypothesis property tests and shared source fixtures.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # Source trees and helpers
    "property",  # Property-based and statistical tests
    "unit",  # Unit test suite
]
