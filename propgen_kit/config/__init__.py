"""
Configuration management for propgen-kit.

Provides the immutable generation settings and the process-wide instance.
"""

from .settings import GeneratorConfig, get_config, reset_config, set_config

__all__ = ["GeneratorConfig", "get_config", "reset_config", "set_config"]
