"""
Runtime Configuration Module

Provides configuration loading and management for merkletx.
"""

from .runtime import (
    RuntimeConfig,
    HashingConfig,
    DemoConfig,
    BenchmarkConfig,
    load_config,
    get_default_config_template,
)

__all__ = [
    "RuntimeConfig",
    "HashingConfig",
    "DemoConfig",
    "BenchmarkConfig",
    "load_config",
    "get_default_config_template",
]
