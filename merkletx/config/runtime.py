"""
Runtime Configuration

Central configuration for hashing defaults, the demo driver and benchmarks.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()


ENV_PREFIX = "MERKLETX_"


@dataclass
class HashingConfig:
    """Which digest algorithm to use, and what to fall back to."""
    algorithm: str = "SHA-256"
    fallback_algorithm: str = "SHA-256"


@dataclass
class DemoConfig:
    """Configuration for the demo driver."""
    levels: int = 10  # tree of 2**levels random transactions
    index: int = 0
    tx_bytes: int = 16
    render_max_levels: int = 5
    hash_chars: int = 8


@dataclass
class BenchmarkConfig:
    """Loop counts for the benchmark timings."""
    iterations: int = 20_000
    warmup_iterations: int = 5_000
    brute_force_iterations: int = 200
    brute_force_warmup: int = 50


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (and a .env file)
    - YAML file
    - Programmatic construction
    """
    hashing: HashingConfig = field(default_factory=HashingConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLETX_ALGORITHM: Digest algorithm name
        - MERKLETX_FALLBACK_ALGORITHM: Used when ALGORITHM is unsupported
        - MERKLETX_LEVELS: Demo tree size exponent
        - MERKLETX_INDEX: Demo target transaction index
        - MERKLETX_ITERATIONS: Benchmark iterations
        - MERKLETX_LOG_LEVEL: Log level
        - MERKLETX_LOG_FILE: Optional log file
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}ALGORITHM"):
            overrides.setdefault("hashing", {})["algorithm"] = os.getenv(f"{ENV_PREFIX}ALGORITHM")
        if os.getenv(f"{ENV_PREFIX}FALLBACK_ALGORITHM"):
            overrides.setdefault("hashing", {})["fallback_algorithm"] = os.getenv(
                f"{ENV_PREFIX}FALLBACK_ALGORITHM"
            )

        if os.getenv(f"{ENV_PREFIX}LEVELS"):
            overrides.setdefault("demo", {})["levels"] = int(os.getenv(f"{ENV_PREFIX}LEVELS", "10"))
        if os.getenv(f"{ENV_PREFIX}INDEX"):
            overrides.setdefault("demo", {})["index"] = int(os.getenv(f"{ENV_PREFIX}INDEX", "0"))

        if os.getenv(f"{ENV_PREFIX}ITERATIONS"):
            overrides.setdefault("benchmark", {})["iterations"] = int(
                os.getenv(f"{ENV_PREFIX}ITERATIONS", "20000")
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        hashing_data = data.get("hashing", {})
        demo_data = data.get("demo", {})
        benchmark_data = data.get("benchmark", {})

        hashing = HashingConfig(**hashing_data) if hashing_data else HashingConfig()
        demo = DemoConfig(**demo_data) if demo_data else DemoConfig()
        benchmark = BenchmarkConfig(**benchmark_data) if benchmark_data else BenchmarkConfig()

        return cls(
            hashing=hashing,
            demo=demo,
            benchmark=benchmark,
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        for section in ("hashing", "demo", "benchmark"):
            for key, value in overrides.get(section, {}).items():
                setattr(getattr(new_config, section), key, value)

        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]
        if "log_file" in overrides:
            new_config.log_file = overrides["log_file"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "hashing": {
                "algorithm": self.hashing.algorithm,
                "fallback_algorithm": self.hashing.fallback_algorithm,
            },
            "demo": {
                "levels": self.demo.levels,
                "index": self.demo.index,
                "tx_bytes": self.demo.tx_bytes,
                "render_max_levels": self.demo.render_max_levels,
                "hash_chars": self.demo.hash_chars,
            },
            "benchmark": {
                "iterations": self.benchmark.iterations,
                "warmup_iterations": self.benchmark.warmup_iterations,
                "brute_force_iterations": self.benchmark.brute_force_iterations,
                "brute_force_warmup": self.benchmark.brute_force_warmup,
            },
            "log_level": self.log_level,
            "log_file": self.log_file,
            "extra": self.extra,
        }


DEFAULT_CONFIG_PATHS = (
    Path("merkletx.yaml"),
    Path.home() / ".config" / "merkletx" / "config.yaml",
)


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        Merged configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    if config_path is not None:
        return RuntimeConfig.from_yaml(config_path).with_env_overrides()

    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.exists():
            return RuntimeConfig.from_yaml(default_path).with_env_overrides()

    return RuntimeConfig.from_env()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return yaml.safe_dump(RuntimeConfig().to_dict(), sort_keys=False)
