"""
Helpers shared by CLI commands.
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from merkletx.config import RuntimeConfig
from merkletx.crypto import HashProvider
from merkletx.schemas.errors import UnsupportedAlgorithmError


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def get_config(args: Namespace) -> RuntimeConfig:
    """Config attached by main(), or defaults when a command is called directly."""
    config = getattr(args, "runtime_config", None)
    return config if config is not None else RuntimeConfig()


def resolve_provider(args: Namespace, fallback: bool = True) -> HashProvider:
    """
    Build the HashProvider named by --algorithm (or the config default).

    With fallback=True an unsupported name is logged and replaced by the
    configured fallback algorithm; otherwise UnsupportedAlgorithmError
    propagates to the caller.
    """
    config = get_config(args)
    name = getattr(args, "algorithm", None) or config.hashing.algorithm
    try:
        return HashProvider(name)
    except UnsupportedAlgorithmError as e:
        if not fallback:
            raise
        logger.warning(f"{e.message}; using {config.hashing.fallback_algorithm}")
        return HashProvider(config.hashing.fallback_algorithm)


def read_transactions(args: Namespace) -> list[str]:
    """
    Transactions from positional arguments, or one per line of --file.

    A trailing newline in the file does not add an empty transaction.
    """
    file_path = getattr(args, "file", None)
    if file_path:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Transaction file not found: {path}")
        return path.read_text(encoding="utf-8").splitlines()
    return list(getattr(args, "transactions", None) or [])


def print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
