"""
Pytest configuration and shared fixtures for merkletx tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Isolates tests from MERKLETX_* environment variables
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_transactions = _common.make_transactions
make_tree = _common.make_tree

from merkletx.crypto import HashProvider


_ENV_VARS = [
    "MERKLETX_ALGORITHM",
    "MERKLETX_FALLBACK_ALGORITHM",
    "MERKLETX_LEVELS",
    "MERKLETX_INDEX",
    "MERKLETX_ITERATIONS",
    "MERKLETX_LOG_LEVEL",
    "MERKLETX_LOG_FILE",
]


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Strip MERKLETX_* variables so a developer's shell cannot leak into tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sha256_provider():
    """Provide a SHA-256 HashProvider."""
    return HashProvider("SHA-256")


@pytest.fixture
def murmur_provider():
    """Provide a MurmurHash2 HashProvider with the default seed."""
    return HashProvider("MurmurHash2")


@pytest.fixture
def transactions():
    """Five transactions: pads to eight leaves."""
    return make_transactions(5)


@pytest.fixture
def tree(transactions, sha256_provider):
    """Provide a SHA-256 tree over the default transactions."""
    return make_tree(transactions, sha256_provider)
