"""
Pytest configuration and shared fixtures for vcbridge tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_layout = _common.make_layout
make_record = _common.make_record
SCENARIO_EXPECTED_DEGREE = _common.SCENARIO_EXPECTED_DEGREE


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep VCBRIDGE_* variables from the host out of tests."""
    for name in (
        "VCBRIDGE_SCHEME",
        "VCBRIDGE_BLOCK_SIZE",
        "VCBRIDGE_CHUNK_COUNT",
        "VCBRIDGE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def layout():
    """Provide the 52-byte credential layout."""
    return make_layout()


@pytest.fixture
def record(layout):
    """Provide the credential record matching the default layout."""
    return make_record(layout=layout)


@pytest.fixture
def expected_degree():
    return SCENARIO_EXPECTED_DEGREE
