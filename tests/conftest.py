"""
Pytest configuration for exception-workshop tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """
    Isolate environment variables for each test.

    This prevents tests from affecting each other through env vars.
    """
    # Store original environment
    original_env = dict(os.environ)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Provide a clean environment with no exception-workshop vars.

    Runs from an empty directory so no .env file is picked up, and clears
    the cached config before and after the test.
    """
    from exception_workshop.config import get_config

    workshop_vars = [
        "EXCEPTION_WORKSHOP_ENV",
        "INTEGER_BITS",
        "DEBUG",
        "LOG_LEVEL",
        "LOG_RICH_TRACEBACKS",
    ]

    for var in workshop_vars:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()

    yield monkeypatch

    get_config.cache_clear()
