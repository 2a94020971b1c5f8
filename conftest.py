"""Pytest configuration — ensures the project root is importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Drop VENEZUELA_* variables so a developer's .env never leaks into tests."""
    for key in list(os.environ):
        if key.startswith("VENEZUELA_"):
            monkeypatch.delenv(key, raising=False)
    yield
