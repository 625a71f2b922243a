"""
Pytest configuration and shared fixtures for kindstore tests.
"""
import pytest

from kindstore import KindStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host KINDSTORE_* settings out of tests."""
    monkeypatch.delenv("KINDSTORE_NUMERIC_GRAMMAR", raising=False)
    monkeypatch.delenv("KINDSTORE_LOGGER", raising=False)


@pytest.fixture
def store():
    """An empty store using the default integer grammar."""
    return KindStore()
