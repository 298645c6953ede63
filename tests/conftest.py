"""
Shared fixtures for cache_options tests.
"""

import pytest


@pytest.fixture
def host_limit(monkeypatch):
    """Set the memory limit reported by the host for the duration of a test."""

    def set_limit(value: str):
        monkeypatch.setenv("MEMORY_LIMIT", value)

    return set_limit


@pytest.fixture
def events():
    """Collect (name, value) option change notifications."""
    received = []

    def listener(name, value):
        received.append((name, value))

    listener.received = received
    return listener
