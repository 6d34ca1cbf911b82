"""Pytest configuration and shared fixtures for maybe_core tests."""

import pytest


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from maybe_core import Present

    return Present('hello')


@pytest.fixture
def sample_absent():
    """Sample Absent value for testing."""
    from maybe_core import Absent

    return Absent


@pytest.fixture
def call_log() -> list[str]:
    """List that instrumented functions append their names to."""
    return []
