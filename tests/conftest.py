"""Pytest configuration and fixtures."""

import pytest

from assertkit.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Restore the default formatting config after each test."""
    yield
    reset_config()
