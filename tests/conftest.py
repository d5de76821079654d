"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from partkit.config import reset_settings
from sample_parts import App


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts from environment-default settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def app():
    """Fresh parent model with default children."""
    return App()
