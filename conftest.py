"""Shared pytest fixtures for optkit."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Provides a Click CLI test runner."""
    return CliRunner()
