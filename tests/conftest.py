"""Test configuration and fixtures."""

import pytest

from tests.client import ApiHarness


@pytest.fixture
def api():
    """API harness with a fresh container per test."""
    return ApiHarness()
