"""Conftest for unit tests - automatically mark all tests as unit tests."""

import pytest


def pytest_collection_modifyitems(config, items):
    """Mark every test collected under tests/unit as a unit test."""
    for item in items:
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
