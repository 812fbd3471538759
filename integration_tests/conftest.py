"""Pytest configuration for integration tests."""

import os

import pytest


def pytest_collection_modifyitems(items):
    """Mark tests in this directory as integration tests.

    They talk to the live AI service, so they are skipped without a key.
    """
    skip_live = pytest.mark.skip(reason="Requires OPENAI_API_KEY")
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
            if not os.getenv("OPENAI_API_KEY"):
                item.add_marker(skip_live)
