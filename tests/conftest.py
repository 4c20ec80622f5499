"""Pytest configuration and shared fixtures for github-client-core tests."""

import pytest

from github_client_core.testing import mock_api_credentials as _mock_api_credentials


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear GitHub-related environment variables before each test.

    This prevents a developer's real token from leaking into credential tests.
    """
    import os

    test_prefixes = ("TEST_", "GITHUB_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def mock_api_credentials():
    """Keyword arguments for a GitHubClient with a fake token."""
    return _mock_api_credentials()


@pytest.fixture
def label_fixtures():
    """Three labels as GitHub returns them."""
    return [
        {
            "id": 208045946,
            "url": "https://api.github.com/repos/acme/widgets/labels/bug",
            "name": "bug",
            "color": "f29513",
            "description": "Something isn't working",
            "default": True,
        },
        {
            "id": 208045947,
            "url": "https://api.github.com/repos/acme/widgets/labels/enhancement",
            "name": "enhancement",
            "color": "a2eeef",
            "description": "New feature or request",
            "default": False,
        },
        {
            "id": 208045948,
            "url": "https://api.github.com/repos/acme/widgets/labels/wontfix",
            "name": "wontfix",
            "color": "ffffff",
            "description": None,
            "default": True,
        },
    ]
