"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json

import pytest


@pytest.fixture
def mock_brew_list_output() -> str:
    """Sample brew list --versions output for testing."""
    return "wget 1.24.5\ntypescript 5.5.2\n"


@pytest.fixture
def mock_brew_outdated_output() -> str:
    """Sample brew outdated --json=v2 output for testing."""
    return json.dumps(
        {
            "formulae": [
                {
                    "name": "wget",
                    "installed_versions": ["1.24.5"],
                    "current_version": "1.24.6",
                    "pinned": False,
                    "pinned_version": None,
                }
            ],
            "casks": [],
        }
    )


@pytest.fixture
def mock_npm_ls_output() -> str:
    """Sample npm ls -g --depth=0 --json output for testing."""
    return json.dumps(
        {
            "name": "lib",
            "dependencies": {
                "npm": {"version": "10.8.1", "overridden": False},
                "typescript": {"version": "5.5.2", "overridden": False},
                "corepack": {"version": "0.28.2", "overridden": False},
            },
        }
    )


@pytest.fixture
def mock_npm_outdated_output() -> str:
    """Sample npm outdated -g --json output for testing."""
    return json.dumps(
        {
            "typescript": {
                "current": "5.5.2",
                "wanted": "5.6.3",
                "latest": "5.6.3",
                "dependent": "global",
                "location": "/usr/local/lib/node_modules/typescript",
            }
        }
    )


@pytest.fixture
def mock_pip_list_output() -> str:
    """Sample pip list --format=json output for testing."""
    return json.dumps(
        [
            {"name": "requests", "version": "2.32.3"},
            {"name": "urllib3", "version": "2.2.1"},
            {"name": "pip", "version": "24.0"},
        ]
    )


@pytest.fixture
def mock_pip_outdated_output() -> str:
    """Sample pip list --outdated --format=json output for testing."""
    return json.dumps(
        [
            {
                "name": "urllib3",
                "version": "2.2.1",
                "latest_version": "2.2.3",
                "latest_filetype": "wheel",
            }
        ]
    )


@pytest.fixture
def mock_empty_output() -> str:
    """Empty output for testing edge cases."""
    return ""
