"""Shared pytest configuration and fixtures for the ghtf test suite."""
import sys
from pathlib import Path

import pytest


# Add src/ to path so test modules can import the ghtf package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def app_env():
    """Environment with a complete GitHub App configuration."""
    return {
        "GITHUB_APP_ID": "1",
        "GITHUB_APP_INSTALLATION_ID": "2",
        "GITHUB_APP_PEM_FILE": "-----BEGIN KEY-----\\nABC\\n-----END KEY-----",
    }


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, isolated)"
    )


def pytest_collection_modifyitems(config, items):
    """Mark every test as a unit test; the suite has no integration tests."""
    for item in items:
        item.add_marker(pytest.mark.unit)
