"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from fountainview.config import FountainViewSettings, reset_settings, set_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import cli_invoke  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "fountain"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow running",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )


@pytest.fixture(autouse=True)
def isolated_test_environment(tmp_path, monkeypatch):
    """Run every test with isolated settings.

    Keeps the stylesheet store out of the user's home directory and stops
    config files or FOUNTAINVIEW_* variables on the host from leaking in.
    """
    for key in list(os.environ):
        if key.startswith("FOUNTAINVIEW_"):
            monkeypatch.delenv(key)

    settings = FountainViewSettings(stylesheet_path=tmp_path / "styles.json")
    set_settings(settings)

    yield settings

    reset_settings()


@pytest.fixture
def settings(isolated_test_environment):
    """The isolated settings active for the current test."""
    return isolated_test_environment


@pytest.fixture
def fixtures_dir():
    """Directory holding sample Fountain documents."""
    return FIXTURES_DIR


@pytest.fixture
def sample_script(tmp_path):
    """Copy of the sample screenplay in a temp directory."""
    target = tmp_path / "brick_and_steel.fountain"
    target.write_text(
        (FIXTURES_DIR / "brick_and_steel.fountain").read_text(encoding="utf-8"),
        encoding="utf-8",
    )
    return target
