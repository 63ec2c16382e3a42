"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from fountainkit.config import reset_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def reset_global_settings():
    """Reset global settings and logger cache around each test."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("FOUNTAINKIT_")}
    for key in saved:
        del os.environ[key]
    reset_settings()
    yield
    for key in [k for k in os.environ if k.startswith("FOUNTAINKIT_")]:
        del os.environ[key]
    os.environ.update(saved)
    reset_settings()


@pytest.fixture
def sample_script() -> str:
    """Short screenplay with a title page and most element kinds."""
    return (FIXTURES_DIR / "brick_and_steel.fountain").read_text(encoding="utf-8")
