"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from duke_cli.config import Config  # noqa: E402
from duke_cli.session import Session  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config(monkeypatch, tmp_path):
    """Keep tests away from the real ~/.duke config and the cached instance."""
    monkeypatch.setenv("DUKE_CONFIG", str(tmp_path / "missing-config.yaml"))
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def session():
    return Session()
