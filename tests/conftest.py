"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path so core and cube import without install."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def reset_cached_config() -> Iterator[None]:
    """Parse the environment config afresh in every test."""
    from core.config import load_config

    load_config.cache_clear()
    yield
    load_config.cache_clear()
