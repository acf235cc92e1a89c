"""
Shared pytest fixtures for plankton tests.

This module provides:
- ``src/`` on ``sys.path`` so tests run without an install
- Settings cache and structlog isolation between tests
- A fresh, empty ``Namespace`` per test
- ``Inherited``: a class whose class attributes must never be visited
"""

import sys
from pathlib import Path

import pytest
import structlog

# Ensure plankton package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from plankton.core.settings import clear_settings_cache
from plankton.namespace import Namespace


class Inherited:
    """Plain object with a class attribute; only instance attributes are own."""

    c = 1


@pytest.fixture(autouse=True)
def _isolate_settings():
    """Every test starts and ends with an empty settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any configure_logging() a test performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fresh_namespace() -> Namespace:
    return Namespace({}, allow_redefine=False)


@pytest.fixture
def inherited() -> Inherited:
    return Inherited()
