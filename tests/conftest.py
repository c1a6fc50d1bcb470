"""Pytest configuration for the typedarray test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path so the suite runs from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typedarray import Array  # noqa: E402


@pytest.fixture
def numbers() -> Array:
    return Array("number", [3, 1, 2])
