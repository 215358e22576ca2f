"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest


@pytest.fixture
def examples_path() -> Path:
    """Get the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def petstore_source(examples_path: Path) -> Path:
    """Get the path to the pet store example API."""
    return examples_path / "petstore_api.py"


@pytest.fixture
def duplicate_source(examples_path: Path) -> Path:
    """Get the path to the example API with a duplicate endpoint."""
    return examples_path / "duplicate_api.py"
