"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.test_atlas_foundry.factories import write_sol  # noqa: E402


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Empty content directory for a single test."""
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def sol_root(content_root: Path) -> Path:
    """Content directory populated with the Sol fixture system."""
    return write_sol(content_root)
