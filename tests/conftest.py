"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from forest_nav.data import EdgeDataset
from forest_nav.graph import Capability, Edge


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def sample_records() -> list[dict]:
    """Raw edge records in the bundled dataset's schema."""
    return [
        {"from": "A", "portal": "p1", "to": "B"},
        {"from": "B", "portal": "p2", "to": "C"},
        {"from": "A", "portal": "shortcut", "to": "C", "requiresMap": True},
        {"from": "C", "portal": "climb", "to": "D", "requiresMobility": True},
        {"from": "B", "portal": "back", "to": "A"},
    ]


@pytest.fixture
def sample_dataset(sample_records: list[dict]) -> EdgeDataset:
    """In-memory dataset built from sample_records."""
    return EdgeDataset.from_records(sample_records)


@pytest.fixture
def diamond_edges() -> list[Edge]:
    """Two equally short routes A -> D, through B (listed first) and through C."""
    return [
        Edge("A", "B", "to-b"),
        Edge("A", "C", "to-c"),
        Edge("C", "D", "c-to-d"),
        Edge("B", "D", "b-to-d"),
    ]


@pytest.fixture
def all_capabilities() -> frozenset[Capability]:
    return frozenset(Capability)
