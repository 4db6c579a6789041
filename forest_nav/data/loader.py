"""
EdgeDataset singleton for accessing the Phantom Forest portal edges.

Usage:
    from forest_nav.data.loader import forest_data

    # First access triggers lazy loading
    forest_data.edges()
    forest_data.locations()
    forest_data.has_location("Haunted House")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from forest_nav.config import EDGES_PATH, REQUIREMENT_FLAGS, REQUIREMENT_LIST_FIELD
from forest_nav.graph.models import Capability, Edge

logger = logging.getLogger(__name__)


def parse_edges(records: Any) -> tuple[Edge, ...]:
    """
    Convert raw edge records into immutable Edge objects.

    Each record needs string `from`, `to` and `portal` fields. Requirements
    come from boolean flags (`requiresMap`, `requiresMobility`) and/or a
    `requires` list of capability names.

    Raises:
        ValueError: If the records are not a list or a record is malformed
    """
    if not isinstance(records, list):
        raise ValueError(
            f"Edge dataset must be a list of records, got {type(records).__name__}"
        )

    edges = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"Edge record {i} must be an object, got {type(record).__name__}")

        for key in ("from", "to", "portal"):
            value = record.get(key)
            if not isinstance(value, str):
                raise ValueError(f"Edge record {i}: field '{key}' must be a string, got {value!r}")

        requires = set()
        for flag, name in REQUIREMENT_FLAGS.items():
            if record.get(flag):
                requires.add(Capability.parse(name))

        names = record.get(REQUIREMENT_LIST_FIELD, [])
        if not isinstance(names, list):
            raise ValueError(f"Edge record {i}: field '{REQUIREMENT_LIST_FIELD}' must be a list")
        try:
            requires.update(Capability.parse(n) for n in names)
        except ValueError as e:
            raise ValueError(f"Edge record {i}: {e}") from e

        edges.append(
            Edge(
                from_location=record["from"],
                to_location=record["to"],
                portal=record["portal"],
                requires=frozenset(requires),
            )
        )

    return tuple(edges)


def read_records(path: Path) -> Any:
    """Read raw edge records from a .json or .msgpack file."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    if suffix == ".msgpack":
        with open(path, "rb") as f:
            return msgpack.load(f)
    raise ValueError(f"Unsupported edge dataset format '{suffix}' (expected .json or .msgpack)")


class EdgeDataset:
    """
    Lazy-loading singleton for the portal edge dataset.

    Loads data on first access to any method. The default instance is shared
    across the application via the module-level `forest_data` instance;
    passing an explicit path creates an independent dataset.

    The edges are held as a tuple of frozen Edge objects and are never
    modified after loading.
    """

    _instance: EdgeDataset | None = None

    def __new__(cls, path: str | Path | None = None) -> EdgeDataset:
        if path is not None:
            instance = super().__new__(cls)
            instance._initialized = False
            return instance
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, path: str | Path | None = None) -> None:
        if not self._initialized:
            self._path = Path(path) if path is not None else EDGES_PATH

    @classmethod
    def from_records(cls, records: Any) -> EdgeDataset:
        """Build an already-loaded dataset from in-memory records."""
        dataset = super().__new__(cls)
        dataset._path = None
        dataset._set_edges(parse_edges(records))
        return dataset

    def _ensure_loaded(self) -> None:
        """Load the edge file on first access."""
        if self._initialized:
            return

        if not self._path.exists():
            raise FileNotFoundError(f"Edge dataset not found: {self._path}")

        logger.info(f"Loading edges from {self._path}...")
        self._set_edges(parse_edges(read_records(self._path)))
        logger.info(
            f"Loaded {len(self._edges):,} edges between {len(self._locations):,} maps"
        )

    def _set_edges(self, edges: tuple[Edge, ...]) -> None:
        self._edges = edges
        names = set()
        for edge in edges:
            names.add(edge.from_location)
            names.add(edge.to_location)
        self._locations = tuple(sorted(names))
        self._initialized = True

    # =========================================================================
    # Core Accessors
    # =========================================================================

    @property
    def path(self) -> Path | None:
        return self._path

    def edges(self) -> tuple[Edge, ...]:
        """All edges, in dataset order."""
        self._ensure_loaded()
        return self._edges

    def locations(self) -> tuple[str, ...]:
        """Every map name appearing in the dataset, deduplicated and sorted."""
        self._ensure_loaded()
        return self._locations

    def has_location(self, name: str) -> bool:
        """Check if a map appears in the dataset."""
        self._ensure_loaded()
        return name in self._locations

    def outgoing(self, name: str) -> list[Edge]:
        """All outgoing edges of a map regardless of requirements, in dataset order."""
        self._ensure_loaded()
        return [e for e in self._edges if e.from_location == name]

    def edge_count(self) -> int:
        self._ensure_loaded()
        return len(self._edges)

    def location_count(self) -> int:
        self._ensure_loaded()
        return len(self._locations)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def gated_counts(self) -> dict[str, int]:
        """Number of edges requiring each capability."""
        self._ensure_loaded()
        return {
            cap.value: sum(1 for e in self._edges if cap in e.requires)
            for cap in Capability
        }

    def validate(self) -> dict[str, bool]:
        """Run validation checks on loaded data."""
        self._ensure_loaded()
        triples = [(e.from_location, e.portal, e.to_location) for e in self._edges]
        return {
            "edges_loaded": len(self._edges) > 0,
            "no_self_loops": all(e.from_location != e.to_location for e in self._edges),
            "portals_labelled": all(e.portal.strip() for e in self._edges),
            "no_duplicate_portals": len(set(triples)) == len(triples),
        }

    def stats(self) -> dict:
        """Get statistics about the loaded data."""
        self._ensure_loaded()
        return {
            "total_edges": len(self._edges),
            "total_locations": len(self._locations),
            "ungated_edges": sum(1 for e in self._edges if not e.requires),
            "gated_edges": self.gated_counts(),
        }


# Module-level singleton instance
forest_data = EdgeDataset()
