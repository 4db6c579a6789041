"""
Capability filtering: turns the full edge set into the active subgraph.
"""

from __future__ import annotations

from collections.abc import Iterable

from forest_nav.graph.models import Capability, Edge


def is_active(edge: Edge, capabilities: Iterable[Capability]) -> bool:
    """Whether every capability the edge requires is held."""
    return edge.requires <= frozenset(capabilities)


def filter_edges(
    edges: Iterable[Edge], capabilities: Iterable[Capability]
) -> list[Edge]:
    """
    Keep the edges usable with the given capabilities.

    Edges with no requirements are always kept. Input order is preserved
    and the input is never modified.

    Args:
        edges: Full edge collection, in dataset order
        capabilities: Capabilities the player currently holds

    Returns:
        New list of active edges, in input order
    """
    held = frozenset(capabilities)
    return [edge for edge in edges if is_active(edge, held)]
