"""
Shortest-route search over the active portal graph.

BFS finds a route with the fewest portals. When several shortest routes
exist, the one whose portals appear first in the edge order wins.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence

from forest_nav.graph.filter import filter_edges
from forest_nav.graph.models import Capability, Edge, Step

logger = logging.getLogger(__name__)


def build_graph(active_edges: Iterable[Edge]) -> dict[str, list[Edge]]:
    """Map each location to its outgoing edges, in edge order."""
    graph: dict[str, list[Edge]] = {}
    for edge in active_edges:
        graph.setdefault(edge.from_location, []).append(edge)
    return graph


def find_path(
    active_edges: Sequence[Edge], start: str, end: str
) -> list[Step] | None:
    """
    Find a shortest route using BFS on the active edges.

    Returns:
        [] if start == end, the list of steps from start to end,
        or None if end cannot be reached
    """
    if start == end:
        return []

    graph = build_graph(active_edges)

    # BFS with parent tracking: location -> (previous location, discovering edge)
    queue = deque([start])
    visited = {start}
    parent: dict[str, tuple[str, Edge]] = {}

    while queue:
        current = queue.popleft()

        for edge in graph.get(current, []):
            neighbor = edge.to_location
            if neighbor in visited:
                continue

            visited.add(neighbor)
            parent[neighbor] = (current, edge)

            if neighbor == end:
                path = _reconstruct(parent, start, end)
                logger.debug(f"Found route '{start}' -> '{end}' ({len(path)} steps)")
                return path

            queue.append(neighbor)

    logger.debug(f"No route from '{start}' to '{end}' ({len(visited)} maps explored)")
    return None


def _reconstruct(
    parent: dict[str, tuple[str, Edge]], start: str, end: str
) -> list[Step]:
    """Walk predecessor links back from end and return steps in travel order."""
    steps = []
    current = end
    while current != start:
        prev, edge = parent[current]
        steps.append(Step(from_location=prev, portal=edge.portal, to_location=current))
        current = prev
    steps.reverse()
    return steps


def shortest_route(
    edges: Iterable[Edge],
    start: str,
    end: str,
    capabilities: Iterable[Capability],
) -> list[Step] | None:
    """Filter edges by capabilities, then search. One call per request."""
    return find_path(filter_edges(edges, capabilities), start, end)
