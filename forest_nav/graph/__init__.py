"""
Graph module.

Provides the portal graph model and routing:
- Capability, Edge, Step: data model
- filter_edges: capability-gated active subgraph
- find_path: BFS shortest route with path reconstruction
"""

from forest_nav.graph.filter import filter_edges, is_active
from forest_nav.graph.models import Capability, Edge, Step, capability_set
from forest_nav.graph.pathfinder import build_graph, find_path, shortest_route

__all__ = [
    "Capability",
    "Edge",
    "Step",
    "capability_set",
    "filter_edges",
    "is_active",
    "build_graph",
    "find_path",
    "shortest_route",
]
