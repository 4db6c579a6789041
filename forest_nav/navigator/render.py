"""
Plain-text rendering of route results.
"""

from __future__ import annotations

from forest_nav.config import ALREADY_THERE_MESSAGE, NO_PATH_MESSAGE
from forest_nav.graph.models import Step


def format_route(start: str, route: list[Step] | None) -> str:
    """
    Render a search result for display.

    The route is shown as the start map, then for each step the portal
    taken and the map it leads to.
    """
    if route is None:
        return NO_PATH_MESSAGE
    if not route:
        return ALREADY_THERE_MESSAGE

    lines = ["Route:", start]
    for step in route:
        lines.append(f"  | {step.portal}")
        lines.append(f"  v {step.to_location}")
    return "\n".join(lines)


def summarize_route(route: list[Step] | None) -> str:
    """One-line summary used in logs."""
    if route is None:
        return "no path"
    if not route:
        return "already there"
    maps = [route[0].from_location] + [s.to_location for s in route]
    return f"{len(route)} portals: " + " -> ".join(maps)
