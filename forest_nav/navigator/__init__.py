"""
Navigator module.

Provides the state the presentation layer drives:
- RouteQuery: start, end and held capabilities
- Navigator: recomputes the route when the query changes
- format_route: text rendering of a result
"""

from forest_nav.navigator.render import format_route, summarize_route
from forest_nav.navigator.session import Navigator
from forest_nav.navigator.state import RouteQuery

__all__ = [
    "Navigator",
    "RouteQuery",
    "format_route",
    "summarize_route",
]
