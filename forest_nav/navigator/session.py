"""
Navigator session: recomputes the route whenever the query changes.

The session owns the current RouteQuery and a single cached result keyed
on (start, end, capabilities). Changing any of those makes the next read
of `route` run a fresh search; reading it again without a change reuses
the cached result.
"""

from __future__ import annotations

import logging

from forest_nav.config import COMMON_ROUTES
from forest_nav.data.loader import EdgeDataset, forest_data
from forest_nav.graph.models import Capability, Step
from forest_nav.graph.pathfinder import shortest_route
from forest_nav.navigator.render import format_route, summarize_route
from forest_nav.navigator.state import RouteQuery

logger = logging.getLogger(__name__)


class Navigator:
    """
    Holds the current (start, end, capabilities) and the route for them.

    Used by the presentation layer: it updates the query through the
    setters and reads `route` or `render()` to display the result.
    """

    def __init__(
        self,
        dataset: EdgeDataset | None = None,
        query: RouteQuery | None = None,
    ) -> None:
        """
        Initialize a session.

        Args:
            dataset: Edge dataset to route over (defaults to the shared one)
            query: Initial query (defaults to Haunted House -> Bent Tree
                with Map and Mobility)
        """
        self._dataset = dataset if dataset is not None else forest_data
        self._query = query or RouteQuery()
        self._cached_key: RouteQuery | None = None
        self._cached_route: list[Step] | None = None
        self.search_count = 0

    @property
    def query(self) -> RouteQuery:
        return self._query

    @property
    def locations(self) -> tuple[str, ...]:
        """Maps for the selection controls, sorted."""
        return self._dataset.locations()

    # =========================================================================
    # Query Updates
    # =========================================================================

    def set_start(self, start: str) -> None:
        self._query = RouteQuery(start, self._query.end, self._query.capabilities)

    def set_end(self, end: str) -> None:
        self._query = RouteQuery(self._query.start, end, self._query.capabilities)

    def set_capability(self, capability: Capability | str, held: bool) -> None:
        self._query = self._query.with_capability(capability, held)

    def reverse(self) -> None:
        """Swap start and end."""
        self._query = self._query.reversed()

    def apply_quick_route(self, name: str) -> None:
        """
        Set start and end from a common-route preset.

        Raises:
            ValueError: If the preset name is unknown
        """
        if name not in COMMON_ROUTES:
            available = ", ".join(COMMON_ROUTES)
            raise ValueError(f"Unknown route '{name}'. Available: {available}")
        start, end = COMMON_ROUTES[name]
        self._query = RouteQuery(start, end, self._query.capabilities)

    # =========================================================================
    # Results
    # =========================================================================

    @property
    def route(self) -> list[Step] | None:
        """Route for the current query; recomputed only when the query changed."""
        if self._cached_key == self._query:
            return self._cached_route

        query = self._query
        for label, name in (("Start", query.start), ("End", query.end)):
            if not self._dataset.has_location(name):
                logger.warning(f"{label} '{name}' not in dataset")

        route = shortest_route(
            self._dataset.edges(), query.start, query.end, query.capabilities
        )
        self.search_count += 1
        logger.debug(f"'{query.start}' -> '{query.end}': {summarize_route(route)}")

        self._cached_key = query
        self._cached_route = route
        return route

    def render(self) -> str:
        """Text rendering of the current result."""
        return format_route(self._query.start, self.route)
