"""
Tests against the bundled Phantom Forest dataset.

Note: These tests require data/phantom_forest_edges.json. Tests will be
skipped if the file is missing.
"""

import pytest

from forest_nav.config import COMMON_ROUTES, DEFAULT_END, DEFAULT_START, validate_data_files
from forest_nav.graph import Capability, Step, shortest_route

# Skip all tests if data files are missing
pytestmark = pytest.mark.skipif(
    not all(validate_data_files().values()),
    reason="Data files not available",
)


@pytest.fixture(scope="module")
def forest_data():
    """Load the bundled dataset once for all tests in this module."""
    from forest_nav.data import forest_data

    _ = forest_data.edge_count()
    return forest_data


class TestBundledDataset:
    """Sanity checks on the shipped edges."""

    def test_validate_all_pass(self, forest_data):
        validation = forest_data.validate()
        assert all(validation.values()), f"Failed checks: {validation}"

    def test_locations_sorted(self, forest_data):
        locations = forest_data.locations()
        assert list(locations) == sorted(set(locations))

    def test_common_routes_use_known_maps(self, forest_data):
        for name, (start, end) in COMMON_ROUTES.items():
            assert forest_data.has_location(start), name
            assert forest_data.has_location(end), name

    def test_has_gated_edges(self, forest_data):
        """Both capabilities gate at least one portal."""
        assert all(count > 0 for count in forest_data.gated_counts().values())


class TestBundledRoutes:
    """Known routes through the shipped network."""

    def test_default_route_with_map(self, forest_data):
        """The map teleports straight to Bent Tree."""
        route = shortest_route(forest_data.edges(), DEFAULT_START, DEFAULT_END, set(Capability))
        assert route == [Step("Haunted House", "Map teleport", "Bent Tree")]

    def test_default_route_on_foot(self, forest_data):
        route = shortest_route(forest_data.edges(), DEFAULT_START, DEFAULT_END, set())
        assert [s.to_location for s in route] == ["Dead Man's Gorge", "Phantom Road", "Bent Tree"]

    def test_forgotten_path_needs_a_capability(self, forest_data):
        """The top of the Forgotten Path is out of reach without map or mobility."""
        edges = forest_data.edges()
        end = "Forgotten Path (T)"
        assert shortest_route(edges, DEFAULT_START, end, set()) is None
        assert len(shortest_route(edges, DEFAULT_START, end, {Capability.MAP})) == 4
        assert len(shortest_route(edges, DEFAULT_START, end, {Capability.MOBILITY})) == 4
        assert len(shortest_route(edges, DEFAULT_START, end, set(Capability))) == 3

    def test_mobility_route_takes_upper_portal(self, forest_data):
        route = shortest_route(
            forest_data.edges(), DEFAULT_START, "Forgotten Path (T)", {Capability.MOBILITY}
        )
        assert [s.portal for s in route] == [
            "Right portal",
            "Right portal",
            "Upper portal",
            "Top portal",
        ]

    def test_every_route_is_valid(self, forest_data):
        """All reachable pairs give chaining routes under every capability set."""
        edges = forest_data.edges()
        cap_sets = [set(), {Capability.MAP}, {Capability.MOBILITY}, set(Capability)]
        for caps in cap_sets:
            for start in forest_data.locations():
                for end in forest_data.locations():
                    route = shortest_route(edges, start, end, caps)
                    if route:
                        assert route[0].from_location == start
                        assert route[-1].to_location == end
                        for prev, nxt in zip(route, route[1:]):
                            assert prev.to_location == nxt.from_location
