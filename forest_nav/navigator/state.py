"""
Query state held by the presentation layer between searches.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from forest_nav.config import DEFAULT_CAPABILITIES, DEFAULT_END, DEFAULT_START
from forest_nav.graph.models import Capability, capability_set


@dataclass(frozen=True)
class RouteQuery:
    """
    One route request.

    Attributes:
        start: Map to start from
        end: Map to reach
        capabilities: Capabilities the player holds
    """

    start: str = DEFAULT_START
    end: str = DEFAULT_END
    capabilities: frozenset[Capability] = field(
        default_factory=lambda: capability_set(DEFAULT_CAPABILITIES)
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "capabilities", capability_set(self.capabilities))

    @property
    def has_map(self) -> bool:
        return Capability.MAP in self.capabilities

    @property
    def has_mobility(self) -> bool:
        return Capability.MOBILITY in self.capabilities

    def reversed(self) -> RouteQuery:
        """Same query with start and end swapped."""
        return replace(self, start=self.end, end=self.start)

    def with_capability(self, capability: Capability | str, held: bool) -> RouteQuery:
        """Same query with one capability granted or revoked."""
        cap = Capability.parse(capability)
        if held:
            caps = self.capabilities | {cap}
        else:
            caps = self.capabilities - {cap}
        return replace(self, capabilities=caps)
