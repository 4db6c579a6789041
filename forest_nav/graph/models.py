"""
Data model for the capability-gated portal graph.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class Capability(str, Enum):
    """Something the player can hold that unlocks extra portals."""

    MAP = "map"
    MOBILITY = "mobility"

    @classmethod
    def parse(cls, name: str | Capability) -> Capability:
        """
        Parse a capability from its name, case-insensitively.

        Raises:
            ValueError: If the name is not a known capability
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            available = ", ".join(c.value for c in cls)
            raise ValueError(
                f"Unknown capability '{name}'. Available: {available}"
            ) from None


def capability_set(names: Iterable[str | Capability] = ()) -> frozenset[Capability]:
    """Build an immutable capability set from names or members."""
    return frozenset(Capability.parse(n) for n in names)


@dataclass(frozen=True)
class Edge:
    """
    A directed portal connection between two maps.

    Attributes:
        from_location: Map the portal is entered from
        to_location: Map the portal leads to
        portal: Human-readable label for the traversal
        requires: Capabilities needed to use this portal (empty = always usable)
    """

    from_location: str
    to_location: str
    portal: str
    requires: frozenset[Capability] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Step:
    """One traversal in a route: take `portal` from `from_location` to `to_location`."""

    from_location: str
    portal: str
    to_location: str
