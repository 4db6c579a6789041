#!/usr/bin/env python3
"""
Phantom Forest Navigator CLI - find the shortest portal route between two maps.

Usage:
    python scripts/find_route.py
    python scripts/find_route.py --start "Haunted House" --end "Haunted Hill"
    python scripts/find_route.py --start "Haunted House" --end "Forgotten Path (T)" --no-map
    python scripts/find_route.py --route "Crimsonwood Keep" --reverse
    python scripts/find_route.py --list-locations

Common routes:
    Crimsonwood Keep, Lucky Charm, Soiled Rags, Reset
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from forest_nav.config import COMMON_ROUTES, LOG_LEVEL  # noqa: E402
from forest_nav.data import EdgeDataset  # noqa: E402
from forest_nav.graph import Capability  # noqa: E402
from forest_nav.navigator import Navigator  # noqa: E402

# Exit code when no route exists (argparse uses 2 for usage errors)
NO_PATH_EXIT_CODE = 3


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a route through the Phantom Forest",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--start", type=str, default=None, help="Starting map")
    parser.add_argument("--end", type=str, default=None, help="Destination map")
    parser.add_argument(
        "--route",
        type=str,
        default=None,
        choices=list(COMMON_ROUTES),
        help="Use a common route preset for start and end",
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="Swap start and end",
    )
    parser.add_argument(
        "--no-map",
        action="store_true",
        help="You don't have the Map of Phantom Forest",
    )
    parser.add_argument(
        "--no-mobility",
        action="store_true",
        help="You don't have a mobility skill (Teleport, Flash Jump, ...)",
    )
    parser.add_argument(
        "--edges",
        type=Path,
        default=None,
        help="Edge dataset to use (.json or .msgpack)",
    )
    parser.add_argument(
        "--list-locations",
        action="store_true",
        help="Print every map in the dataset and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s: %(message)s",
    )

    dataset = EdgeDataset(args.edges) if args.edges else None
    try:
        navigator = Navigator(dataset)
        locations = navigator.locations
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.list_locations:
        for name in locations:
            print(name)
        return 0

    if args.route:
        navigator.apply_quick_route(args.route)
    if args.start:
        navigator.set_start(args.start)
    if args.end:
        navigator.set_end(args.end)
    if args.reverse:
        navigator.reverse()

    navigator.set_capability(Capability.MAP, not args.no_map)
    navigator.set_capability(Capability.MOBILITY, not args.no_mobility)

    query = navigator.query
    print(f"\n{query.start} -> {query.end}")
    print(f"Map: {'yes' if query.has_map else 'no'}  Mobility: {'yes' if query.has_mobility else 'no'}\n")
    print(navigator.render())

    return 0 if navigator.route is not None else NO_PATH_EXIT_CODE


if __name__ == "__main__":
    sys.exit(main())
