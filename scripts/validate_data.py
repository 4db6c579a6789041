#!/usr/bin/env python3
"""
Validate the Phantom Forest edge dataset and sample routes.

Usage:
    python scripts/validate_data.py
"""

import logging
import sys
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from forest_nav.config import COMMON_ROUTES, EDGES_PATH, LOG_LEVEL  # noqa: E402

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def check_data_files_exist() -> bool:
    """Check that the edge dataset exists."""
    print("\n=== Checking Data Files ===\n")

    exists = EDGES_PATH.exists()
    if exists:
        size_kb = EDGES_PATH.stat().st_size / 1024
        print(f"✓ {EDGES_PATH.name}: {size_kb:,.1f} KB")
    else:
        print(f"✗ {EDGES_PATH.name}: NOT FOUND")
    return exists


def load_and_validate() -> bool:
    """Load the dataset and run validation checks."""
    print("\n=== Loading Edges ===\n")

    from forest_nav.data import forest_data

    print("\n=== Data Statistics ===\n")
    for key, value in forest_data.stats().items():
        print(f"  {key}: {value}")

    print("\n=== Validation Checks ===\n")
    validation = forest_data.validate()
    all_valid = True
    for check, passed in validation.items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    return all_valid


def check_common_routes() -> bool:
    """Every common-route preset should name known maps and be reachable with full capabilities."""
    print("\n=== Common Routes ===\n")

    from forest_nav.data import forest_data
    from forest_nav.navigator import Navigator, summarize_route

    all_passed = True
    navigator = Navigator(forest_data)

    for name in COMMON_ROUTES:
        navigator.apply_quick_route(name)
        query = navigator.query

        missing = [m for m in (query.start, query.end) if not forest_data.has_location(m)]
        if missing:
            print(f"  ✗ {name}: unknown map(s) {', '.join(missing)}")
            all_passed = False
            continue

        route = navigator.route
        status = "✓" if route is not None else "✗"
        print(f"  {status} {name}: {summarize_route(route)}")
        if route is None:
            all_passed = False

    return all_passed


def main() -> int:
    """Main validation routine."""
    print("=" * 60)
    print("Phantom Forest Data Validation")
    print("=" * 60)

    if not check_data_files_exist():
        print("\n✗ Edge dataset is missing. Cannot continue.")
        return 1

    try:
        if not load_and_validate():
            print("\n✗ Validation checks failed.")
            return 1
    except ValueError as e:
        print(f"\n✗ Malformed dataset: {e}")
        return 1

    if not check_common_routes():
        print("\n✗ Common route checks failed.")
        return 1

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
