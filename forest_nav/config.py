"""
Configuration constants for the Phantom Forest Navigator.

All paths, defaults, and presentation strings are defined here.
The dataset path can be overridden from the environment.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of forest_nav/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains the bundled edge dataset)
DATA_DIR = PROJECT_ROOT / "data"

# Edge dataset (.json or .msgpack)
EDGES_PATH = Path(
    os.environ.get("FOREST_NAV_EDGES_PATH", DATA_DIR / "phantom_forest_edges.json")
)

# =============================================================================
# Dataset Schema
# =============================================================================

# Boolean requirement flags in edge records, keyed by capability name
REQUIREMENT_FLAGS = {
    "requiresMap": "map",
    "requiresMobility": "mobility",
}

# Optional list-of-names requirement field
REQUIREMENT_LIST_FIELD = "requires"

# =============================================================================
# Navigator Defaults
# =============================================================================

DEFAULT_START = "Haunted House"
DEFAULT_END = "Bent Tree"

# Capabilities held by default (both checkboxes ticked)
DEFAULT_CAPABILITIES = ("map", "mobility")

# Common routes: preset name -> (start, end)
COMMON_ROUTES = {
    "Crimsonwood Keep": ("Haunted House", "Forgotten Path (T)"),
    "Lucky Charm": ("Haunted House", "Haunted Hill"),
    "Soiled Rags": ("Haunted House", "Forgotten Path (T)"),
    "Reset": (DEFAULT_START, DEFAULT_END),
}

# =============================================================================
# Result Messages
# =============================================================================

NO_PATH_MESSAGE = "No path found between these maps."
ALREADY_THERE_MESSAGE = "You are already at the destination."

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "edges": EDGES_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
