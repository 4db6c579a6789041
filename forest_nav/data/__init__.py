"""
Data loading module.

Provides the EdgeDataset singleton for accessing the portal edges
and the sorted list of maps.

Usage:
    from forest_nav.data import forest_data

    forest_data.edges()
    forest_data.locations()
"""

from forest_nav.data.loader import EdgeDataset, forest_data, parse_edges, read_records

__all__ = ["EdgeDataset", "forest_data", "parse_edges", "read_records"]
