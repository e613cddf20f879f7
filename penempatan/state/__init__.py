"""
State Management for the Penempatan dashboard.

This module provides DuckDB-backed aggregation over the placement dataset.
"""

from penempatan.state.placement_store import (
    PlacementStore,
    get_placement_store,
)

__all__ = [
    'PlacementStore',
    'get_placement_store',
]
