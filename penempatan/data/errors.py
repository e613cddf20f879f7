"""
Errors raised while loading the bundled datasets.
"""


class DashboardDataError(Exception):
    """Base class for dataset loading failures."""


class PlacementDataError(DashboardDataError):
    """The placement dataset is missing or malformed."""


class BoundaryDataError(DashboardDataError):
    """The province boundary GeoJSON is missing or malformed."""
