"""
Geo module - Geography layer for the Penempatan dashboard.

This module contains:
- names: Province name normalization between datasets
- choropleth: Count buckets, colors and region styles
- boundaries: GeoJSON loading and point-in-region hit testing
"""

from penempatan.geo.names import (
    PROVINCE_NAME_MAPPING,
    CENTRAL_AGENCY_ALIASES,
    to_data_province_name,
    map_province_name,
)
from penempatan.geo.choropleth import (
    LEGEND,
    LEGEND_TITLE,
    HOVER_STYLE,
    get_color,
    feature_style,
    hover_style,
)
from penempatan.geo.boundaries import (
    Region,
    RegionIndex,
    load_boundaries,
    parse_boundaries,
)

__all__ = [
    # Names
    "PROVINCE_NAME_MAPPING",
    "CENTRAL_AGENCY_ALIASES",
    "to_data_province_name",
    "map_province_name",
    # Choropleth
    "LEGEND",
    "LEGEND_TITLE",
    "HOVER_STYLE",
    "get_color",
    "feature_style",
    "hover_style",
    # Boundaries
    "Region",
    "RegionIndex",
    "load_boundaries",
    "parse_boundaries",
]
