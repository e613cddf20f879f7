"""
Province Boundaries - GeoJSON loading and point-in-region hit testing.

This module loads the bundled province boundary FeatureCollection and
answers "which province is under this lat/lon?" for map pointer events.
Coordinates follow GeoJSON order ([lon, lat]).
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from penempatan.config import get_config
from penempatan.data.errors import BoundaryDataError
from penempatan.geo.names import to_data_province_name
from penempatan.utils.logger import get_logger

logger = get_logger(__name__)

Ring = List[Tuple[float, float]]
# Outer ring followed by zero or more holes
Polygon = List[Ring]


def point_in_ring(lon: float, lat: float, ring: Sequence[Tuple[float, float]]) -> bool:
    """Even-odd ray casting test of a point against a closed ring."""
    inside = False
    n = len(ring)
    if n < 3:
        return False

    j = n - 1
    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > lat) != (yj > lat):
            x_cross = (xj - xi) * (lat - yi) / (yj - yi) + xi
            if lon < x_cross:
                inside = not inside
        j = i
    return inside


def point_in_polygon(lon: float, lat: float, polygon: Polygon) -> bool:
    """Point inside the outer ring and outside every hole."""
    if not polygon or not point_in_ring(lon, lat, polygon[0]):
        return False
    return not any(point_in_ring(lon, lat, hole) for hole in polygon[1:])


@dataclass
class Region:
    """A province boundary with a precomputed bounding box."""
    geojson_name: str
    data_name: str
    polygons: List[Polygon]
    feature: Dict[str, Any] = field(default_factory=dict, repr=False)
    bbox: Tuple[float, float, float, float] = field(init=False)

    def __post_init__(self) -> None:
        outer_rings = [poly[0] for poly in self.polygons if poly]
        lons = [pt[0] for ring in outer_rings for pt in ring]
        lats = [pt[1] for ring in outer_rings for pt in ring]
        if not lons:
            raise BoundaryDataError(f"Region {self.geojson_name!r} has no coordinates")
        self.bbox = (min(lons), min(lats), max(lons), max(lats))

    def contains(self, lat: float, lon: float) -> bool:
        """Whether the point lies inside any polygon of this region."""
        min_lon, min_lat, max_lon, max_lat = self.bbox
        if not (min_lon <= lon <= max_lon and min_lat <= lat <= max_lat):
            return False
        return any(point_in_polygon(lon, lat, poly) for poly in self.polygons)

    def center(self) -> Tuple[float, float]:
        """Bounding-box center as (lat, lon)."""
        min_lon, min_lat, max_lon, max_lat = self.bbox
        return ((min_lat + max_lat) / 2, (min_lon + max_lon) / 2)


def _to_ring(coords: Sequence[Sequence[float]]) -> Ring:
    return [(float(pt[0]), float(pt[1])) for pt in coords]


def _to_polygon(rings: Sequence[Sequence[Sequence[float]]]) -> Optional[Polygon]:
    polygon = [_to_ring(ring) for ring in rings]
    # An outer ring needs at least three points
    if not polygon or len(polygon[0]) < 3:
        return None
    return polygon


def _polygons_from_geometry(geometry: Dict[str, Any]) -> Optional[List[Polygon]]:
    """Polygons of a geometry, or None for unsupported or empty geometries."""
    geom_type = geometry.get("type")
    coords = geometry.get("coordinates") or []

    if geom_type == "Polygon":
        candidates = [_to_polygon(coords)]
    elif geom_type == "MultiPolygon":
        candidates = [_to_polygon(poly) for poly in coords]
    else:
        return None

    polygons = [poly for poly in candidates if poly is not None]
    return polygons or None


class RegionIndex:
    """
    Ordered collection of province regions with hit testing.

    Regions are tested in file order; the first region containing the
    point wins.
    """

    def __init__(self, regions: List[Region]):
        self._regions = list(regions)
        self._by_data_name: Dict[str, Region] = {}
        for region in self._regions:
            self._by_data_name.setdefault(region.data_name, region)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def get(self, data_name: str) -> Optional[Region]:
        return self._by_data_name.get(data_name)

    def hit_test(self, lat: float, lon: float) -> Optional[Region]:
        """
        Find the region under a map coordinate.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees

        Returns:
            The containing Region, or None over sea / outside the country
        """
        for region in self._regions:
            if region.contains(lat, lon):
                return region
        return None

    def data_names(self) -> List[str]:
        return [region.data_name for region in self._regions]


def parse_boundaries(collection: Dict[str, Any], name_property: str = "PROVINSI") -> RegionIndex:
    """
    Build a RegionIndex from a parsed GeoJSON FeatureCollection.

    Features with unsupported or empty geometries are skipped.
    """
    if collection.get("type") != "FeatureCollection":
        raise BoundaryDataError("Boundary data must be a GeoJSON FeatureCollection")

    regions: List[Region] = []
    for idx, feature in enumerate(collection.get("features", [])):
        properties = feature.get("properties") or {}
        geojson_name = properties.get(name_property) or ""
        polygons = _polygons_from_geometry(feature.get("geometry") or {})

        if polygons is None:
            logger.warning(f"Skipping feature {idx} ({geojson_name!r}): unsupported or empty geometry")
            continue

        regions.append(Region(
            geojson_name=geojson_name,
            data_name=to_data_province_name(geojson_name),
            polygons=polygons,
            feature=feature
        ))

    return RegionIndex(regions)


def load_boundaries(path: Optional[str] = None, name_property: Optional[str] = None) -> RegionIndex:
    """
    Load province boundaries from a GeoJSON file.

    Args:
        path: GeoJSON file path (defaults to config)
        name_property: Feature property holding the province name

    Returns:
        RegionIndex over the loaded provinces
    """
    config = get_config()
    path = path or config.data.boundaries_path
    name_property = name_property or config.data.name_property

    file_path = Path(path)
    if not file_path.exists():
        raise BoundaryDataError(f"Boundary file not found: {path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            collection = json.load(f)
    except json.JSONDecodeError as e:
        raise BoundaryDataError(f"Invalid GeoJSON in {path}: {e}") from e

    index = parse_boundaries(collection, name_property=name_property)
    logger.info(f"Loaded {len(index)} province boundaries from {path}")
    return index
