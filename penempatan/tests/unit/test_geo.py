"""Unit tests for province names, choropleth coloring and boundary hit testing.

These tests work on in-memory GeoJSON and do not touch the bundled files.
"""

import pytest

from penempatan.data.errors import BoundaryDataError
from penempatan.geo.boundaries import (
    Region,
    parse_boundaries,
    point_in_polygon,
    point_in_ring,
)
from penempatan.geo.choropleth import (
    EMPTY_COLOR,
    HOVER_STYLE,
    LEGEND,
    feature_style,
    get_color,
    hover_style,
)
from penempatan.geo.names import (
    PROVINCE_NAME_MAPPING,
    map_province_name,
    to_data_province_name,
)


class TestProvinceNames:
    """Test name normalization between the two datasets."""

    def test_mapping_covers_all_provinces(self):
        """All 38 provinces have an explicit mapping."""
        assert len(PROVINCE_NAME_MAPPING) == 38
        assert all(v == v.upper() for v in PROVINCE_NAME_MAPPING.values())

    def test_known_name(self):
        assert to_data_province_name("Daerah Istimewa Yogyakarta") == "DAERAH ISTIMEWA YOGYAKARTA"
        assert to_data_province_name("DKI Jakarta") == "DKI JAKARTA"

    def test_unknown_name_falls_back_to_upper_case(self):
        assert to_data_province_name("Irian Jaya Barat") == "IRIAN JAYA BARAT"

    def test_missing_name(self):
        assert to_data_province_name(None) == ""
        assert to_data_province_name("") == ""

    def test_central_agencies_drawn_on_jakarta(self):
        assert map_province_name("PUSAT") == "DKI JAKARTA"
        assert map_province_name("K/L/P") == "DKI JAKARTA"

    def test_regular_province_unchanged(self):
        assert map_province_name("ACEH") == "ACEH"


class TestChoropleth:
    """Test count buckets and region styles."""

    @pytest.mark.parametrize("count,color", [
        (0, "#e2e8f0"),
        (1, "#dbeafe"),
        (5, "#dbeafe"),
        (6, "#93c5fd"),
        (10, "#93c5fd"),
        (15, "#60a5fa"),
        (16, "#3b82f6"),
        (20, "#3b82f6"),
        (21, "#1e40af"),
        (500, "#1e40af"),
    ])
    def test_get_color_buckets(self, count, color):
        assert get_color(count) == color

    def test_negative_count_is_empty(self):
        assert get_color(-1) == EMPTY_COLOR

    def test_legend_labels(self):
        assert [item["label"] for item in LEGEND] == ["1 - 5", "6 - 10", "11 - 15", "16 - 20", "> 20"]

    def test_feature_style_unselected(self):
        style = feature_style(7)
        assert style == {
            "fillColor": "#93c5fd",
            "fillOpacity": 0.75,
            "color": "#64748b",
            "weight": 1,
            "opacity": 1,
        }

    def test_feature_style_selected(self):
        style = feature_style(0, selected=True)
        assert style["fillColor"] == "#e2e8f0"
        assert style["fillOpacity"] == 0.9
        assert style["color"] == "#1e3a5f"
        assert style["weight"] == 3

    def test_hover_style_keeps_fill_color(self):
        style = hover_style(12)
        assert style["fillColor"] == "#60a5fa"
        for key, value in HOVER_STYLE.items():
            assert style[key] == value


class TestPointInPolygon:
    """Test the ray casting primitives."""

    SQUARE = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0), (0.0, 0.0)]
    HOLE = [(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5), (0.5, 0.5)]

    def test_inside_ring(self):
        assert point_in_ring(1.0, 1.0, self.SQUARE) is True

    def test_outside_ring(self):
        assert point_in_ring(3.0, 1.0, self.SQUARE) is False
        assert point_in_ring(1.0, -0.1, self.SQUARE) is False

    def test_degenerate_ring(self):
        assert point_in_ring(0.0, 0.0, [(0.0, 0.0), (1.0, 1.0)]) is False

    def test_concave_ring(self):
        """An L-shaped ring excludes its notch."""
        ring = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2), (0, 0)]
        assert point_in_ring(0.5, 1.5, ring) is True
        assert point_in_ring(1.5, 1.5, ring) is False

    def test_hole_excluded(self):
        polygon = [self.SQUARE, self.HOLE]
        assert point_in_polygon(1.0, 1.0, polygon) is False
        assert point_in_polygon(0.25, 0.25, polygon) is True

    def test_empty_polygon(self):
        assert point_in_polygon(0.0, 0.0, []) is False


class TestRegionIndex:
    """Test region parsing and hit testing."""

    def test_parse_names(self, square_regions):
        assert len(square_regions) == 4
        assert square_regions.data_names() == ["ACEH", "JAWA BARAT", "DKI JAKARTA", "KEPULAUAN RIAU"]

    def test_hit_simple_polygon(self, square_regions):
        assert square_regions.hit_test(lat=0.5, lon=0.5).data_name == "ACEH"

    def test_hit_polygon_with_hole(self, square_regions):
        assert square_regions.hit_test(lat=0.5, lon=1.5).data_name == "JAWA BARAT"

    def test_hit_inside_hole_finds_enclosed_province(self, square_regions):
        assert square_regions.hit_test(lat=1.5, lon=2.5).data_name == "DKI JAKARTA"

    def test_hit_multipolygon_parts(self, square_regions):
        assert square_regions.hit_test(lat=10.5, lon=10.5).data_name == "KEPULAUAN RIAU"
        assert square_regions.hit_test(lat=20.5, lon=20.5).data_name == "KEPULAUAN RIAU"

    def test_miss(self, square_regions):
        assert square_regions.hit_test(lat=15.0, lon=15.0) is None

    def test_get_by_data_name(self, square_regions):
        region = square_regions.get("KEPULAUAN RIAU")
        assert region.geojson_name == "Kepulauan Riau"
        assert square_regions.get("PAPUA") is None

    def test_region_bbox_and_center(self, square_regions):
        region = square_regions.get("KEPULAUAN RIAU")
        assert region.bbox == (10.0, 10.0, 21.0, 21.0)
        assert region.center() == (15.5, 15.5)

    def test_unsupported_geometry_skipped(self, square_collection):
        square_collection["features"].append({
            "type": "Feature",
            "properties": {"PROVINSI": "Bali"},
            "geometry": {"type": "Point", "coordinates": [115.0, -8.5]},
        })
        regions = parse_boundaries(square_collection)
        assert len(regions) == 4
        assert regions.get("BALI") is None

    @pytest.mark.parametrize("geometry", [
        {"type": "Polygon", "coordinates": []},
        {"type": "Polygon", "coordinates": [[]]},
        {"type": "Polygon", "coordinates": [[[115.0, -8.5], [115.5, -8.5]]]},
        {"type": "MultiPolygon", "coordinates": []},
        {"type": "MultiPolygon", "coordinates": [[], [[]]]},
        None,
    ])
    def test_empty_geometry_skipped(self, geometry):
        collection = {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "properties": {"PROVINSI": "Aceh"},
                    "geometry": {
                        "type": "Polygon",
                        "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]],
                    },
                },
                {"type": "Feature", "properties": {"PROVINSI": "Bali"}, "geometry": geometry},
            ],
        }
        regions = parse_boundaries(collection)
        assert regions.data_names() == ["ACEH"]

    def test_multipolygon_keeps_non_empty_parts(self, square_collection):
        kepri = square_collection["features"][3]["geometry"]
        kepri["coordinates"].append([])
        regions = parse_boundaries(square_collection)
        assert len(regions.get("KEPULAUAN RIAU").polygons) == 2

    def test_not_a_feature_collection(self):
        with pytest.raises(BoundaryDataError):
            parse_boundaries({"type": "Feature"})

    def test_region_without_coordinates(self):
        with pytest.raises(BoundaryDataError):
            Region(geojson_name="Bali", data_name="BALI", polygons=[[[]]])

    def test_custom_name_property(self, square_collection):
        for feature in square_collection["features"]:
            feature["properties"] = {"Propinsi": feature["properties"]["PROVINSI"]}
        regions = parse_boundaries(square_collection, name_property="Propinsi")
        assert regions.hit_test(lat=0.5, lon=0.5).data_name == "ACEH"
