"""Shared fixtures and configuration for Penempatan dashboard tests."""

import json
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

from penempatan.config import DATA_DIR
from penempatan.geo.boundaries import RegionIndex, load_boundaries, parse_boundaries
from penempatan.state.placement_store import PlacementStore

BUNDLED_PLACEMENTS = DATA_DIR / "penempatan.json"
BUNDLED_BOUNDARIES = DATA_DIR / "indonesia-provinces.json"


def _record(no: int, nama: str, provinsi: str, unit: str = "BPS") -> Dict[str, Any]:
    return {
        "no": no,
        "nama": nama,
        "jabatan": "Statistisi Ahli Pertama",
        "unitKerja": unit,
        "provinsi": provinsi,
    }


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """
    A small dataset.

    JAWA BARAT 3, ACEH 1, DKI JAKARTA 1, PUSAT 2, K/L/P 1, BALI 3.
    BALI and JAWA BARAT tie; JAWA BARAT appears first.
    """
    return [
        _record(1, "Adi", "JAWA BARAT", "BPS Kabupaten Bogor"),
        _record(2, "Budi", "ACEH", "BPS Kabupaten Pidie"),
        _record(3, "Cici", "JAWA BARAT", "BPS Kota Bandung"),
        _record(4, "Dewi", "PUSAT", "Direktorat Neraca Produksi"),
        _record(5, "Eka", "DKI JAKARTA", "BPS Kota Jakarta Timur"),
        _record(6, "Fani", "BALI", "BPS Kabupaten Buleleng"),
        _record(7, "Gani", "K/L/P", "Kementerian Keuangan"),
        _record(8, "Hani", "JAWA BARAT", "BPS Kabupaten Garut"),
        _record(9, "Ika", "BALI", "BPS Kabupaten Karangasem"),
        _record(10, "Joko", "PUSAT", "Direktorat Sistem Informasi Statistik"),
        _record(11, "Kiki", "BALI", "BPS Kabupaten Badung"),
    ]


@pytest.fixture
def store(sample_records) -> Generator[PlacementStore, None, None]:
    """A placement store over the sample records."""
    placement_store = PlacementStore.from_records(sample_records)

    yield placement_store

    placement_store.close()


@pytest.fixture
def placements_file(tmp_path: Path, sample_records) -> Path:
    """The sample records written to a JSON file."""
    path = tmp_path / "penempatan.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


@pytest.fixture
def square_collection() -> Dict[str, Any]:
    """
    Three unit-square provinces side by side, plus an island province
    made of two squares and a province with a hole filled by another.
    """
    def square(x: float, y: float, size: float = 1.0):
        return [[x, y], [x + size, y], [x + size, y + size], [x, y + size], [x, y]]

    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"PROVINSI": "Aceh"},
                "geometry": {"type": "Polygon", "coordinates": [square(0, 0)]},
            },
            {
                "type": "Feature",
                "properties": {"PROVINSI": "Jawa Barat"},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [square(1, 0, 3), square(2, 1)],
                },
            },
            {
                "type": "Feature",
                "properties": {"PROVINSI": "DKI Jakarta"},
                "geometry": {"type": "Polygon", "coordinates": [square(2, 1)]},
            },
            {
                "type": "Feature",
                "properties": {"PROVINSI": "Kepulauan Riau"},
                "geometry": {
                    "type": "MultiPolygon",
                    "coordinates": [[square(10, 10)], [square(20, 20)]],
                },
            },
        ],
    }


@pytest.fixture
def square_regions(square_collection) -> RegionIndex:
    return parse_boundaries(square_collection)


@pytest.fixture(scope="session")
def bundled_regions() -> RegionIndex:
    """Province boundaries shipped with the package."""
    return load_boundaries(str(BUNDLED_BOUNDARIES))
