"""
Placement Store - DuckDB-backed aggregation of the placement dataset.

This module loads the bundled placement records into an in-memory DuckDB
table and answers the grouping, counting and search queries behind the
sidebar, the choropleth and the API.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import duckdb
from pydantic import ValidationError

from penempatan.config import get_config
from penempatan.data.errors import PlacementDataError
from penempatan.data.schemas.models import DashboardStats, Placement, ProvinceSummary
from penempatan.geo.names import map_province_name
from penempatan.utils.logger import get_logger

logger = get_logger(__name__)


def _province_expr(merged: bool) -> str:
    return "map_provinsi" if merged else "provinsi"


class PlacementStore:
    """
    In-memory DuckDB store for placement records.

    Two groupings are exposed: the dataset grouping used by the sidebar,
    and the map grouping where central-agency placements are folded into
    DKI Jakarta.
    """

    def __init__(self, placements: Optional[List[Placement]] = None):
        """
        Initialize the placement store.

        Args:
            placements: Records to load (empty store if not provided)
        """
        self._conn = duckdb.connect(":memory:")
        self._init_schema()

        if placements:
            self.add_placements(placements)

    def _init_schema(self) -> None:
        self._conn.execute("""
            CREATE TABLE placements (
                seq INTEGER NOT NULL,
                no INTEGER NOT NULL,
                nama VARCHAR NOT NULL,
                jabatan VARCHAR DEFAULT '',
                unit_kerja VARCHAR DEFAULT '',
                provinsi VARCHAR NOT NULL,
                map_provinsi VARCHAR NOT NULL
            )
        """)

    # =========================================================================
    # LOADING
    # =========================================================================

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> "PlacementStore":
        """
        Build a store from raw JSON records.

        Raises:
            PlacementDataError: If a record does not match the Placement model
        """
        placements = []
        for idx, record in enumerate(records):
            try:
                placements.append(Placement.model_validate(record))
            except ValidationError as e:
                raise PlacementDataError(f"Invalid placement record at index {idx}: {e}") from e
        return cls(placements)

    @classmethod
    def from_json_file(cls, path: Optional[str] = None) -> "PlacementStore":
        """
        Load the store from a JSON file holding a list of records.

        Args:
            path: Dataset path (defaults to config)
        """
        path = path or get_config().data.placements_path
        file_path = Path(path)

        if not file_path.exists():
            raise PlacementDataError(f"Placement dataset not found: {path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except json.JSONDecodeError as e:
            raise PlacementDataError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(records, list):
            raise PlacementDataError(f"Placement dataset must be a list of records: {path}")

        store = cls.from_records(records)
        logger.info(f"Loaded {store.total()} placements from {path}")
        return store

    def add_placements(self, placements: List[Placement]) -> None:
        """Append placements, keeping dataset order."""
        start = self.total()
        rows = [
            (start + i, p.no, p.nama, p.jabatan, p.unit_kerja, p.provinsi,
             map_province_name(p.provinsi))
            for i, p in enumerate(placements)
        ]
        self._conn.executemany(
            "INSERT INTO placements VALUES (?, ?, ?, ?, ?, ?, ?)",
            rows
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def total(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM placements").fetchone()[0]

    def stats(self) -> DashboardStats:
        """Header totals: records and distinct dataset provinces."""
        total, regions = self._conn.execute(
            "SELECT COUNT(*), COUNT(DISTINCT provinsi) FROM placements"
        ).fetchone()
        return DashboardStats(total_graduates=total, total_regions=regions)

    def _grouped(self, merged: bool) -> Dict[str, List[Placement]]:
        rows = self._conn.execute(f"""
            SELECT {_province_expr(merged)} AS province,
                   no, nama, jabatan, unit_kerja, provinsi
            FROM placements
            ORDER BY seq
        """).fetchall()

        stats: Dict[str, List[Placement]] = {}
        for province, no, nama, jabatan, unit_kerja, provinsi in rows:
            stats.setdefault(province, []).append(Placement(
                no=no,
                nama=nama,
                jabatan=jabatan,
                unit_kerja=unit_kerja,
                provinsi=provinsi
            ))
        return stats

    def province_stats(self) -> Dict[str, List[Placement]]:
        """Placements grouped by their dataset province."""
        return self._grouped(merged=False)

    def map_province_stats(self) -> Dict[str, List[Placement]]:
        """Placements grouped for the map, central agencies merged into Jakarta."""
        return self._grouped(merged=True)

    def people_for(self, province: str, merged: bool = False) -> List[Placement]:
        """Placements for one province; empty when the province has none."""
        return self._grouped(merged).get(province, [])

    def summary(self, province: str, merged: bool = False) -> ProvinceSummary:
        return ProvinceSummary(name=province, people=self.people_for(province, merged))

    def count_for(self, province: str, merged: bool = False) -> int:
        """Number of placements in a province; 0 for unknown provinces."""
        return self._conn.execute(f"""
            SELECT COUNT(*) FROM placements
            WHERE {_province_expr(merged)} = ?
        """, [province]).fetchone()[0]

    def counts(self, merged: bool = False) -> Dict[str, int]:
        """Placement count per province."""
        rows = self._conn.execute(f"""
            SELECT {_province_expr(merged)} AS province, COUNT(*)
            FROM placements
            GROUP BY province
        """).fetchall()
        return {province: count for province, count in rows}

    def search_provinces(self, term: str = "") -> List[str]:
        """
        Dataset provinces ordered by placement count, filtered by name.

        Args:
            term: Case-insensitive substring to match (empty matches all)

        Returns:
            Province names, largest first; ties keep dataset order
        """
        rows = self._conn.execute("""
            SELECT provinsi, COUNT(*) AS n, MIN(seq) AS first_seen
            FROM placements
            WHERE contains(lower(provinsi), ?)
            GROUP BY provinsi
            ORDER BY n DESC, first_seen ASC
        """, [term.lower()]).fetchall()
        return [row[0] for row in rows]

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


# Global store instance
_placement_store: Optional[PlacementStore] = None


def get_placement_store(path: Optional[str] = None, force_new: bool = False) -> PlacementStore:
    """
    Get the global placement store, loading the dataset on first use.

    Args:
        path: Optional dataset path override
        force_new: Force reloading the dataset
    """
    global _placement_store

    if _placement_store is None or force_new:
        _placement_store = PlacementStore.from_json_file(path)

    return _placement_store
