"""
Pydantic Models for the Penempatan dashboard.

This module defines the data models used throughout the dashboard:
- Placement: One graduate placement record from the bundled dataset
- ProvinceSummary: Placements grouped under one province
- DetailView: The drill-down table shown for a province
- DashboardStats: Header totals
"""

from typing import Iterator, List, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Placement(BaseModel):
    """A single graduate placement record."""
    model_config = ConfigDict(populate_by_name=True)

    no: int = Field(..., description="Row number in the source dataset")
    nama: str = Field(..., description="Graduate name")
    jabatan: str = Field("", description="Position / role")
    unit_kerja: str = Field("", alias="unitKerja", description="Work unit")
    provinsi: str = Field(..., description="Province name as written in the dataset")


class ProvinceSummary(BaseModel):
    """Placements grouped under a single province."""
    name: str = Field(..., description="Province name (dataset spelling)")
    people: List[Placement] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.people)

    def preview(self, limit: int = 5) -> List[Placement]:
        """First ``limit`` placements, for the sidebar."""
        return self.people[:limit]


class DetailView(BaseModel):
    """
    Drill-down data for a province.

    Opened from the sidebar (unmerged grouping) or by double-clicking a
    region on the map (merged grouping).
    """
    province: str
    people: List[Placement] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.people)

    def rows(self) -> Iterator[Tuple[int, str, str, str]]:
        """Numbered table rows: (No, Nama, Jabatan, Unit Kerja)."""
        for idx, person in enumerate(self.people, start=1):
            yield idx, person.nama, person.jabatan, person.unit_kerja


class DashboardStats(BaseModel):
    """Totals shown in the dashboard header."""
    total_graduates: int = 0
    total_regions: int = 0
