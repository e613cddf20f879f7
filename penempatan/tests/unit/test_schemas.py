"""Unit tests for the Penempatan Pydantic models."""

import pytest
from pydantic import ValidationError

from penempatan.data.schemas.models import DetailView, Placement, ProvinceSummary


class TestPlacement:
    """Test Placement parsing."""

    def test_from_dataset_record(self):
        """Dataset records use camelCase for the work unit."""
        placement = Placement.model_validate({
            "no": 1,
            "nama": "Adi",
            "jabatan": "Statistisi Ahli Pertama",
            "unitKerja": "BPS Kota Bandung",
            "provinsi": "JAWA BARAT",
        })
        assert placement.unit_kerja == "BPS Kota Bandung"

    def test_by_field_name(self):
        placement = Placement(no=2, nama="Budi", unit_kerja="BPS", provinsi="ACEH")
        assert placement.unit_kerja == "BPS"
        assert placement.jabatan == ""

    def test_dump_by_alias(self):
        placement = Placement(no=2, nama="Budi", unit_kerja="BPS", provinsi="ACEH")
        assert placement.model_dump(by_alias=True)["unitKerja"] == "BPS"

    def test_missing_province(self):
        with pytest.raises(ValidationError):
            Placement.model_validate({"no": 1, "nama": "Adi"})


class TestProvinceSummary:
    def test_count_and_preview(self):
        people = [Placement(no=i, nama=str(i), provinsi="BALI") for i in range(7)]
        summary = ProvinceSummary(name="BALI", people=people)
        assert summary.count == 7
        assert [p.no for p in summary.preview()] == [0, 1, 2, 3, 4]


class TestDetailView:
    def test_rows_are_numbered_from_one(self):
        detail = DetailView(province="ACEH", people=[
            Placement(no=40, nama="Budi", jabatan="Statistisi", unit_kerja="BPS Pidie", provinsi="ACEH"),
            Placement(no=41, nama="Cici", jabatan="Prakom", unit_kerja="BPS Aceh", provinsi="ACEH"),
        ])
        assert list(detail.rows()) == [
            (1, "Budi", "Statistisi", "BPS Pidie"),
            (2, "Cici", "Prakom", "BPS Aceh"),
        ]
        assert detail.count == 2
