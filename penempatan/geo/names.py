"""
Province name normalization between the boundary GeoJSON and the
placement dataset.

The GeoJSON spells provinces in title case ("Jawa Barat"), the placement
dataset in upper case ("JAWA BARAT"). Placements at central agencies are
recorded as "K/L/P" or "PUSAT" and are drawn on Jakarta.
"""

from typing import Dict, Optional

# GeoJSON name -> placement dataset name
PROVINCE_NAME_MAPPING: Dict[str, str] = {
    "Aceh": "ACEH",
    "Bali": "BALI",
    "Banten": "BANTEN",
    "Bengkulu": "BENGKULU",
    "Daerah Istimewa Yogyakarta": "DAERAH ISTIMEWA YOGYAKARTA",
    "DKI Jakarta": "DKI JAKARTA",
    "Gorontalo": "GORONTALO",
    "Jambi": "JAMBI",
    "Jawa Barat": "JAWA BARAT",
    "Jawa Tengah": "JAWA TENGAH",
    "Jawa Timur": "JAWA TIMUR",
    "Kalimantan Barat": "KALIMANTAN BARAT",
    "Kalimantan Selatan": "KALIMANTAN SELATAN",
    "Kalimantan Tengah": "KALIMANTAN TENGAH",
    "Kalimantan Timur": "KALIMANTAN TIMUR",
    "Kalimantan Utara": "KALIMANTAN UTARA",
    "Kepulauan Bangka Belitung": "KEPULAUAN BANGKA BELITUNG",
    "Kepulauan Riau": "KEPULAUAN RIAU",
    "Lampung": "LAMPUNG",
    "Maluku": "MALUKU",
    "Maluku Utara": "MALUKU UTARA",
    "Nusa Tenggara Barat": "NUSA TENGGARA BARAT",
    "Nusa Tenggara Timur": "NUSA TENGGARA TIMUR",
    "Papua": "PAPUA",
    "Papua Barat": "PAPUA BARAT",
    "Papua Barat Daya": "PAPUA BARAT DAYA",
    "Papua Pegunungan": "PAPUA PEGUNUNGAN",
    "Papua Selatan": "PAPUA SELATAN",
    "Papua Tengah": "PAPUA TENGAH",
    "Riau": "RIAU",
    "Sulawesi Barat": "SULAWESI BARAT",
    "Sulawesi Selatan": "SULAWESI SELATAN",
    "Sulawesi Tengah": "SULAWESI TENGAH",
    "Sulawesi Tenggara": "SULAWESI TENGGARA",
    "Sulawesi Utara": "SULAWESI UTARA",
    "Sumatera Barat": "SUMATERA BARAT",
    "Sumatera Selatan": "SUMATERA SELATAN",
    "Sumatera Utara": "SUMATERA UTARA",
}

# Placements recorded against central agencies rather than a province
CENTRAL_AGENCY_ALIASES = frozenset({"K/L/P", "PUSAT"})
CAPITAL_PROVINCE = "DKI JAKARTA"


def to_data_province_name(geojson_name: Optional[str]) -> str:
    """
    Translate a GeoJSON province name to the placement dataset spelling.

    Unknown names fall back to their upper-cased form.
    """
    if not geojson_name:
        return ""
    return PROVINCE_NAME_MAPPING.get(geojson_name, geojson_name.upper())


def map_province_name(provinsi: str) -> str:
    """Province a placement is drawn on; central agencies go to Jakarta."""
    if provinsi in CENTRAL_AGENCY_ALIASES:
        return CAPITAL_PROVINCE
    return provinsi
