"""
Choropleth coloring for province regions.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

EMPTY_COLOR = "#e2e8f0"


@dataclass(frozen=True)
class ColorBucket:
    """An upper-bounded count bucket and its fill color."""
    upper: float
    color: str
    label: str


BUCKETS: List[ColorBucket] = [
    ColorBucket(5, "#dbeafe", "1 - 5"),
    ColorBucket(10, "#93c5fd", "6 - 10"),
    ColorBucket(15, "#60a5fa", "11 - 15"),
    ColorBucket(20, "#3b82f6", "16 - 20"),
    ColorBucket(float("inf"), "#1e40af", "> 20"),
]

LEGEND_TITLE = "Jumlah Penempatan"
LEGEND: List[Dict[str, str]] = [{"color": b.color, "label": b.label} for b in BUCKETS]

BORDER_COLOR = "#64748b"
HIGHLIGHT_COLOR = "#1e3a5f"

HOVER_STYLE: Dict[str, Any] = {
    "weight": 3,
    "color": HIGHLIGHT_COLOR,
    "fillOpacity": 0.9,
}


def get_color(count: int) -> str:
    """Fill color for a region holding ``count`` placements."""
    if count <= 0:
        return EMPTY_COLOR
    for bucket in BUCKETS:
        if count <= bucket.upper:
            return bucket.color
    return BUCKETS[-1].color


def feature_style(count: int, selected: bool = False) -> Dict[str, Any]:
    """Leaflet path options for a region at rest."""
    return {
        "fillColor": get_color(count),
        "fillOpacity": 0.9 if selected else 0.75,
        "color": HIGHLIGHT_COLOR if selected else BORDER_COLOR,
        "weight": 3 if selected else 1,
        "opacity": 1,
    }


def hover_style(count: int, selected: bool = False) -> Dict[str, Any]:
    """Leaflet path options while the pointer is over a region."""
    style = feature_style(count, selected)
    style.update(HOVER_STYLE)
    return style
