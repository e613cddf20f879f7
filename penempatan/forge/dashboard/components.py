"""
Dashboard Components - Render data for the dashboard panels.

Each component holds its own view state and exposes ``get_render_data()``;
the NiceGUI layer draws whatever it returns.
"""

from typing import Any, Dict, List, Optional

from penempatan.data.schemas.models import DetailView, Placement
from penempatan.forge.interaction import InteractionState
from penempatan.geo.choropleth import LEGEND, LEGEND_TITLE
from penempatan.state.placement_store import PlacementStore
from penempatan.utils.logger import get_logger

logger = get_logger(__name__)

PREVIEW_LIMIT = 5


def _person(p: Placement) -> Dict[str, Any]:
    return {"nama": p.nama, "unit_kerja": p.unit_kerja}


class SidebarComponent:
    """
    Searchable province list.

    The selected province is pinned above the list with a short preview,
    as long as it still matches the search term.
    """

    def __init__(self, store: PlacementStore, state: InteractionState):
        """
        Initialize the sidebar.

        Args:
            store: Placement store (dataset grouping is used)
            state: Shared interaction state
        """
        self._store = store
        self._state = state
        self._stats = store.province_stats()
        self.search_term = ""

    def set_search(self, term: Optional[str]) -> None:
        self.search_term = term or ""

    def sorted_provinces(self) -> List[str]:
        """Provinces matching the search term, largest first."""
        return self._store.search_provinces(self.search_term)

    def count(self, province: str) -> int:
        return len(self._stats.get(province, []))

    def sticky_province(self) -> Optional[str]:
        """The selected province if it survives the current filter."""
        selected = self._state.selected
        if selected and selected in self.sorted_provinces():
            return selected
        return None

    def list_provinces(self) -> List[str]:
        """The scrollable list: every match except the pinned selection."""
        return [p for p in self.sorted_provinces() if p != self._state.selected]

    def select(self, province: str) -> None:
        """Select from the list; the map hover is left alone."""
        self._state.select(province, hover=False)

    def clear_selection(self) -> None:
        self._state.clear_selection()

    def detail_for(self, province: str) -> DetailView:
        """Drill-down for a province using the dataset grouping."""
        logger.debug(f"Opening detail for {province}")
        return self._state.open_detail(province, self._stats.get(province, []))

    def get_render_data(self) -> Dict[str, Any]:
        sticky = self.sticky_province()
        sticky_data = None
        if sticky:
            people = self._stats[sticky]
            sticky_data = {
                "name": sticky,
                "count": len(people),
                "preview": [_person(p) for p in people[:PREVIEW_LIMIT]],
                "view_all_label": f"Lihat Selengkapnya ({len(people)} orang)",
            }

        return {
            "search_term": self.search_term,
            "sticky": sticky_data,
            "items": [
                {
                    "name": province,
                    "count": self.count(province),
                    "hovered": province == self._state.hovered,
                }
                for province in self.list_provinces()
            ],
        }


class StatsHeaderComponent:
    """Header totals."""

    def __init__(self, store: PlacementStore):
        self._store = store

    def get_render_data(self) -> Dict[str, Any]:
        stats = self._store.stats()
        return {
            "total_graduates": stats.total_graduates,
            "total_regions": stats.total_regions,
        }


class LegendComponent:
    """Choropleth legend."""

    def get_render_data(self) -> Dict[str, Any]:
        return {"title": LEGEND_TITLE, "items": list(LEGEND)}


class DetailDialogComponent:
    """Drill-down table for the open DetailView."""

    COLUMNS = ["No", "Nama", "Jabatan", "Unit Kerja"]

    def __init__(self, state: InteractionState):
        self._state = state

    def get_render_data(self) -> Optional[Dict[str, Any]]:
        detail = self._state.detail
        if detail is None:
            return None
        return {
            "province": detail.province,
            "count_label": f"{detail.count} orang",
            "columns": list(self.COLUMNS),
            "rows": [list(row) for row in detail.rows()],
        }
