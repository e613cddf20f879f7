"""
Interaction state for the dashboard: hover, selection and drill-down.

Map pointer events arrive already hit-tested to a province name. A single
click toggles the selection, a double click opens the detail view. Because
a browser reports two clicks before every double click, single clicks are
delayed and cancelled when a double click follows.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol

from penempatan.data.schemas.models import DetailView, Placement
from penempatan.utils.logger import get_logger

logger = get_logger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def asyncio_scheduler(delay: float, callback: Callable[[], None]) -> TimerHandle:
    """Schedule ``callback`` on the running event loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


@dataclass
class InteractionState:
    """
    Current UI state.

    ``selected`` and ``hovered`` hold dataset province names.
    ``detail`` is the open drill-down, if any.
    """
    selected: Optional[str] = None
    hovered: Optional[str] = None
    detail: Optional[DetailView] = None

    def select(self, province: Optional[str], hover: bool = True) -> None:
        """Set the selection; with ``hover`` a selected province also becomes hovered."""
        self.selected = province
        if province and hover:
            self.hovered = province

    def toggle_select(self, province: str) -> None:
        """Select a province, or clear the selection if it is already selected."""
        self.select(None if province == self.selected else province)

    def clear_selection(self) -> None:
        self.selected = None

    def hover(self, province: Optional[str]) -> None:
        self.hovered = province

    def open_detail(self, province: str, people: List[Placement]) -> DetailView:
        self.detail = DetailView(province=province, people=list(people))
        return self.detail

    def close_detail(self) -> None:
        self.detail = None


class ClickDisambiguator:
    """
    Separates single clicks from double clicks.

    Each click schedules its action after ``delay`` seconds, replacing any
    pending click. A double click cancels the pending click and runs
    immediately.
    """

    def __init__(self, delay: float = 0.25, scheduler: Optional[Scheduler] = None):
        self.delay = delay
        self._scheduler = scheduler or asyncio_scheduler
        self._pending: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def click(self, action: Callable[[], Any]) -> None:
        self.cancel()

        def fire() -> None:
            self._pending = None
            action()

        self._pending = self._scheduler(self.delay, fire)

    def double_click(self, action: Callable[[], Any]) -> None:
        self.cancel()
        action()


class MapInteractionController:
    """
    Applies map events to an InteractionState.

    Args:
        state: Shared interaction state
        people_lookup: Returns the map-grouped placements of a province
        on_change: Called after every state change
        disambiguator: Click/double-click separator
    """

    def __init__(
        self,
        state: InteractionState,
        people_lookup: Callable[[str], List[Placement]],
        on_change: Optional[Callable[[InteractionState], None]] = None,
        disambiguator: Optional[ClickDisambiguator] = None
    ):
        self.state = state
        self._people_lookup = people_lookup
        self._on_change = on_change
        self.disambiguator = disambiguator or ClickDisambiguator()

    def _changed(self) -> None:
        if self._on_change:
            self._on_change(self.state)

    def hover(self, province: Optional[str]) -> bool:
        """Update the hovered province; returns True if it changed."""
        if province == self.state.hovered:
            return False
        self.state.hover(province)
        self._changed()
        return True

    def click(self, province: str) -> None:
        def select() -> None:
            self.state.toggle_select(province)
            logger.debug(f"Selection is now {self.state.selected!r}")
            self._changed()

        self.disambiguator.click(select)

    def double_click(self, province: str) -> None:
        def drill_down() -> None:
            people = self._people_lookup(province)
            if not people:
                return
            self.state.open_detail(province, people)
            self._changed()

        self.disambiguator.double_click(drill_down)
