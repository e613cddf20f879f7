"""
Hover tooltip content and placement inside the map container.
"""

from dataclasses import dataclass, replace
from typing import Dict

TOOLTIP_HINT = "(double klik untuk informasi lengkap)"


@dataclass(frozen=True)
class TooltipContent:
    """What the hover tooltip shows, and where the pointer is (container px)."""
    name: str
    count: int
    x: float
    y: float

    @property
    def label(self) -> str:
        return f"{self.count} orang"

    @property
    def hint(self) -> str:
        return TOOLTIP_HINT

    def moved_to(self, x: float, y: float) -> "TooltipContent":
        return replace(self, x=x, y=y)


def tooltip_position(
    x: float,
    y: float,
    container_width: float,
    container_height: float,
    width: float = 280,
    height: float = 100,
    offset_x: float = 15,
    offset_y: float = 10,
    margin: float = 10
) -> Dict[str, float]:
    """
    Place the tooltip next to the pointer without leaving the container.

    The tooltip sits to the right of the pointer and flips to the left
    when it would overflow the right edge. It is pulled up to stay above
    the bottom edge and never placed closer than ``margin`` to the top.

    Args:
        x, y: Pointer position relative to the container
        container_width, container_height: Container size
        width, height: Tooltip size

    Returns:
        Dict with ``left`` and ``top`` in pixels
    """
    left = x + offset_x
    top = y - offset_y

    if left + width > container_width:
        left = x - width - offset_x
    if top + height > container_height:
        top = container_height - height - margin
    if top < margin:
        top = margin

    return {"left": left, "top": top}
