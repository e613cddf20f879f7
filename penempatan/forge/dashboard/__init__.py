"""
Dashboard module - Panel components for the Penempatan dashboard.

This module contains:
- components: Sidebar, stats header, legend and detail dialog render data
"""

from penempatan.forge.dashboard.components import (
    SidebarComponent,
    StatsHeaderComponent,
    LegendComponent,
    DetailDialogComponent,
)

__all__ = [
    "SidebarComponent",
    "StatsHeaderComponent",
    "LegendComponent",
    "DetailDialogComponent",
]
