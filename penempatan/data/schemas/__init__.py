"""
Data Schemas for the Penempatan dashboard.

This module exports the Pydantic models used throughout the dashboard.
"""

from penempatan.data.schemas.models import (
    Placement,
    ProvinceSummary,
    DetailView,
    DashboardStats,
)

__all__ = [
    'Placement',
    'ProvinceSummary',
    'DetailView',
    'DashboardStats',
]
