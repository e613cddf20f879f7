"""
Forge module - UI/API layer for the Penempatan dashboard.

This module provides the NiceGUI-based dashboard with a province
choropleth, and a FastAPI JSON view of the same data.
"""

from penempatan.forge.ui import (
    create_app,
    run_app,
)

__all__ = [
    'create_app',
    'run_app',
]
