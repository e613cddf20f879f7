"""
Penempatan - Graduate placement dashboard.

The package is organized in four layers:
- data: Bundled datasets and Pydantic models
- state: DuckDB aggregation over the placement records
- geo: Province names, boundaries and choropleth coloring
- forge: NiceGUI dashboard and FastAPI JSON surface
"""

__version__ = "0.1.0"
