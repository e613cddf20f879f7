"""
Forge App - FastAPI server for the Penempatan dashboard.

This module provides a read-only JSON view of the same data the
dashboard draws: totals, the province list, per-province placements,
region hit testing and the choropleth coloring.
"""

from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from penempatan.geo.boundaries import RegionIndex, load_boundaries
from penempatan.geo.choropleth import get_color
from penempatan.state.placement_store import PlacementStore, get_placement_store
from penempatan.utils.logger import get_logger

logger = get_logger(__name__)


def create_app(
    store: Optional[PlacementStore] = None,
    regions: Optional[RegionIndex] = None,
    title: str = "Penempatan Dashboard API",
    version: str = "0.1.0"
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Placement store (global store if not provided)
        regions: Province boundaries (loaded from config if not provided)
        title: API title
        version: API version

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(title=title, version=version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.state.store = store if store is not None else get_placement_store()
    app.state.regions = regions if regions is not None else load_boundaries()

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {
            "status": "healthy",
            "placements": app.state.store.total(),
            "regions": len(app.state.regions),
            "version": version
        }

    @app.get("/api/stats")
    async def get_stats() -> Dict[str, int]:
        return app.state.store.stats().model_dump()

    @app.get("/api/provinces")
    async def list_provinces(search: str = "") -> List[Dict[str, Any]]:
        """Provinces ordered by placement count, filtered by name."""
        counts = app.state.store.counts()
        return [
            {"name": name, "count": counts.get(name, 0)}
            for name in app.state.store.search_provinces(search)
        ]

    @app.get("/api/provinces/{name:path}")
    async def get_province(name: str, merged: bool = False) -> Dict[str, Any]:
        """
        Placements recorded for a province.

        With ``merged`` the map grouping is used, where central-agency
        placements count toward DKI Jakarta.
        """
        summary = app.state.store.summary(name, merged=merged)
        if not summary.people:
            raise HTTPException(status_code=404, detail=f"No placements for province {name}")
        return {
            "name": summary.name,
            "count": summary.count,
            "people": [p.model_dump(by_alias=True) for p in summary.people]
        }

    @app.get("/api/regions/hit")
    async def hit_region(
        lat: float = Query(..., ge=-90, le=90),
        lon: float = Query(..., ge=-180, le=180)
    ) -> Dict[str, Any]:
        """Province under a map coordinate."""
        region = app.state.regions.hit_test(lat, lon)
        if region is None:
            raise HTTPException(status_code=404, detail="No region at this location")
        count = app.state.store.count_for(region.data_name, merged=True)
        return {
            "name": region.data_name,
            "geojson_name": region.geojson_name,
            "count": count,
            "color": get_color(count)
        }

    @app.get("/api/choropleth")
    async def choropleth() -> List[Dict[str, Any]]:
        """Per-region map count and fill color."""
        counts = app.state.store.counts(merged=True)
        result = []
        for region in app.state.regions:
            count = counts.get(region.data_name, 0)
            result.append({
                "name": region.data_name,
                "count": count,
                "color": get_color(count)
            })
        return result

    return app


def run_server(
    app: FastAPI,
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False
) -> None:
    """
    Run the FastAPI server.

    Args:
        app: FastAPI application instance
        host: Host to bind to
        port: Port to bind to
        reload: Enable auto-reload for development
    """
    logger.info(f"Starting Penempatan API at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, reload=reload)
