"""
Penempatan Dashboard - Main Entry Point

Loads the bundled placement dataset and province boundaries, then serves
either the NiceGUI dashboard or the JSON API.

Usage:
    python -m penempatan.main [--host HOST] [--port PORT] [--api-only]
                              [--data PATH] [--boundaries PATH]
"""

import argparse
import sys
from typing import Optional, Tuple

from dotenv import load_dotenv

from penempatan.config import get_config
from penempatan.data.errors import DashboardDataError
from penempatan.geo.boundaries import RegionIndex, load_boundaries
from penempatan.state.placement_store import PlacementStore, get_placement_store
from penempatan.utils.logger import get_logger

# Load environment variables
load_dotenv()

logger = get_logger("penempatan.main")


def load_datasets(
    data_path: Optional[str] = None,
    boundaries_path: Optional[str] = None
) -> Tuple[PlacementStore, RegionIndex]:
    """
    Load the placement store and the province boundaries.

    Args:
        data_path: Placement dataset override
        boundaries_path: Boundary GeoJSON override

    Returns:
        (PlacementStore, RegionIndex)
    """
    store = get_placement_store(data_path, force_new=data_path is not None)
    regions = load_boundaries(boundaries_path)

    stats = store.stats()
    logger.info(
        f"Dashboard data ready: {stats.total_graduates} placements, "
        f"{stats.total_regions} provinces in data, {len(regions)} boundaries"
    )

    missing = sorted(set(store.counts(merged=True)) - set(regions.data_names()))
    if missing:
        logger.warning(f"Provinces without a boundary (not drawn): {', '.join(missing)}")

    return store, regions


def run_ui(host: str, port: int, store: PlacementStore, regions: RegionIndex) -> None:
    """
    Run the NiceGUI-based dashboard.

    Args:
        host: Host to bind to
        port: Port to bind to
    """
    from penempatan.forge.ui import create_app, run_app

    create_app(store, regions)
    run_app(host=host, port=port)


def run_api(host: str, port: int, store: PlacementStore, regions: RegionIndex) -> None:
    """
    Run the FastAPI JSON server.

    Args:
        host: Host to bind to
        port: Port to bind to
    """
    from penempatan.forge.app import create_app, run_server

    run_server(create_app(store, regions), host=host, port=port)


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Penempatan - Graduate placement choropleth dashboard"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind the server"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server"
    )
    parser.add_argument(
        "--api-only",
        action="store_true",
        help="Serve the JSON API instead of the dashboard"
    )
    parser.add_argument(
        "--data",
        default=None,
        help="Placement dataset (JSON list of records)"
    )
    parser.add_argument(
        "--boundaries",
        default=None,
        help="Province boundaries (GeoJSON FeatureCollection)"
    )

    args = parser.parse_args()

    try:
        store, regions = load_datasets(args.data, args.boundaries)
    except DashboardDataError as e:
        logger.error(f"Could not load dashboard data: {e}")
        sys.exit(1)

    if args.api_only:
        run_api(args.host or config.api.host, args.port or config.api.port, store, regions)
    else:
        run_ui(args.host or config.ui.host, args.port or config.ui.port, store, regions)


if __name__ in {"__main__", "__mp_main__"}:
    main()
