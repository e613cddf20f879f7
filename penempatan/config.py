"""
Configuration module for the Penempatan dashboard.

Centralizes configuration management and environment variable handling.
The dashboard reads a static placement dataset and a province boundary
GeoJSON bundled with the package.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DATA_DIR = Path(__file__).parent / "data"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class DataConfig:
    """Locations of the bundled datasets."""
    placements_path: str = field(
        default_factory=lambda: os.getenv(
            "PLACEMENTS_PATH",
            str(DATA_DIR / "penempatan.json")
        )
    )
    boundaries_path: str = field(
        default_factory=lambda: os.getenv(
            "BOUNDARIES_PATH",
            str(DATA_DIR / "indonesia-provinces.json")
        )
    )
    # GeoJSON property holding the province name
    name_property: str = field(
        default_factory=lambda: os.getenv("BOUNDARIES_NAME_PROPERTY", "PROVINSI")
    )


@dataclass
class MapConfig:
    """Leaflet map configuration."""
    center_lat: float = field(default_factory=lambda: float(os.getenv("MAP_CENTER_LAT", "-2.5")))
    center_lon: float = field(default_factory=lambda: float(os.getenv("MAP_CENTER_LON", "118")))
    zoom: int = field(default_factory=lambda: int(os.getenv("MAP_ZOOM", "5")))
    min_zoom: int = field(default_factory=lambda: int(os.getenv("MAP_MIN_ZOOM", "4")))
    max_zoom: int = field(default_factory=lambda: int(os.getenv("MAP_MAX_ZOOM", "10")))
    tile_url: str = field(
        default_factory=lambda: os.getenv(
            "MAP_TILE_URL",
            "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png"
        )
    )
    tile_subdomains: str = field(default_factory=lambda: os.getenv("MAP_TILE_SUBDOMAINS", "abcd"))
    tile_max_zoom: int = field(default_factory=lambda: int(os.getenv("MAP_TILE_MAX_ZOOM", "20")))
    # Seconds to wait before treating a click as a single click
    click_delay: float = field(default_factory=lambda: float(os.getenv("MAP_CLICK_DELAY", "0.25")))
    # Initial container size in pixels, updated from resize events
    width: int = field(default_factory=lambda: int(os.getenv("MAP_WIDTH", "900")))
    height: int = field(default_factory=lambda: int(os.getenv("MAP_HEIGHT", "600")))

    @property
    def center(self) -> Tuple[float, float]:
        return (self.center_lat, self.center_lon)


@dataclass
class TooltipConfig:
    """Hover tooltip geometry in pixels."""
    width: int = field(default_factory=lambda: int(os.getenv("TOOLTIP_WIDTH", "280")))
    height: int = field(default_factory=lambda: int(os.getenv("TOOLTIP_HEIGHT", "100")))
    offset_x: int = 15
    offset_y: int = 10
    margin: int = 10


@dataclass
class AuthConfig:
    """Access gate configuration."""
    # Pre-computed hash of the access phrase
    password_hash: str = field(default_factory=lambda: os.getenv("ACCESS_HASH", "-ruwgmd"))
    verify_delay: float = field(default_factory=lambda: float(os.getenv("ACCESS_VERIFY_DELAY", "0.5")))
    storage_secret: str = field(
        default_factory=lambda: os.getenv("STORAGE_SECRET", "penempatan-dashboard")
    )


@dataclass
class UIConfig:
    """NiceGUI configuration."""
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))
    title: str = field(default_factory=lambda: os.getenv("UI_TITLE", "Dashboard Penempatan Lulusan"))
    subtitle: str = field(default_factory=lambda: os.getenv("UI_SUBTITLE", "Polstat STIS D4 63 dan D3 64"))
    dark_mode: bool = field(default_factory=lambda: _env_bool("UI_DARK_MODE", "false"))
    reload: bool = field(default_factory=lambda: _env_bool("UI_RELOAD", "false"))


@dataclass
class APIConfig:
    """FastAPI configuration."""
    host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))


@dataclass
class DashboardConfig:
    """Main configuration class for the Penempatan dashboard."""
    data: DataConfig = field(default_factory=DataConfig)
    map: MapConfig = field(default_factory=MapConfig)
    tooltip: TooltipConfig = field(default_factory=TooltipConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    api: APIConfig = field(default_factory=APIConfig)


# Global configuration instance
config = DashboardConfig()


def get_config() -> DashboardConfig:
    """Get the global configuration instance."""
    return config


def reload_config() -> DashboardConfig:
    """Reload configuration from environment variables."""
    global config
    load_dotenv(override=True)
    config = DashboardConfig()
    return config
