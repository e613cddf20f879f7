"""
Utilities for the Penempatan dashboard.
"""

from penempatan.utils.logger import get_logger

__all__ = ["get_logger"]
