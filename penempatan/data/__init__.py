"""
Data module - Static datasets and models for the Penempatan dashboard.

This module contains:
- schemas: Pydantic models for placement records
- errors: Dataset loading errors
- penempatan.json: Bundled placement records
- indonesia-provinces.json: Simplified province boundaries (GeoJSON)
"""
