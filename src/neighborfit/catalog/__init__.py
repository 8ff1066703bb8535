"""Neighborhood catalog assembly and synthetic data generation."""

from neighborfit.catalog.builder import CatalogBuilder, CatalogResult, CatalogStats, build_catalog
from neighborfit.catalog.synthetic import AreaTag, classify_area, generate_neighborhood

__all__ = [
    "AreaTag",
    "CatalogBuilder",
    "CatalogResult",
    "CatalogStats",
    "build_catalog",
    "classify_area",
    "generate_neighborhood",
]
