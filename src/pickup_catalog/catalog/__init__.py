"""Truck catalog: CMS documents, the catalog service and display helpers."""

from pickup_catalog.catalog.carousel import Carousel
from pickup_catalog.catalog.catalog_service import CatalogService
from pickup_catalog.catalog.presentation import (
    display_title,
    sort_manufacturers,
    year_label,
)

__all__ = [
    "CatalogService",
    "Carousel",
    "display_title",
    "sort_manufacturers",
    "year_label",
]
