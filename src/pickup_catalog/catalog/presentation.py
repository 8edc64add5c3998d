"""Display helpers shared by the pages and the carousel."""

import re

from pickup_catalog.catalog.models import Manufacturer, TruckImage

MORE_CATEGORY = "More..."
ONE_OFFS_CATEGORY = "One-Off's"
SPECIAL_CATEGORIES = (MORE_CATEGORY, ONE_OFFS_CATEGORY)

NO_YEAR_LABEL = "----"

_YEAR_RANGE = re.compile(r"\b(?:19|20)\d{2}[-–—]\s*(?:19|20)\d{2}\b")
_RANGE_DASH = re.compile(r"[-–—]\s*")
_SINGLE_YEAR = re.compile(r"\b(?:19|20)\d{2}\b")


def sort_manufacturers(manufacturers: list[Manufacturer]) -> list[Manufacturer]:
    """Alphabetical, with the catch-all categories at the bottom."""
    return sorted(
        manufacturers,
        key=lambda m: (m.name in SPECIAL_CATEGORIES, m.name.casefold()),
    )


def display_title(image: TruckImage) -> str:
    if image.manufacturer_name == MORE_CATEGORY:
        return image.truck_title
    return f"{image.manufacturer_name} {image.truck_title}"


def year_label(image: TruckImage) -> str:
    """
    Date stamp for an image: the model's year range, else one parsed from
    the title (a lone year becomes ``YYYY-YYYY``).
    """
    if image.year_range:
        return image.year_range

    range_match = _YEAR_RANGE.search(image.truck_title)
    if range_match:
        return _RANGE_DASH.sub("-", range_match.group(0), count=1)

    year_match = _SINGLE_YEAR.search(image.truck_title)
    if year_match:
        return f"{year_match.group(0)}-{year_match.group(0)}"

    return NO_YEAR_LABEL
