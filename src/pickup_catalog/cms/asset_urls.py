"""Build CDN URLs for CMS image and file assets."""

import re
from urllib.parse import urlencode

from pickup_catalog.config import CatalogSettings

CDN_HOST = "https://cdn.sanity.io"

_IMAGE_REF = re.compile(r"^image-(?P<id>[A-Za-z0-9]+)-(?P<dims>\d+x\d+)-(?P<ext>[a-z0-9]+)$")
_FILE_REF = re.compile(r"^file-(?P<id>[A-Za-z0-9]+)-(?P<ext>[a-z0-9]+)$")


def is_image_ref(ref: str) -> bool:
    return _IMAGE_REF.match(ref) is not None


def is_file_ref(ref: str) -> bool:
    return _FILE_REF.match(ref) is not None


def image_url(
    ref: str,
    settings: CatalogSettings,
    width: int | None = None,
    height: int | None = None,
    quality: int | None = None,
) -> str:
    """
    URL of an image asset, optionally resized and re-encoded by the CDN.

    Raises:
        ValueError: If ``ref`` is not an image asset reference.
    """
    match = _IMAGE_REF.match(ref)
    if not match:
        raise ValueError(f"Not an image asset reference: {ref}")

    url = (
        f"{CDN_HOST}/images/{settings.sanity_project_id}/{settings.sanity_dataset}/"
        f"{match['id']}-{match['dims']}.{match['ext']}"
    )
    params = {
        key: value
        for key, value in (("w", width), ("h", height), ("q", quality))
        if value is not None
    }
    return f"{url}?{urlencode(params)}" if params else url


def file_url(ref: str, settings: CatalogSettings) -> str:
    """
    URL of a file asset such as a GLB model.

    Raises:
        ValueError: If ``ref`` is not a file asset reference.
    """
    match = _FILE_REF.match(ref)
    if not match:
        raise ValueError(f"Not a file asset reference: {ref}")
    return (
        f"{CDN_HOST}/files/{settings.sanity_project_id}/{settings.sanity_dataset}/"
        f"{match['id']}.{match['ext']}"
    )
