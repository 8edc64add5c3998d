"""Access to the hosted CMS: queries, HTTP client and asset URLs."""

from pickup_catalog.cms.asset_urls import file_url, image_url
from pickup_catalog.cms.cms_client import CmsClient
from pickup_catalog.cms.cms_exception import (
    CmsError,
    CmsRequestError,
    CmsResponseError,
    DocumentNotFoundError,
)

__all__ = [
    "CmsClient",
    "CmsError",
    "CmsRequestError",
    "CmsResponseError",
    "DocumentNotFoundError",
    "file_url",
    "image_url",
]
