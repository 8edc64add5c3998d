from collections.abc import Callable
from typing import Any

import httpx
import pytest
from helpers import cms_handler

from pickup_catalog.catalog.catalog_service import CatalogService
from pickup_catalog.catalog.models import TruckImage
from pickup_catalog.cms.cms_client import CmsClient
from pickup_catalog.config import CatalogSettings


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> CatalogSettings:
    return CatalogSettings(sanity_project_id="testproj", sanity_dataset="test")


@pytest.fixture
def make_image() -> Callable[..., TruckImage]:
    def _make_image(
        title: str,
        manufacturer: str,
        asset_id: str = "abc123",
        year_range: str | None = None,
    ) -> TruckImage:
        return TruckImage.model_validate(
            {
                "alt": f"{manufacturer} {title}",
                "caption": None,
                "asset": {"_ref": f"image-{asset_id}-800x600-jpg"},
                "truckTitle": title,
                "yearRange": year_range,
                "manufacturerName": manufacturer,
                "truckSlug": title.lower().replace(" ", "-"),
                "manufacturerSlug": manufacturer.lower(),
            }
        )

    return _make_image


@pytest.fixture
def make_catalog(
    settings: CatalogSettings,
) -> Callable[[dict[str, Any]], CatalogService]:
    def _make_catalog(routes: dict[str, Any]) -> CatalogService:
        transport = httpx.MockTransport(cms_handler(routes))
        return CatalogService(CmsClient(settings, transport=transport))

    return _make_catalog
