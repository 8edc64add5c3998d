import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from pickup_catalog.catalog.models import (
    Manufacturer,
    TruckImage,
    TruckModel,
    TruckModelSummary,
)
from pickup_catalog.catalog.presentation import sort_manufacturers
from pickup_catalog.cms.cms_client import CmsClient
from pickup_catalog.cms.cms_exception import CmsResponseError, DocumentNotFoundError
from pickup_catalog.cms.queries import (
    ALL_TRUCK_IMAGES_QUERY,
    MANUFACTURER_BY_SLUG_QUERY,
    MANUFACTURERS_QUERY,
    TRUCK_MODEL_BY_SLUG_QUERY,
    TRUCK_MODELS_BY_MANUFACTURER_QUERY,
)

log = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class CatalogService:
    """Typed read access to manufacturers, truck models and their images."""

    def __init__(self, cms: CmsClient):
        self.cms = cms

    async def list_manufacturers(self) -> list[Manufacturer]:
        rows = await self._fetch_list(MANUFACTURERS_QUERY)
        return sort_manufacturers(self._parse_rows(Manufacturer, rows))

    async def get_manufacturer(self, slug: str) -> Manufacturer:
        row = await self.cms.fetch(MANUFACTURER_BY_SLUG_QUERY, {"slug": slug})
        if row is None:
            raise DocumentNotFoundError("manufacturer", slug)
        return Manufacturer.model_validate(row)

    async def list_truck_models(self, manufacturer_id: str) -> list[TruckModelSummary]:
        rows = await self._fetch_list(
            TRUCK_MODELS_BY_MANUFACTURER_QUERY, {"manufacturerId": manufacturer_id}
        )
        return self._parse_rows(TruckModelSummary, rows)

    async def get_truck_model(self, slug: str) -> TruckModel:
        row = await self.cms.fetch(TRUCK_MODEL_BY_SLUG_QUERY, {"slug": slug})
        if row is None:
            raise DocumentNotFoundError("truck model", slug)
        return TruckModel.model_validate(row)

    async def list_carousel_images(self) -> list[TruckImage]:
        """Every inline image of every truck model, flattened into one list."""
        trucks = await self._fetch_list(ALL_TRUCK_IMAGES_QUERY)
        images: list[TruckImage] = []
        for truck in trucks:
            if not isinstance(truck, dict):
                continue
            images.extend(self._parse_rows(TruckImage, truck.get("images") or []))
        return images

    async def _fetch_list(
        self, query: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        result = await self.cms.fetch(query, params)
        if result is None:
            return []
        if not isinstance(result, list):
            raise CmsResponseError(f"expected a list, got {type(result).__name__}")
        return result

    def _parse_rows(
        self, model: type[T], rows: list[dict[str, Any]]
    ) -> list[T]:
        """Validate each row, skipping (and logging) the ones that do not fit."""
        parsed: list[T] = []
        for row in rows:
            try:
                parsed.append(model.model_validate(row))
            except ValidationError as e:
                log.warning(
                    "Skipping malformed %s row: %s", model.__name__, e.errors()[0]["msg"]
                )
        return parsed
