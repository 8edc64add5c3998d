import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from pickup_catalog.cms.asset_urls import is_file_ref, is_image_ref
from pickup_catalog.quiz.models import CatalogItem

log = logging.getLogger(__name__)


class CmsModel(BaseModel):
    """Base for documents decoded from CMS query results."""

    model_config = ConfigDict(populate_by_name=True)


class Slug(CmsModel):
    current: str = Field(..., min_length=1, description="URL-safe identifier")


class AssetReference(CmsModel):
    ref: str = Field(..., alias="_ref", description="CMS asset id, e.g. image-<id>-800x600-jpg")


class SanityImage(CmsModel):
    """Image field or inline image block."""

    asset: AssetReference
    alt: str | None = Field(None, description="Alternative text")
    caption: str | None = Field(None, description="Caption shown under the image")

    @field_validator("asset")
    @classmethod
    def _check_image_ref(cls, asset: AssetReference) -> AssetReference:
        if not is_image_ref(asset.ref):
            raise ValueError(f"Not an image asset reference: {asset.ref}")
        return asset


class SanityFile(CmsModel):
    asset: AssetReference

    @field_validator("asset")
    @classmethod
    def _check_file_ref(cls, asset: AssetReference) -> AssetReference:
        if not is_file_ref(asset.ref):
            raise ValueError(f"Not a file asset reference: {asset.ref}")
        return asset


def _optional_asset(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Drop an unusable optional asset instead of rejecting the whole document."""
    try:
        return handler(value)
    except ValidationError as e:
        log.warning("Ignoring unusable asset: %s", e.errors()[0]["msg"])
        return None


class Manufacturer(CmsModel):
    id: str = Field(..., alias="_id")
    name: str = Field(..., min_length=1, description="Manufacturer name")
    slug: Slug
    logo: SanityImage | None = Field(None, description="Optional logo shown on the home page")

    drop_unusable_logo = field_validator("logo", mode="wrap")(_optional_asset)


class ManufacturerRef(CmsModel):
    """Manufacturer as dereferenced from a truck model."""

    name: str
    slug: Slug


class TruckModelSummary(CmsModel):
    id: str = Field(..., alias="_id")
    title: str = Field(..., min_length=1, description='e.g. "Tacoma 1995-2004 (1st Gen)"')
    slug: Slug
    year_range: str | None = Field(None, alias="yearRange", description='e.g. "1995-2004"')
    manufacturer: ManufacturerRef


class ModelAttribution(CmsModel):
    """Credit for a third-party 3D model."""

    creator: str | None = None
    source: str | None = Field(None, description="Link to the original model source")
    license: str | None = Field(None, description="e.g. CC Attribution, CC0")


class TruckModel(TruckModelSummary):
    content: list[dict[str, Any]] = Field(
        default_factory=list, description="Portable text blocks and inline images"
    )
    model3d: SanityFile | None = Field(None, description="GLB model file")
    model3d_attribution: ModelAttribution | None = Field(None, alias="model3dAttribution")

    drop_unusable_model3d = field_validator("model3d", mode="wrap")(_optional_asset)


class TruckImage(SanityImage):
    """A content image flattened together with its truck model's metadata."""

    truck_title: str = Field(..., alias="truckTitle", min_length=1)
    year_range: str | None = Field(None, alias="yearRange")
    manufacturer_name: str = Field(..., alias="manufacturerName")
    truck_slug: str = Field(..., alias="truckSlug")
    manufacturer_slug: str = Field(..., alias="manufacturerSlug")

    @property
    def href(self) -> str:
        return f"/{self.manufacturer_slug}/{self.truck_slug}"

    def to_catalog_item(self) -> CatalogItem:
        return CatalogItem(title=self.truck_title, group_key=self.manufacturer_name)
