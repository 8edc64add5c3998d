import random
from typing import Any
from urllib.parse import urlparse

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from pickup_catalog.catalog.carousel import Carousel
from pickup_catalog.catalog.models import TruckImage
from pickup_catalog.catalog.presentation import display_title, year_label
from pickup_catalog.cms.asset_urls import file_url, image_url
from pickup_catalog.config import CatalogSettings
from pickup_catalog.rendering.portable_text import render_portable_text

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home_page(
    request: Request,
    slide: int = Query(default=0, ge=0),
    seed: int | None = Query(default=None, ge=0),
) -> HTMLResponse:
    """
    Manufacturer menu plus the image carousel.

    The carousel order is derived from ``seed`` so that slide links keep the
    same order across requests; a new visit picks a fresh seed.
    """
    settings: CatalogSettings = request.app.state.settings
    catalog = request.app.state.catalog

    manufacturers = await catalog.list_manufacturers()
    images = await catalog.list_carousel_images()

    if seed is None:
        seed = random.randrange(1_000_000)
    carousel = Carousel(images, rng=random.Random(seed))
    if len(carousel):
        carousel.go_to(slide % len(carousel))

    logos = [
        {"href": f"/{m.slug.current}", "name": m.name, "src": image_url(m.logo.asset.ref, settings)}
        for m in manufacturers
        if m.logo
    ]

    return request.app.state.templates.TemplateResponse(
        request,
        "home.html",
        {
            "manufacturers": manufacturers,
            "logos": logos,
            "seed": seed,
            "slide": carousel.index,
            "slides": [_slide(image, settings) for image in carousel.images],
            "autoplay_seconds": settings.quiz.autoplay_seconds,
        },
    )


@router.get("/{manufacturer_slug}", response_class=HTMLResponse)
async def manufacturer_page(request: Request, manufacturer_slug: str) -> HTMLResponse:
    settings: CatalogSettings = request.app.state.settings
    catalog = request.app.state.catalog

    manufacturer = await catalog.get_manufacturer(manufacturer_slug)
    truck_models = await catalog.list_truck_models(manufacturer.id)

    return request.app.state.templates.TemplateResponse(
        request,
        "manufacturer.html",
        {
            "manufacturer": manufacturer,
            "truck_models": truck_models,
            "studio_url": settings.studio_url,
        },
    )


@router.get("/{manufacturer_slug}/{model_slug}", response_class=HTMLResponse)
async def truck_model_page(
    request: Request, manufacturer_slug: str, model_slug: str
) -> HTMLResponse:
    settings: CatalogSettings = request.app.state.settings
    truck_model = await request.app.state.catalog.get_truck_model(model_slug)

    model_url = None
    if truck_model.model3d:
        model_url = file_url(truck_model.model3d.asset.ref, settings)

    attribution = truck_model.model3d_attribution
    source_url = None
    if attribution and attribution.source and _is_web_url(attribution.source):
        source_url = attribution.source

    return request.app.state.templates.TemplateResponse(
        request,
        "truck_model.html",
        {
            "manufacturer_slug": manufacturer_slug,
            "truck_model": truck_model,
            "content_html": render_portable_text(truck_model.content, settings),
            "model_url": model_url,
            "attribution": attribution,
            "source_url": source_url,
            "studio_url": settings.studio_url,
        },
    )


def _slide(image: TruckImage, settings: CatalogSettings) -> dict[str, Any]:
    return {
        "href": image.href,
        "title": display_title(image),
        "year": year_label(image),
        "src": image_url(image.asset.ref, settings, quality=85),
        "thumb": image_url(image.asset.ref, settings, width=80, height=60, quality=70),
        "alt": image.alt or "",
        "caption": image.caption,
    }


def _is_web_url(url: str) -> bool:
    return urlparse(url).scheme in ("http", "https")
