"""Pickup Catalog - truck model catalog and trivia game over a hosted CMS."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pickup-catalog")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Core Components
from pickup_catalog.quiz.choice_generator.choice_generator import (
    ChoiceGenerator,
    generate_choices,
)
from pickup_catalog.quiz.quiz_session import QuizSession, QuizSessionRegistry
from pickup_catalog.catalog.carousel import Carousel
from pickup_catalog.catalog.catalog_service import CatalogService
from pickup_catalog.cms.cms_client import CmsClient
from pickup_catalog.config import CatalogSettings
from pickup_catalog.rendering.portable_text import PortableTextRenderer

__all__ = [
    "__version__",
    "CatalogService",
    "CatalogSettings",
    "Carousel",
    "ChoiceGenerator",
    "CmsClient",
    "PortableTextRenderer",
    "QuizSession",
    "QuizSessionRegistry",
    "generate_choices",
    # Models must use full paths
]
