import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.templating import Jinja2Templates

from pickup_catalog.api.routes import pages, quiz
from pickup_catalog.catalog.catalog_service import CatalogService
from pickup_catalog.cms.cms_client import CmsClient
from pickup_catalog.cms.cms_exception import CmsError, DocumentNotFoundError
from pickup_catalog.config import CatalogSettings
from pickup_catalog.logging_setup import setup_logging
from pickup_catalog.quiz.quiz_exception import (
    EmptyPoolError,
    QuizFinishedError,
    SessionNotFoundError,
)
from pickup_catalog.quiz.quiz_session import QuizSessionRegistry

log = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def create_app(
    settings: CatalogSettings | None = None,
    catalog: CatalogService | None = None,
) -> FastAPI:
    """Build the catalog web app; ``catalog`` defaults to one backed by the live CMS."""
    settings = settings or CatalogSettings.from_env()
    catalog = catalog or CatalogService(CmsClient(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await catalog.cms.aclose()

    app = FastAPI(
        title="Pickup Catalog",
        description="Compact and mid-size pickup catalog with a trivia game",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.catalog = catalog
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.state.quiz_sessions = QuizSessionRegistry()

    _add_exception_handlers(app)

    # API routes first: the page routes capture any /{slug}
    app.include_router(quiz.router)
    app.include_router(pages.router)
    return app


def _add_exception_handlers(app: FastAPI) -> None:
    def error_response(request: Request, status_code: int, message: str) -> Response:
        if request.url.path.startswith("/api"):
            return JSONResponse({"detail": message}, status_code=status_code)
        return request.app.state.templates.TemplateResponse(
            request,
            "error.html",
            {"status_code": status_code, "message": message},
            status_code=status_code,
        )

    @app.exception_handler(DocumentNotFoundError)
    async def document_not_found(request: Request, exc: DocumentNotFoundError) -> Response:
        return error_response(request, 404, str(exc))

    @app.exception_handler(CmsError)
    async def cms_error(request: Request, exc: CmsError) -> Response:
        log.error("CMS error on %s: %s", request.url.path, exc)
        return error_response(request, 502, "The catalog is unavailable right now.")

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found(request: Request, exc: SessionNotFoundError) -> Response:
        return error_response(request, 404, exc.args[0])

    @app.exception_handler(QuizFinishedError)
    async def quiz_finished(request: Request, exc: QuizFinishedError) -> Response:
        return error_response(request, 409, str(exc))

    @app.exception_handler(EmptyPoolError)
    async def empty_pool(request: Request, exc: EmptyPoolError) -> Response:
        return error_response(request, 422, str(exc))


def main() -> None:
    import uvicorn

    settings = CatalogSettings.from_env()
    setup_logging(console_level=settings.log_level, log_dir=settings.log_dir)
    uvicorn.run(create_app(settings), host="127.0.0.1", port=5000, log_level="info")


if __name__ == "__main__":
    main()
