import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from pickup_catalog.quiz.models import QuizOptions

log = logging.getLogger(__name__)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class CatalogSettings(BaseModel):
    """Application settings, read from the environment and an optional .env file."""

    sanity_project_id: str = Field(default="xbw6uf6e", description="CMS project id")
    sanity_dataset: str = Field(default="production", description="CMS dataset name")
    sanity_api_version: str = Field(
        default="2024-01-01", description="Dated version of the CMS query API"
    )
    sanity_use_cdn: bool = Field(
        default=False, description="Query the cached CDN endpoint instead of the live API"
    )
    sanity_token: str = Field(default="", description="Optional read token")
    cms_timeout_seconds: float = Field(default=15.0, gt=0)
    studio_url: str = Field(
        default="https://compactpickup.sanity.studio",
        description="Where editors add content",
    )
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="", description="Enables file logging when set")
    quiz: QuizOptions = Field(default_factory=QuizOptions)

    @property
    def api_host(self) -> str:
        subdomain = "apicdn" if self.sanity_use_cdn else "api"
        return f"https://{self.sanity_project_id}.{subdomain}.sanity.io"

    @property
    def query_path(self) -> str:
        return f"/v{self.sanity_api_version}/data/query/{self.sanity_dataset}"

    @classmethod
    def from_env(cls, env_path: Path | None = None) -> "CatalogSettings":
        path = env_path or Path.cwd() / ".env"
        load_dotenv(dotenv_path=path, override=False)
        log.debug("ENV_PATH=%s exists=%s", path, path.exists())

        settings = cls(
            sanity_project_id=os.getenv("SANITY_PROJECT_ID", "xbw6uf6e"),
            sanity_dataset=os.getenv("SANITY_DATASET", "production"),
            sanity_api_version=os.getenv("SANITY_API_VERSION", "2024-01-01"),
            sanity_use_cdn=_env_flag("SANITY_USE_CDN"),
            sanity_token=os.getenv("SANITY_TOKEN", ""),
            cms_timeout_seconds=float(os.getenv("CMS_TIMEOUT_SECONDS", "15")),
            studio_url=os.getenv("STUDIO_URL", "https://compactpickup.sanity.studio"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR", ""),
        )
        log.debug("SANITY_PROJECT_ID=%s", settings.sanity_project_id)
        log.debug("SANITY_DATASET=%s", settings.sanity_dataset)
        log.debug("SANITY_USE_CDN=%s", settings.sanity_use_cdn)
        log.debug("TOKEN_LEN=%s", len(settings.sanity_token))
        return settings
