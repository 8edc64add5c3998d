import json
import logging
from types import TracebackType
from typing import Any, Self

import httpx

from pickup_catalog.cms.cms_exception import CmsRequestError, CmsResponseError
from pickup_catalog.config import CatalogSettings

log = logging.getLogger(__name__)


class CmsClient:
    """Read-only client for the hosted CMS query API."""

    def __init__(
        self,
        settings: CatalogSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        headers = {"Accept": "application/json"}
        if settings.sanity_token:
            headers["Authorization"] = f"Bearer {settings.sanity_token}"
        self._client = httpx.AsyncClient(
            base_url=settings.api_host,
            headers=headers,
            timeout=settings.cms_timeout_seconds,
            transport=transport,
        )

    async def fetch(self, query: str, params: dict[str, Any] | None = None) -> Any:
        """
        Run a GROQ query and return its ``result``.

        Query parameters are sent as ``$name`` with JSON-encoded values.

        Raises:
            CmsRequestError: On transport failure or a non-2xx status.
            CmsResponseError: If the body is not a JSON query result.
        """
        request_params = {"query": query}
        for name, value in (params or {}).items():
            request_params[f"${name}"] = json.dumps(value)

        log.debug("CMS query params=%s", sorted((params or {}).keys()))
        try:
            response = await self._client.get(self.settings.query_path, params=request_params)
        except httpx.HTTPError as e:
            raise CmsRequestError(f"CMS request failed: {e}") from e

        if response.is_error:
            raise CmsRequestError(
                f"CMS answered {response.status_code}", status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise CmsResponseError("body is not JSON") from e

        if not isinstance(body, dict) or "result" not in body:
            raise CmsResponseError("missing 'result'")

        log.debug("CMS query took %sms", body.get("ms"))
        return body["result"]

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
