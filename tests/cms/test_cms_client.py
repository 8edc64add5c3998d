import json

import httpx
import pytest
from helpers import groq_params

from pickup_catalog.cms.cms_client import CmsClient
from pickup_catalog.cms.cms_exception import CmsRequestError, CmsResponseError
from pickup_catalog.config import CatalogSettings


@pytest.mark.anyio
class TestCmsClient:
    """Test the CMS query client against a mocked transport."""

    async def test_fetch_builds_query_request(self, settings: CatalogSettings) -> None:
        # Given
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ms": 3, "result": [{"_id": "x"}]})

        # When
        async with CmsClient(settings, transport=httpx.MockTransport(handler)) as client:
            result = await client.fetch("*[slug.current == $slug]", {"slug": "tacoma"})

        # Then
        assert result == [{"_id": "x"}]
        request = seen[0]
        assert request.url.host == "testproj.api.sanity.io"
        assert request.url.path == "/v2024-01-01/data/query/test"
        assert request.url.params["query"] == "*[slug.current == $slug]"
        assert groq_params(request) == {"slug": "tacoma"}
        assert "authorization" not in request.headers

    async def test_cdn_and_token(self) -> None:
        # Given
        settings = CatalogSettings(
            sanity_project_id="p1", sanity_use_cdn=True, sanity_token="secret"
        )
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"result": None})

        # When
        async with CmsClient(settings, transport=httpx.MockTransport(handler)) as client:
            result = await client.fetch("*[0]")

        # Then
        assert result is None
        assert seen[0].url.host == "p1.apicdn.sanity.io"
        assert seen[0].headers["authorization"] == "Bearer secret"

    async def test_error_status_raises(self, settings: CatalogSettings) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))

        async with CmsClient(settings, transport=transport) as client:
            with pytest.raises(CmsRequestError) as exc_info:
                await client.fetch("*")

        assert exc_info.value.status_code == 500

    async def test_transport_failure_raises(self, settings: CatalogSettings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        async with CmsClient(settings, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(CmsRequestError, match="unreachable"):
                await client.fetch("*")

    async def test_non_json_body_raises(self, settings: CatalogSettings) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))

        async with CmsClient(settings, transport=transport) as client:
            with pytest.raises(CmsResponseError, match="not JSON"):
                await client.fetch("*")

    async def test_missing_result_raises(self, settings: CatalogSettings) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, content=json.dumps({"ms": 1}).encode())
        )

        async with CmsClient(settings, transport=transport) as client:
            with pytest.raises(CmsResponseError, match="result"):
                await client.fetch("*")
