import json
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qs, urlparse

import httpx

from pickup_catalog.quiz.models import CatalogItem


def items(*pairs: tuple[str, str]) -> list[CatalogItem]:
    return [CatalogItem(title=title, group_key=group) for title, group in pairs]


def groq_params(request: httpx.Request) -> dict[str, Any]:
    """Decode the $-prefixed query parameters of a CMS request."""
    query = parse_qs(urlparse(str(request.url)).query)
    return {
        name[1:]: json.loads(values[0]) for name, values in query.items() if name.startswith("$")
    }


def cms_handler(routes: dict[str, Any]) -> Callable[[httpx.Request], httpx.Response]:
    """
    Fake CMS: answers with the result of the first route whose key appears in
    the GROQ query. Callable results receive the decoded query parameters.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        query = parse_qs(urlparse(str(request.url)).query)["query"][0]
        for fragment, result in routes.items():
            if fragment in query:
                if callable(result):
                    result = result(groq_params(request))
                return httpx.Response(200, json={"ms": 1, "query": query, "result": result})
        return httpx.Response(200, json={"ms": 1, "query": query, "result": None})

    return handler
