"""
Shared fixtures: fake search and validator workers built on httpx.MockTransport.
"""
import json
from collections.abc import Callable

import httpx
import pytest

from stylelink.schemas.product_link import ProductQuery
from stylelink.services.candidate_search import CandidateSearchClient
from stylelink.services.image_validation import ImageValidationClient
from stylelink.services.link_resolver import LinkResolver

SEARCH_ENDPOINT = "https://search.test/search-product"
VALIDATOR_ENDPOINT = "https://validator.test/"


class FakeSearchWorker:
    """Answers every POST with a canned JSON body (or status) and records requests."""

    def __init__(self, body=None, status_code: int = 200, raise_error: Exception | None = None):
        self.body = body if body is not None else {"results": []}
        self.status_code = status_code
        self.raise_error = raise_error
        self.requests: list[dict] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.raise_error is not None:
            raise self.raise_error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FakeValidatorWorker:
    """Returns page metadata per candidate URL; unknown URLs get an empty body."""

    def __init__(self, pages: dict[str, dict] | None = None, failing: set[str] | None = None):
        self.pages = pages or {}
        self.failing = failing or set()
        self.calls: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = request.url.params["url"]
        self.calls.append(url)
        if url in self.failing:
            return httpx.Response(500, json={"error": "upstream fetch failed"})
        return httpx.Response(200, json=self.pages.get(url, {}))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def results(*urls: str, **extra) -> dict:
    return {"results": [{"url": url, **extra} for url in urls]}


@pytest.fixture
def zara_query() -> ProductQuery:
    return ProductQuery(brand="Zara", name="white oxford shirt", color="white")


@pytest.fixture
def make_resolver() -> Callable[..., LinkResolver]:
    def _make(search: FakeSearchWorker, validator: FakeValidatorWorker, **kwargs) -> LinkResolver:
        return LinkResolver(
            search=CandidateSearchClient(endpoint=SEARCH_ENDPOINT, transport=search.transport),
            validator=ImageValidationClient(endpoint=VALIDATOR_ENDPOINT, transport=validator.transport),
            **kwargs,
        )

    return _make
