import logging

import httpx

from stylelink.config import settings
from stylelink.schemas.product_link import Candidate, ProductQuery
from stylelink.schemas.search_response import decode_search_response, to_candidates
from stylelink.services.retry import RetryPolicy

logger = logging.getLogger(__name__)

OFFICIAL_SITE_HINT = "official site"


def compose_search_text(query: ProductQuery) -> str:
    parts = [query.brand, query.name, query.color, OFFICIAL_SITE_HINT]
    return " ".join(part for part in parts if part)


class CandidateSearchClient:
    """Ask the external search worker for product pages matching a query."""

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        retry: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint = endpoint or settings.search_endpoint
        self.timeout = timeout if timeout is not None else settings.search_timeout
        self.retry = retry or RetryPolicy(
            max_attempts=settings.search_retry_attempts,
            backoff_seconds=settings.retry_backoff_seconds,
        )
        self.transport = transport

    async def search_candidates(self, query: ProductQuery, limit: int = 5) -> list[Candidate]:
        """Return up to ``limit`` candidates in provider order; [] on any provider failure."""
        limit = max(1, min(limit, settings.search_max_limit))
        text = compose_search_text(query)
        payload = {"query": text, "limit": limit}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await self.retry.send(lambda: client.post(self.endpoint, json=payload))
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Candidate search failed for %r: %s", text, exc)
            return []

        candidates = to_candidates(decode_search_response(data))[:limit]
        logger.info("Search provider returned %d candidates for: %s", len(candidates), text)
        return candidates
