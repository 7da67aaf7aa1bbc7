import logging
from typing import Any
from urllib.parse import urljoin, urlsplit

import httpx
from pydantic import ValidationError

from stylelink.config import settings
from stylelink.schemas.product_link import ExtractedImage, ValidatedImage
from stylelink.services.image_selection import select_best_image
from stylelink.services.retry import RetryPolicy

logger = logging.getLogger(__name__)


def is_absolute_http_url(url: str | None) -> bool:
    if not url:
        return False
    parts = urlsplit(url.strip())
    return parts.scheme in ("http", "https") and bool(parts.netloc)


class ImageValidationClient:
    """Ask the page-metadata worker whether a candidate page has a product image."""

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        retry: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint = endpoint or settings.validator_endpoint
        self.timeout = timeout if timeout is not None else settings.validator_timeout
        self.retry = retry or RetryPolicy(
            max_attempts=settings.validator_retry_attempts,
            backoff_seconds=settings.retry_backoff_seconds,
        )
        self.transport = transport

    async def validate_candidate_image(self, url: str) -> ValidatedImage:
        """Fetch page metadata for ``url``. Empty result on any failure."""
        if not is_absolute_http_url(url):
            logger.debug("Skipping validation of non-HTTP URL: %r", url)
            return ValidatedImage()

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await self.retry.send(
                    lambda: client.get(self.endpoint, params={"url": url})
                )
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Image validation failed for %s: %s", url, exc)
            return ValidatedImage()

        if not isinstance(data, dict):
            logger.warning("Unexpected validator payload for %s: %r", url, type(data).__name__)
            return ValidatedImage()

        image = self._extract_image(data, url)
        return ValidatedImage(
            image=urljoin(url, image) if image else None,
            title=_text(data.get("title")),
            price=_text(data.get("price")),
        )

    def _extract_image(self, data: dict[str, Any], page_url: str) -> str | None:
        for key in ("image", "imageUrl"):
            image = _text(data.get(key))
            if image:
                return image

        images = data.get("images")
        if not isinstance(images, list) or not images:
            return None

        first = images[0]
        if isinstance(first, str):
            return _text(first)
        if isinstance(first, dict):
            extracted = []
            for entry in images:
                try:
                    extracted.append(ExtractedImage.model_validate(entry))
                except ValidationError:
                    continue
            return select_best_image(extracted, page_url)
        return None


def _text(value: Any) -> str | None:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
