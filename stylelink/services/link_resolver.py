import asyncio
import logging

from stylelink.config import settings
from stylelink.schemas.product_link import Candidate, ProductQuery, ResolvedLink, WardrobeItem
from stylelink.services.brand_registry import generic_search_url
from stylelink.services.candidate_search import CandidateSearchClient
from stylelink.services.image_validation import ImageValidationClient, is_absolute_http_url

logger = logging.getLogger(__name__)

# results pages of search engines; validating them only loops back into
# search/CAPTCHA pages
EXCLUDED_URL_PATTERNS = (
    "google.com/search",
    "bing.com/search",
    "duckduckgo.com/?",
)

NO_LINK = "#"


def is_excluded(url: str) -> bool:
    lowered = url.lower()
    return any(pattern in lowered for pattern in EXCLUDED_URL_PATTERNS)


def eligible_candidates(candidates: list[Candidate]) -> list[Candidate]:
    return [c for c in candidates if is_absolute_http_url(c.url) and not is_excluded(c.url)]


def describe_query(query: ProductQuery) -> str:
    return " ".join(part for part in (query.brand, query.name, query.color) if part)


class LinkResolver:
    """Turn a (brand, name, color) query into a link that is always renderable.

    Candidates are validated one at a time, in the order the search provider
    ranked them, and the first one with a confirmed image wins. Without an
    image the first candidate is used as is; without candidates the user gets
    a generic shopping search.
    """

    def __init__(
        self,
        search: CandidateSearchClient | None = None,
        validator: ImageValidationClient | None = None,
        candidate_limit: int | None = None,
        deadline: float | None = None,
    ):
        self.search = search or CandidateSearchClient()
        self.validator = validator or ImageValidationClient()
        self.candidate_limit = candidate_limit or settings.resolution_candidate_limit
        self.deadline = deadline if deadline is not None else settings.resolution_timeout

    async def resolve_product_link(self, query: ProductQuery) -> ResolvedLink:
        if query is None:
            raise TypeError("resolve_product_link() requires a ProductQuery, got None")

        candidates: list[Candidate] = []
        try:
            async with asyncio.timeout(self.deadline):
                found = await self.search.search_candidates(query, limit=self.candidate_limit)
                candidates = eligible_candidates(found)
                if len(candidates) < len(found):
                    logger.info("Dropped %d ineligible candidates", len(found) - len(candidates))

                for candidate in candidates:
                    validated = await self.validator.validate_candidate_image(candidate.url)
                    if validated.image:
                        logger.info("Resolved %s to %s", describe_query(query), candidate.url)
                        return ResolvedLink(
                            url=candidate.url,
                            image_url=validated.image,
                            title=validated.title or candidate.title,
                            price=validated.price or candidate.price,
                            brand=candidate.brand or query.brand or None,
                        )
        except TimeoutError:
            logger.warning(
                "Resolution of %r exceeded %.1fs, degrading", describe_query(query), self.deadline
            )

        if candidates:
            first = candidates[0]
            logger.info("No candidate image validated, using first candidate %s", first.url)
            return ResolvedLink(
                url=first.url,
                title=first.title,
                price=first.price,
                brand=first.brand or query.brand or None,
            )

        logger.info("No candidates for %r, falling back to generic search", describe_query(query))
        return ResolvedLink(url=generic_search_url(describe_query(query)))

    async def resolve_item_link(self, item: WardrobeItem) -> ResolvedLink:
        """Resolve a stored wardrobe item, preferring a link the item already carries."""
        for direct in (item.link, item.source_url):
            if direct and direct.startswith("http"):
                return ResolvedLink(url=direct)

        brand = (item.brand or "").strip()
        name = (item.name or item.item_name or item.sub_category or "").strip()
        color = (item.color or item.primary_color or "").strip()
        if color and color.lower() in name.lower():
            color = ""

        if not name:
            if not brand:
                return ResolvedLink(url=NO_LINK)
            # brand alone is still worth a shopping search
            return ResolvedLink(url=generic_search_url(" ".join(filter(None, (brand, color)))))

        return await self.resolve_product_link(ProductQuery(brand=brand, name=name, color=color or None))
