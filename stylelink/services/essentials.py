import asyncio
import logging

from stylelink.config import settings
from stylelink.schemas.essentials import EssentialItem, EssentialsTree
from stylelink.schemas.product_link import ProductQuery, ResolvedLink
from stylelink.services.brand_registry import generic_search_url
from stylelink.services.link_resolver import NO_LINK, LinkResolver
from stylelink.services.placeholder import resolve_placeholder_glyph

logger = logging.getLogger(__name__)


class EssentialsEnricher:
    """Attach shop links and product images to Style DNA wardrobe essentials."""

    def __init__(self, resolver: LinkResolver | None = None, concurrency: int | None = None):
        self.resolver = resolver or LinkResolver()
        self.concurrency = concurrency or settings.enrich_concurrency

    async def enrich(self, essentials: EssentialsTree) -> dict[str, dict[str, list[dict]]]:
        semaphore = asyncio.Semaphore(self.concurrency)

        async def enrich_one(item: EssentialItem) -> dict:
            async with semaphore:
                link = await self._resolve(item)
            enriched = item.model_dump()
            enriched["product_url"] = link.url
            if link.image_url:
                enriched["image_url"] = link.image_url
            enriched["placeholder"] = resolve_placeholder_glyph(item.item or item.search_query)
            return enriched

        # one gather over the whole tree so the semaphore bounds all items together
        slots = [
            (category, product_type, item)
            for category, product_types in essentials.items()
            for product_type, items in product_types.items()
            for item in items
        ]
        results = await asyncio.gather(*(enrich_one(item) for _, _, item in slots))

        enriched: dict[str, dict[str, list[dict]]] = {
            category: {product_type: [] for product_type in product_types}
            for category, product_types in essentials.items()
        }
        for (category, product_type, _), result in zip(slots, results):
            enriched[category][product_type].append(result)

        logger.info("Enriched %d essentials across %d categories", len(slots), len(enriched))
        return enriched

    async def _resolve(self, item: EssentialItem) -> ResolvedLink:
        search_query = (item.search_query or "").strip()
        name = search_query or (item.item or "").strip()
        brand = (item.brand or "").strip()
        if not name:
            return ResolvedLink(url=generic_search_url(brand) if brand else NO_LINK)
        # search_query already carries the brand
        if search_query:
            brand = ""
        return await self.resolver.resolve_product_link(ProductQuery(brand=brand, name=name))
