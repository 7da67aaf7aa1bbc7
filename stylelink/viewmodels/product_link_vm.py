from dataclasses import dataclass

from stylelink.schemas.product_link import ProductQuery, ResolvedLink, WardrobeItem
from stylelink.services.brand_registry import GENERIC_SEARCH_BASE
from stylelink.services.link_resolver import NO_LINK, LinkResolver
from stylelink.services.placeholder import resolve_placeholder_glyph


@dataclass
class ProductLinkViewModel:
    url: str
    image_url: str | None = None
    title: str | None = None
    price: str | None = None
    brand: str | None = None
    placeholder: str = ""
    is_fallback: bool = False

    @classmethod
    def from_link(cls, link: ResolvedLink, item_name: str | None) -> "ProductLinkViewModel":
        return cls(
            url=link.url,
            image_url=link.image_url,
            title=link.title,
            price=link.price,
            brand=link.brand,
            placeholder=resolve_placeholder_glyph(item_name),
            is_fallback=link.url == NO_LINK or link.url.startswith(GENERIC_SEARCH_BASE),
        )

    @classmethod
    async def load(cls, resolver: LinkResolver, query: ProductQuery) -> "ProductLinkViewModel":
        link = await resolver.resolve_product_link(query)
        return cls.from_link(link, query.name)

    @classmethod
    async def load_item(cls, resolver: LinkResolver, item: WardrobeItem) -> "ProductLinkViewModel":
        link = await resolver.resolve_item_link(item)
        return cls.from_link(link, item.name or item.item_name or item.sub_category)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "imageUrl": self.image_url,
            "title": self.title,
            "price": self.price,
            "brand": self.brand,
            "placeholder": self.placeholder,
            "fallback": self.is_fallback,
        }
