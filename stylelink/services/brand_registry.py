from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote

GENERIC_SEARCH_BASE = "https://www.google.com/search"


def encode_component(text: str) -> str:
    """Percent-encode a query component the way browsers' encodeURIComponent does."""
    return quote(text, safe="!~*'()")


def generic_search_url(text: str) -> str:
    return f"{GENERIC_SEARCH_BASE}?q={encode_component(text.strip())}&tbm=shop"


@dataclass(frozen=True)
class BrandSearchEntry:
    brand_name: str
    url_builder: Callable[[str], str]


def _template(prefix: str) -> Callable[[str], str]:
    return lambda q: f"{prefix}{encode_component(q)}"


_BRAND_SEARCH_ENTRIES: tuple[BrandSearchEntry, ...] = (
    BrandSearchEntry("Zara", _template("https://www.zara.com/in/en/search?searchTerm=")),
    BrandSearchEntry("H&M", _template("https://www2.hm.com/en_in/search-results.html?q=")),
    BrandSearchEntry("Uniqlo", _template("https://www.uniqlo.com/in/en/search?q=")),
    BrandSearchEntry("Nike", _template("https://www.nike.com/in/w?q=")),
    BrandSearchEntry("Adidas", _template("https://www.adidas.co.in/search?q=")),
    BrandSearchEntry("Mango", _template("https://shop.mango.com/in/search?q=")),
    BrandSearchEntry("Massimo Dutti", _template("https://www.massimodutti.com/in/search?searchTerm=")),
    BrandSearchEntry("COS", _template("https://www.cosstores.com/en_inr/search.html?q=")),
    BrandSearchEntry("Marks & Spencer", _template("https://www.marksandspencer.in/search?q=")),
    BrandSearchEntry("Gap", _template("https://www.gap.in/search?query=")),
    BrandSearchEntry("Levi's", _template("https://www.levi.in/search?q=")),
    BrandSearchEntry("Tommy Hilfiger", _template("https://in.tommy.com/search?q=")),
    BrandSearchEntry("Ralph Lauren", _template("https://www.ralphlauren.co.in/search?q=")),
    BrandSearchEntry("Calvin Klein", _template("https://www.calvinklein.co.in/search?q=")),
)

# keyed by lower-cased brand name
BRAND_SEARCH_URLS: dict[str, BrandSearchEntry] = {
    entry.brand_name.lower(): entry for entry in _BRAND_SEARCH_ENTRIES
}


def find_brand_entry(brand: str | None) -> BrandSearchEntry | None:
    if not brand:
        return None
    return BRAND_SEARCH_URLS.get(brand.strip().lower())


def known_brands() -> list[str]:
    return [entry.brand_name for entry in _BRAND_SEARCH_ENTRIES]


def build_brand_search_url(brand: str, item_query: str) -> str:
    """Site-search URL on the brand's own store, or a generic shopping search.

    Unknown brands fall back to a shopping search for "<brand> <item_query>".
    """
    entry = find_brand_entry(brand)
    if entry is not None:
        return entry.url_builder(item_query)
    return generic_search_url(f"{brand or ''} {item_query or ''}")
