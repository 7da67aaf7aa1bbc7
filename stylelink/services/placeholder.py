DEFAULT_GLYPH = "👕"

# ordered, first match wins
GLYPH_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("shirt", "top", "blouse"), "👔"),
    (("pant", "jean", "trouser"), "👖"),
    (("dress", "gown"), "👗"),
    (("shoe", "sneaker", "boot"), "👟"),
    (("jacket", "coat", "blazer"), "🧥"),
    (("bag", "purse", "clutch"), "👜"),
    (("watch", "accessory"), "⌚"),
    (("hat", "cap"), "🧢"),
    (("scarf",), "🧣"),
    (("glasses", "sunglasses"), "🕶️"),
)


def resolve_placeholder_glyph(item_name: str | None) -> str:
    """Pick a generic category glyph for an item when no product photo exists."""
    name = (item_name or "").lower()
    for keywords, glyph in GLYPH_RULES:
        if any(keyword in name for keyword in keywords):
            return glyph
    return DEFAULT_GLYPH
