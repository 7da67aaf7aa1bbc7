from urllib.parse import urlsplit

from rapidfuzz import fuzz

from stylelink.config import settings
from stylelink.schemas.product_link import ExtractedImage

MAX_AREA_POINTS = 100.0
NAME_MATCH_BONUS = 50.0
GENERIC_NAME_PENALTY = 100.0
GENERIC_NAME_WORDS = ("logo", "icon", "banner")


def url_slug(url: str) -> str:
    """Last path segment of a product URL, lower-cased, without query string."""
    path = urlsplit(url).path.rstrip("/")
    return path.rsplit("/", 1)[-1].lower()


def is_usable(image: ExtractedImage) -> bool:
    # unknown dimensions are accepted tentatively
    if image.width and image.width < settings.image_min_dimension:
        return False
    if image.height and image.height < settings.image_min_dimension:
        return False
    return not urlsplit(image.url).path.lower().endswith(".svg")


def score_image(image: ExtractedImage, slug: str) -> float:
    score = 0.0

    area = (image.width or 0) * (image.height or 0)
    if area > 0:
        score += min(area, 1_000_000) / 10_000

    filename = (image.name or "").lower()
    # only a filename that fits inside the slug can match it
    if filename and slug and len(filename) <= len(slug):
        if fuzz.partial_ratio(filename, slug) >= settings.image_name_match_threshold:
            score += NAME_MATCH_BONUS

    if any(word in filename for word in GENERIC_NAME_WORDS):
        score -= GENERIC_NAME_PENALTY

    return score


def select_best_image(images: list[ExtractedImage], target_url: str) -> str | None:
    """Pick the image most likely to be the product shot of ``target_url``."""
    candidates = [img for img in images if is_usable(img)]
    if not candidates:
        return None

    slug = url_slug(target_url)
    # sorted() is stable: equal scores keep the order the validator reported
    best = sorted(candidates, key=lambda img: score_image(img, slug), reverse=True)[0]
    return best.url
