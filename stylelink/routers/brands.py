from fastapi import APIRouter

from stylelink.services.brand_registry import build_brand_search_url, known_brands

router = APIRouter(prefix="/brands")


@router.get("/")
async def list_brands():
    return {"brands": known_brands()}


@router.get("/search-url")
async def brand_search_url(brand: str = "", q: str = ""):
    return {"url": build_brand_search_url(brand, q)}
