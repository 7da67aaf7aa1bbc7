from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from stylelink.dependencies import get_resolver
from stylelink.schemas.product_link import ProductQuery, WardrobeItem
from stylelink.services.link_resolver import LinkResolver
from stylelink.viewmodels.product_link_vm import ProductLinkViewModel

router = APIRouter()


@router.get("/product-link")
async def product_link(
    brand: str = "",
    product: str = "",
    color: str = "",
    resolver: LinkResolver = Depends(get_resolver),
):
    """Best shop link (and product image, when one validates) for a brand/product/color."""
    if not product.strip():
        return JSONResponse({"error": "Product name is required"}, status_code=400)

    query = ProductQuery(brand=brand, name=product, color=color or None)
    vm = await ProductLinkViewModel.load(resolver, query)
    return JSONResponse(vm.to_dict())


@router.post("/wardrobe/link")
async def wardrobe_item_link(item: WardrobeItem, resolver: LinkResolver = Depends(get_resolver)):
    vm = await ProductLinkViewModel.load_item(resolver, item)
    return JSONResponse(vm.to_dict())
