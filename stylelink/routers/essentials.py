from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from stylelink.dependencies import get_enricher
from stylelink.schemas.essentials import EnrichRequest, EnrichResponse
from stylelink.services.essentials import EssentialsEnricher

router = APIRouter(prefix="/essentials")


@router.post("/enrich")
async def enrich_essentials(body: EnrichRequest, enricher: EssentialsEnricher = Depends(get_enricher)):
    if body.essentials is None:
        return JSONResponse({"error": "Essentials data required"}, status_code=400)

    enriched = await enricher.enrich(body.essentials)
    return EnrichResponse(essentials=enriched)
