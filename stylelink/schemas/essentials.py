from pydantic import BaseModel, Field


class EssentialItem(BaseModel):
    item: str | None = None
    brand: str | None = None
    search_query: str | None = None

    model_config = {"extra": "allow"}


# {category: {product_type: [item, ...]}}
EssentialsTree = dict[str, dict[str, list[EssentialItem]]]


class EnrichRequest(BaseModel):
    essentials: EssentialsTree | None = None


class EnrichResponse(BaseModel):
    essentials: dict[str, dict[str, list[dict]]] = Field(default_factory=dict)
