from pydantic import BaseModel, Field, field_validator


class ProductQuery(BaseModel):
    brand: str = ""
    name: str = Field(min_length=1)
    color: str | None = None

    @field_validator("brand", "name", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("color", mode="before")
    @classmethod
    def _blank_color(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class Candidate(BaseModel):
    url: str
    title: str | None = None
    price: str | None = None
    brand: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")

    model_config = {"populate_by_name": True}


class ResolvedLink(BaseModel):
    url: str
    image_url: str | None = Field(default=None, alias="imageUrl")
    title: str | None = None
    price: str | None = None
    brand: str | None = None

    model_config = {"populate_by_name": True}


class ValidatedImage(BaseModel):
    image: str | None = None
    title: str | None = None
    price: str | None = None


class ExtractedImage(BaseModel):
    url: str
    width: int | None = None
    height: int | None = None
    size: int | None = None
    type: str | None = None
    name: str | None = None


class WardrobeItem(BaseModel):
    """A wardrobe row as stored by the app. Only link-relevant fields are kept."""

    link: str | None = None
    source_url: str | None = None
    brand: str | None = None
    name: str | None = None
    item_name: str | None = None
    sub_category: str | None = None
    color: str | None = None
    primary_color: str | None = None
