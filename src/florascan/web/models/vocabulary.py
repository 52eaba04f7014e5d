"""Tag vocabulary API contract models."""

from pydantic import BaseModel, Field


class VocabularyResponse(BaseModel):
    """The loaded controlled vocabulary."""

    version: str
    tag_count: int
    categories: dict[str, list[str]]
    preparation_methods: list[str] = Field(default_factory=list)
    plant_parts: list[str] = Field(default_factory=list)
