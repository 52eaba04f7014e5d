"""Identification provider results and capture metadata."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class IdentificationCandidate(BaseModel):
    """One ranked species suggestion from the identification provider."""

    scientific_name: str
    common_names: list[str] = Field(default_factory=list)
    description: str | None = None
    citation: str | None = None  # Source URL of the description
    similar_images: list[str] = Field(default_factory=list)
    probability: float | None = None

    @property
    def image_url(self) -> str | None:
        """First similar image the provider supplied, if any."""
        return self.similar_images[0] if self.similar_images else None

    @classmethod
    def from_plant_id(cls, suggestion: dict[str, Any]) -> "IdentificationCandidate":
        """Parse one entry of a Plant.id ``suggestions`` array."""
        details = suggestion.get("plant_details") or {}
        wiki = details.get("wiki_description") or {}
        return cls(
            scientific_name=suggestion["plant_name"],
            common_names=details.get("common_names") or [],
            description=wiki.get("value"),
            citation=wiki.get("citation"),
            similar_images=[
                image["url"] for image in suggestion.get("similar_images") or [] if image.get("url")
            ],
            probability=suggestion.get("probability"),
        )


class IdentificationResult(BaseModel):
    """Ranked candidates for one identification request, best first."""

    candidates: list[IdentificationCandidate] = Field(default_factory=list)

    @property
    def best(self) -> IdentificationCandidate | None:
        """Top-ranked candidate, or None when nothing matched."""
        return self.candidates[0] if self.candidates else None

    @classmethod
    def from_plant_id(cls, payload: dict[str, Any]) -> "IdentificationResult":
        """Parse a Plant.id v2 identify response body."""
        suggestions = payload.get("suggestions") or []
        return cls(
            candidates=[
                IdentificationCandidate.from_plant_id(suggestion)
                for suggestion in suggestions
                if suggestion.get("plant_name")
            ]
        )


class CapturedMetadata(BaseModel):
    """What the capture subsystem knows about a photo besides its pixels."""

    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    photo_uri: str | None = None


class ResolvedIdentity(BaseModel):
    """Summary returned to the caller after a successful resolution."""

    species_id: UUID
    observation_id: UUID
    scientific_name: str
    common_names: list[str]
    tags: list[str]
    image_url: str | None = None
    created: bool = False  # True when this call created the species record
