"""Species and identification API contract models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from florascan.identification.models import CapturedMetadata

PHOTO_URI_PREFIX = "data:image/jpeg;base64,"


def split_data_uri(photo: str) -> tuple[str, str]:
    """Split a photo into its data URI prefix and base64 body.

    Bare base64 input has an empty prefix. Raises ValueError for a data URI
    without a comma.
    """
    if not photo.startswith("data:"):
        return "", photo
    prefix, sep, body = photo.partition(",")
    if not sep:
        raise ValueError("Malformed data URI")
    return prefix + sep, body


def photo_uri(photo: str) -> str:
    """Photo as a data URI, keeping a supplied media type and defaulting to JPEG."""
    prefix, body = split_data_uri(photo)
    return (prefix or PHOTO_URI_PREFIX) + body


def _check_photo(photo: str) -> str:
    _, body = split_data_uri(photo)
    if not body.strip():
        raise ValueError("Photos must not be empty")
    return photo


# ==================== Request Models ====================


class IdentifyRequest(BaseModel):
    """Photos of one plant plus where they were taken."""

    photos: list[str] = Field(
        ..., min_length=1, description="Base64-encoded photos, bare or as data URIs"
    )
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    address: str | None = None

    @field_validator("photos")
    @classmethod
    def validate_photos(cls, photos: list[str]) -> list[str]:
        """Reject empty photos and data URIs without a body."""
        return [_check_photo(photo) for photo in photos]

    def encoded_photos(self) -> list[str]:
        """Bare base64 bodies as the identification provider expects them."""
        return [split_data_uri(photo)[1] for photo in self.photos]

    def to_metadata(self) -> CapturedMetadata:
        """Capture metadata for the observation, keeping the first photo."""
        return CapturedMetadata(
            latitude=self.latitude,
            longitude=self.longitude,
            address=self.address,
            photo_uri=photo_uri(self.photos[0]),
        )


class AddObservationRequest(BaseModel):
    """A new photo for a species already in the collection."""

    photo: str = Field(..., min_length=1, description="Base64-encoded photo or data URI")
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    address: str | None = None

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, photo: str) -> str:
        """Reject an empty photo or a data URI without a body."""
        return _check_photo(photo)

    def to_metadata(self) -> CapturedMetadata:
        """Capture metadata with the photo as a data URI."""
        return CapturedMetadata(
            latitude=self.latitude,
            longitude=self.longitude,
            address=self.address,
            photo_uri=photo_uri(self.photo),
        )


class UpdateTagsRequest(BaseModel):
    """Replacement tag list; tags are canonicalized before storage."""

    tags: list[str]


# ==================== Response Models ====================


class IdentifyResponse(BaseModel):
    """Result of identifying and recording a plant."""

    species_id: UUID
    observation_id: UUID
    scientific_name: str
    common_names: list[str]
    tags: list[str]
    image_url: str | None = None
    created: bool = Field(..., description="True when this was the first sighting")
    description: str | None = None
    probability: float | None = None


class ObservationResponse(BaseModel):
    """One sighting of a species."""

    id: UUID
    species_id: UUID
    timestamp: datetime
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    photo_uri: str | None = None


class SpeciesResponse(BaseModel):
    """A species in the collection with sighting statistics."""

    id: UUID
    scientific_name: str
    common_names: list[str]
    tags: list[str]
    image_url: str | None = None
    wiki_url: str | None = None
    created_at: datetime
    sightings_count: int = 0
    latest_photo_uri: str | None = None
    last_seen: datetime | None = None


class SpeciesListResponse(BaseModel):
    """Collection listing, newest species first."""

    species: list[SpeciesResponse]
    count: int


class SpeciesDetailResponse(SpeciesResponse):
    """A species with every observation, newest first."""

    observations: list[ObservationResponse]


class SpeciesImagesResponse(BaseModel):
    """Diverse images gathered for a species."""

    scientific_name: str
    images: list[str]


class ObservationCreatedResponse(BaseModel):
    """Response after attaching a photo to a species."""

    observation_id: UUID
    species_id: UUID


class SpeciesTagsResponse(BaseModel):
    """Tags stored for a species after an edit."""

    species_id: UUID
    tags: list[str]


class SpeciesDeletedResponse(BaseModel):
    """Response after deleting a species."""

    species_id: UUID
    observations_deleted: int
