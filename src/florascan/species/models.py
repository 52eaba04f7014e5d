"""Database models for species records and their observations."""

import uuid
from datetime import UTC, datetime

from pydantic import field_serializer
from sqlalchemy import JSON, Column, Index, String, Text
from sqlmodel import Field, SQLModel


class SpeciesBase(SQLModel):
    """Species fields shared by the table model and read models."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True)

    # Case-sensitive identity key; one row per taxon
    scientific_name: str = Field(
        sa_column=Column(String(200), unique=True, index=True, nullable=False)
    )
    common_names: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    image_url: str | None = Field(default=None, sa_column=Column(Text))
    wiki_url: str | None = Field(default=None, sa_column=Column(Text))
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)


class Species(SpeciesBase, table=True):
    """One scientific taxon, created on its first successful identification."""

    __tablename__: str = "species"  # type: ignore[assignment]


class ObservationBase(SQLModel):
    """Observation fields shared by the table model and read models."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True)
    species_id: uuid.UUID = Field(foreign_key="species.id", index=True)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)

    # Location metadata is stored exactly as captured
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = Field(default=None, sa_column=Column(Text))

    # Photo reference, typically a data: URI of the compressed capture
    photo_uri: str | None = Field(default=None, sa_column=Column(Text))


class Observation(ObservationBase, table=True):
    """One capture event linked to a species."""

    __tablename__: str = "observations"  # type: ignore[assignment]

    __table_args__ = (Index("idx_observations_species_timestamp", "species_id", "timestamp"),)


class SpeciesSummary(SpeciesBase):
    """Species with sighting statistics, for collection listings.

    Non-table model used to return query results without persisting anything.
    """

    sightings_count: int = 0
    latest_photo_uri: str | None = None
    last_seen: datetime | None = None

    @field_serializer("id")
    def serialize_id(self, value: uuid.UUID) -> str:
        """Serialize UUID to string."""
        return str(value)


class SpeciesDetail(SpeciesSummary):
    """Species with every observation, newest first."""

    observations: list[ObservationBase] = []
