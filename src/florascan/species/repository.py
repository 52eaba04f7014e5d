"""Species and observation data access.

Implements the persistence boundary the identity resolver writes through,
plus the collection queries and admin edits the web layer exposes.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import func

from florascan.database.core import DatabaseService
from florascan.exceptions import PersistenceError, SpeciesNotFoundError
from florascan.identification.models import CapturedMetadata
from florascan.species.models import (
    Observation,
    ObservationBase,
    Species,
    SpeciesDetail,
    SpeciesSummary,
)
from florascan.tags.canonicalizer import TagCanonicalizer

logger = logging.getLogger(__name__)


class SpeciesRepository:
    """Reads and writes Species and Observation records.

    Every SQLAlchemy failure is rolled back, logged, and re-raised as
    PersistenceError. Nothing here retries or compensates.
    """

    def __init__(
        self,
        database_service: DatabaseService,
        canonicalizer: TagCanonicalizer | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            database_service: Provides async sessions
            canonicalizer: Applied to tags passed to update_species_tags
        """
        self.database_service = database_service
        self.canonicalizer = canonicalizer

    # ==================== Persistence boundary ====================

    async def find_species_by_scientific_name(self, scientific_name: str) -> Species | None:
        """Get a species by exact, case-sensitive scientific name."""
        async with self.database_service.get_async_db() as session:
            try:
                stmt = select(Species).where(Species.scientific_name == scientific_name)
                result = await session.execute(stmt)
                return result.scalar_one_or_none()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error retrieving species by scientific name")
                raise PersistenceError(f"Failed to look up species {scientific_name!r}") from e

    async def insert_species(
        self,
        scientific_name: str,
        common_names: Sequence[str] = (),
        tags: Iterable[str] = (),
        image_url: str | None = None,
        wiki_url: str | None = None,
    ) -> UUID:
        """Create a species record and return its id.

        Tags are stored sorted. A second insert for the same scientific name
        violates the unique constraint and raises PersistenceError.
        """
        async with self.database_service.get_async_db() as session:
            try:
                species = Species(
                    scientific_name=scientific_name,
                    common_names=list(common_names),
                    tags=sorted(set(tags)),
                    image_url=image_url,
                    wiki_url=wiki_url,
                )
                session.add(species)
                await session.commit()
                logger.info("Created species %s", scientific_name)
                return species.id
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error creating species")
                raise PersistenceError(f"Failed to create species {scientific_name!r}") from e

    async def insert_observation(
        self,
        species_id: UUID,
        metadata: CapturedMetadata | None = None,
        timestamp: datetime | None = None,
    ) -> UUID:
        """Create an observation for a species and return its id."""
        metadata = metadata or CapturedMetadata()
        async with self.database_service.get_async_db() as session:
            try:
                observation = Observation(
                    species_id=species_id,
                    timestamp=timestamp or datetime.now(UTC),
                    latitude=metadata.latitude,
                    longitude=metadata.longitude,
                    address=metadata.address,
                    photo_uri=metadata.photo_uri,
                )
                session.add(observation)
                await session.commit()
                return observation.id
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error creating observation")
                raise PersistenceError(f"Failed to record observation for {species_id}") from e

    # ==================== Collection queries ====================

    async def get_species(self, species_id: UUID) -> Species | None:
        """Get a species by id."""
        async with self.database_service.get_async_db() as session:
            try:
                return await session.get(Species, species_id)
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error retrieving species by ID")
                raise PersistenceError(f"Failed to load species {species_id}") from e

    async def list_species(self, limit: int | None = None) -> list[SpeciesSummary]:
        """List species newest first, each with sighting statistics."""
        sightings = (
            select(func.count(Observation.id))
            .where(Observation.species_id == Species.id)
            .scalar_subquery()
        )
        last_seen = (
            select(func.max(Observation.timestamp))
            .where(Observation.species_id == Species.id)
            .scalar_subquery()
        )
        latest_photo = (
            select(Observation.photo_uri)
            .where(Observation.species_id == Species.id)
            .order_by(desc(Observation.timestamp))
            .limit(1)
            .scalar_subquery()
        )

        async with self.database_service.get_async_db() as session:
            try:
                stmt = select(
                    Species,
                    sightings.label("sightings_count"),
                    last_seen.label("last_seen"),
                    latest_photo.label("latest_photo_uri"),
                ).order_by(desc(Species.created_at))
                if limit:
                    stmt = stmt.limit(limit)
                result = await session.execute(stmt)
                return [
                    SpeciesSummary(
                        **species.model_dump(),
                        sightings_count=count or 0,
                        last_seen=seen,
                        latest_photo_uri=photo,
                    )
                    for species, count, seen, photo in result.all()
                ]
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error listing species")
                raise PersistenceError("Failed to list species") from e

    async def get_recently_identified(self, limit: int = 5) -> list[SpeciesSummary]:
        """Get the most recently created species."""
        return await self.list_species(limit=limit)

    async def get_species_detail(self, scientific_name: str) -> SpeciesDetail | None:
        """Get a species with all its observations, newest first."""
        async with self.database_service.get_async_db() as session:
            try:
                result = await session.execute(
                    select(Species).where(Species.scientific_name == scientific_name)
                )
                species = result.scalar_one_or_none()
                if species is None:
                    return None

                result = await session.execute(
                    select(Observation)
                    .where(Observation.species_id == species.id)
                    .order_by(desc(Observation.timestamp))
                )
                observations = list(result.scalars())
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error retrieving species detail")
                raise PersistenceError(f"Failed to load species {scientific_name!r}") from e

        latest = observations[0] if observations else None
        return SpeciesDetail(
            **species.model_dump(),
            sightings_count=len(observations),
            last_seen=latest.timestamp if latest else None,
            latest_photo_uri=latest.photo_uri if latest else None,
            observations=[ObservationBase.model_validate(o.model_dump()) for o in observations],
        )

    # ==================== Admin edits ====================

    async def add_observation(self, species_id: UUID, metadata: CapturedMetadata) -> UUID:
        """Attach a new sighting to an existing species without re-identifying it."""
        if await self.get_species(species_id) is None:
            raise SpeciesNotFoundError(f"Species {species_id} not found")
        return await self.insert_observation(species_id, metadata)

    async def update_species_tags(self, species_id: UUID, tags: Iterable[str]) -> Species:
        """Replace a species' tags, canonicalizing them first when a canonicalizer is set."""
        tag_set = self.canonicalizer.canonicalize(tags) if self.canonicalizer else set(tags)

        async with self.database_service.get_async_db() as session:
            try:
                species = await session.get(Species, species_id)
                if species is None:
                    raise SpeciesNotFoundError(f"Species {species_id} not found")
                species.tags = sorted(tag_set)
                await session.commit()
                await session.refresh(species)
                logger.info("Updated tags for %s: %s", species.scientific_name, species.tags)
                return species
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error updating species tags")
                raise PersistenceError(f"Failed to update tags for {species_id}") from e

    async def delete_species(self, species_id: UUID) -> int:
        """Delete a species and all its observations.

        Returns:
            Number of observations removed along with the species
        """
        async with self.database_service.get_async_db() as session:
            try:
                species = await session.get(Species, species_id)
                if species is None:
                    raise SpeciesNotFoundError(f"Species {species_id} not found")

                # Observations reference the species, so they go first
                result = await session.execute(
                    delete(Observation).where(Observation.species_id == species_id)  # type: ignore[arg-type]
                )
                await session.delete(species)
                await session.commit()
                removed = result.rowcount or 0
                logger.info(
                    "Deleted species %s with %d observations", species.scientific_name, removed
                )
                return removed
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error deleting species")
                raise PersistenceError(f"Failed to delete species {species_id}") from e

    async def delete_observation(self, observation_id: UUID) -> None:
        """Delete a single observation."""
        async with self.database_service.get_async_db() as session:
            try:
                observation = await session.get(Observation, observation_id)
                if observation is None:
                    raise SpeciesNotFoundError(f"Observation {observation_id} not found")
                await session.delete(observation)
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Error deleting observation")
                raise PersistenceError(f"Failed to delete observation {observation_id}") from e
