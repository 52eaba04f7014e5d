"""Turn an identification result into a stored species identity and sighting."""

import logging
from datetime import UTC, datetime

from florascan.enrichment.resolver import ImageEnrichmentResolver
from florascan.exceptions import NoMatchError
from florascan.identification.models import (
    CapturedMetadata,
    IdentificationResult,
    ResolvedIdentity,
)
from florascan.species.repository import SpeciesRepository
from florascan.tags.canonicalizer import TagCanonicalizer, extract_property_mentions

logger = logging.getLogger(__name__)


class SpeciesIdentityResolver:
    """Resolves identification results to deduplicated species records.

    A species is keyed by its exact scientific name. The first sighting
    creates the record with canonical tags and an image; later sightings
    reuse it unchanged and only add an observation.

    Species creation and observation insertion are two separate writes. If
    the second fails the species stays without an observation.
    """

    def __init__(
        self,
        repository: SpeciesRepository,
        canonicalizer: TagCanonicalizer,
        image_resolver: ImageEnrichmentResolver,
    ):
        self.repository = repository
        self.canonicalizer = canonicalizer
        self.image_resolver = image_resolver

    async def resolve(
        self,
        identification: IdentificationResult,
        metadata: CapturedMetadata | None = None,
    ) -> ResolvedIdentity:
        """Store the top candidate as a species (if new) and record a sighting.

        Raises:
            NoMatchError: If there is no usable candidate; nothing is written
            PersistenceError: If a read or write fails
        """
        candidate = identification.best
        if candidate is None or not candidate.scientific_name.strip():
            raise NoMatchError()

        scientific_name = candidate.scientific_name
        raw_tags = extract_property_mentions(candidate.description)
        tags = sorted(self.canonicalizer.canonicalize(raw_tags))

        species = await self.repository.find_species_by_scientific_name(scientific_name)
        if species is None:
            image_url = candidate.image_url
            if not image_url:
                image_url = await self.image_resolver.resolve_representative_image(
                    scientific_name
                )
            species_id = await self.repository.insert_species(
                scientific_name=scientific_name,
                common_names=candidate.common_names,
                tags=tags,
                image_url=image_url,
                wiki_url=candidate.citation,
            )
            common_names = list(candidate.common_names)
            created = True
        else:
            species_id = species.id
            common_names = list(species.common_names)
            tags = list(species.tags)
            image_url = species.image_url
            created = False

        observation_id = await self.repository.insert_observation(
            species_id, metadata, timestamp=datetime.now(UTC)
        )

        logger.info(
            "Resolved %s (%s species, %d tags)",
            scientific_name,
            "new" if created else "existing",
            len(tags),
        )
        return ResolvedIdentity(
            species_id=species_id,
            observation_id=observation_id,
            scientific_name=scientific_name,
            common_names=common_names,
            tags=tags,
            image_url=image_url,
            created=created,
        )
