"""Species collection, imagery and admin endpoints."""

import logging
from typing import Annotated
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from florascan.enrichment.resolver import ImageEnrichmentResolver
from florascan.species.repository import SpeciesRepository
from florascan.web.core.container import Container
from florascan.web.models.species import (
    AddObservationRequest,
    ObservationCreatedResponse,
    SpeciesDeletedResponse,
    SpeciesDetailResponse,
    SpeciesImagesResponse,
    SpeciesListResponse,
    SpeciesResponse,
    SpeciesTagsResponse,
    UpdateTagsRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/species", response_model=SpeciesListResponse)
@inject
async def list_species(
    repository: Annotated[SpeciesRepository, Depends(Provide[Container.species_repository])],
    limit: int | None = Query(None, ge=1, le=1000, description="Maximum species to return"),
) -> SpeciesListResponse:
    """List the collection, newest species first."""
    summaries = await repository.list_species(limit=limit)
    species = [SpeciesResponse.model_validate(s, from_attributes=True) for s in summaries]
    return SpeciesListResponse(species=species, count=len(species))


@router.get("/species/recent", response_model=SpeciesListResponse)
@inject
async def recently_identified(
    repository: Annotated[SpeciesRepository, Depends(Provide[Container.species_repository])],
    limit: int = Query(5, ge=1, le=50),
) -> SpeciesListResponse:
    """Most recently added species."""
    summaries = await repository.get_recently_identified(limit=limit)
    species = [SpeciesResponse.model_validate(s, from_attributes=True) for s in summaries]
    return SpeciesListResponse(species=species, count=len(species))


@router.get("/species/{scientific_name}", response_model=SpeciesDetailResponse)
@inject
async def get_species(
    repository: Annotated[SpeciesRepository, Depends(Provide[Container.species_repository])],
    scientific_name: str,
) -> SpeciesDetailResponse:
    """Get a species and all its observations by scientific name."""
    detail = await repository.get_species_detail(scientific_name)
    if detail is None:
        raise HTTPException(status_code=404, detail="Species not found")
    return SpeciesDetailResponse.model_validate(detail, from_attributes=True)


@router.get("/species/{scientific_name}/images", response_model=SpeciesImagesResponse)
@inject
async def get_species_images(
    image_resolver: Annotated[
        ImageEnrichmentResolver, Depends(Provide[Container.image_resolver])
    ],
    scientific_name: str,
) -> SpeciesImagesResponse:
    """Gather a diverse set of images for a species.

    The species does not need to be in the collection.
    """
    images = await image_resolver.resolve_diverse_images(scientific_name)
    return SpeciesImagesResponse(scientific_name=scientific_name, images=images)


@router.post(
    "/species/{species_id}/observations",
    status_code=status.HTTP_201_CREATED,
    response_model=ObservationCreatedResponse,
)
@inject
async def add_observation(
    repository: Annotated[SpeciesRepository, Depends(Provide[Container.species_repository])],
    species_id: UUID,
    request: AddObservationRequest,
) -> ObservationCreatedResponse:
    """Attach a new photo to an existing species without re-identifying it."""
    observation_id = await repository.add_observation(species_id, request.to_metadata())
    return ObservationCreatedResponse(observation_id=observation_id, species_id=species_id)


@router.put("/species/{species_id}/tags", response_model=SpeciesTagsResponse)
@inject
async def update_species_tags(
    repository: Annotated[SpeciesRepository, Depends(Provide[Container.species_repository])],
    species_id: UUID,
    request: UpdateTagsRequest,
) -> SpeciesTagsResponse:
    """Replace a species' tags with the canonical forms of the given ones."""
    species = await repository.update_species_tags(species_id, request.tags)
    return SpeciesTagsResponse(species_id=species.id, tags=species.tags)


@router.delete("/species/{species_id}", response_model=SpeciesDeletedResponse)
@inject
async def delete_species(
    repository: Annotated[SpeciesRepository, Depends(Provide[Container.species_repository])],
    species_id: UUID,
) -> SpeciesDeletedResponse:
    """Delete a species together with all its observations."""
    removed = await repository.delete_species(species_id)
    logger.info("Species %s deleted via API", species_id)
    return SpeciesDeletedResponse(species_id=species_id, observations_deleted=removed)


@router.delete("/observations/{observation_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_observation(
    repository: Annotated[SpeciesRepository, Depends(Provide[Container.species_repository])],
    observation_id: UUID,
) -> None:
    """Delete a single observation."""
    await repository.delete_observation(observation_id)
