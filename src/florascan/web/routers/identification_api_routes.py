"""Plant identification endpoint."""

import logging
from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from florascan.identification.client import PlantIdClient
from florascan.species.resolver import SpeciesIdentityResolver
from florascan.web.core.container import Container
from florascan.web.models.species import IdentifyRequest, IdentifyResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/identify", status_code=status.HTTP_201_CREATED, response_model=IdentifyResponse)
@inject
async def identify_plant(
    plantid_client: Annotated[PlantIdClient, Depends(Provide[Container.plantid_client])],
    species_resolver: Annotated[
        SpeciesIdentityResolver, Depends(Provide[Container.species_resolver])
    ],
    request: IdentifyRequest,
) -> IdentifyResponse:
    """Identify a plant from photos and record the sighting.

    All photos go to the identification provider in one request. The first
    one is kept as the observation photo.
    """
    logger.info("Identifying plant from %d photo(s)", len(request.photos))

    result = await plantid_client.identify(request.encoded_photos())
    identity = await species_resolver.resolve(result, request.to_metadata())

    best = result.best
    return IdentifyResponse(
        **identity.model_dump(),
        description=best.description if best else None,
        probability=best.probability if best else None,
    )
