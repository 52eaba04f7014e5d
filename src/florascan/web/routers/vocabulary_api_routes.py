"""Tag vocabulary endpoint."""

from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from florascan.tags.vocabulary import TagVocabulary
from florascan.web.core.container import Container
from florascan.web.models.vocabulary import VocabularyResponse

router = APIRouter()


@router.get("/vocabulary", response_model=VocabularyResponse)
@inject
async def get_vocabulary(
    vocabulary: Annotated[TagVocabulary, Depends(Provide[Container.vocabulary])],
) -> VocabularyResponse:
    """Canonical tags by category plus the preparation method and plant part lists."""
    return VocabularyResponse(
        version=vocabulary.version,
        tag_count=len(vocabulary),
        categories={name: list(tags) for name, tags in vocabulary.categories.items()},
        preparation_methods=sorted(vocabulary.preparation_methods),
        plant_parts=sorted(vocabulary.plant_parts),
    )
