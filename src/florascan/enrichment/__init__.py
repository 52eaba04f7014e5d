"""Image enrichment from external species catalogs."""

from florascan.enrichment.resolver import ImageEnrichmentResolver, first_available
from florascan.enrichment.sources import (
    INaturalistImageSource,
    PhotoSearchImageSource,
    WikipediaImageSource,
)

__all__ = [
    "INaturalistImageSource",
    "ImageEnrichmentResolver",
    "PhotoSearchImageSource",
    "WikipediaImageSource",
    "first_available",
]
