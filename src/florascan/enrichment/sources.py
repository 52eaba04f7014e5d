"""External image catalogs queried for species imagery.

Every source exposes ``fetch(client, scientific_name)`` which returns an image
URL or None. Network errors, non-success responses and malformed payloads are
contained inside the source and logged; they never reach the caller.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Protocol
from urllib.parse import quote, quote_plus

import httpx

from florascan.config.models import EnrichmentConfig
from florascan.exceptions import EnrichmentSourceError

logger = logging.getLogger(__name__)

WIKIPEDIA_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/{title}"
WIKIMEDIA_COMMONS_API_URL = "https://commons.wikimedia.org/w/api.php"
INATURALIST_TAXA_URL = "https://api.inaturalist.org/v1/taxa"
UNSPLASH_SOURCE_URL = "https://source.unsplash.com/400x300/?{terms}"

_THUMBNAIL_WIDTH = re.compile(r"/\d+px-")

# Priority order for the representative photo search
PRIMARY_QUERY_TEMPLATES = (
    "{name} plant botanical",
    "{genus} {epithet} flower",
    "{genus} plant species",
    "{genus} botanical illustration",
)

# Leaf, habitat and field-guide framing for visual variety
DIVERSE_QUERY_TEMPLATES = (
    "{genus} {epithet} leaf closeup",
    "{genus} {epithet} habitat natural",
    "{name} botanical garden",
    "{genus} plant identification guide",
    "{epithet} {genus} wild native",
)


class ImageSource(Protocol):
    """Capability shared by everything the enrichment resolver can query."""

    name: str

    async def fetch(self, client: httpx.AsyncClient, scientific_name: str) -> str | None:
        """Return an image URL for the species, or None."""
        ...


class CatalogImageSource(ABC):
    """Base class that turns any failure inside a catalog lookup into None."""

    name = "catalog"

    def __init__(self, config: EnrichmentConfig | None = None):
        self.config = config or EnrichmentConfig()

    async def fetch(self, client: httpx.AsyncClient, scientific_name: str) -> str | None:
        """Look up an image URL, containing every failure at this boundary."""
        try:
            url = await self._fetch(client, scientific_name)
        except EnrichmentSourceError as e:
            logger.info("Image source %s gave nothing for %s: %s", self.name, scientific_name, e)
            return None
        except httpx.HTTPError as e:
            logger.warning(
                "Image source %s request failed for %s: %s", self.name, scientific_name, e
            )
            return None
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            logger.warning(
                "Image source %s returned a malformed payload for %s: %r",
                self.name,
                scientific_name,
                e,
            )
            return None

        if url:
            logger.debug("Image source %s found %s for %s", self.name, url, scientific_name)
            return url
        return None

    @abstractmethod
    async def _fetch(self, client: httpx.AsyncClient, scientific_name: str) -> str | None:
        """Catalog-specific lookup; may raise freely."""

    async def _get_json(
        self, client: httpx.AsyncClient, url: str, params: dict[str, Any] | None = None
    ) -> Any:  # noqa: ANN401
        response = await client.get(url, params=params, timeout=self.config.timeout)
        if not response.is_success:
            raise EnrichmentSourceError(self.name, f"HTTP {response.status_code} from {url}")
        try:
            return response.json()
        except ValueError as e:
            raise EnrichmentSourceError(self.name, f"invalid JSON from {url}") from e


class WikipediaImageSource(CatalogImageSource):
    """Wikipedia page summary thumbnail, falling back to Wikimedia Commons page images."""

    name = "wikipedia"

    async def _fetch(self, client: httpx.AsyncClient, scientific_name: str) -> str | None:
        try:
            thumbnail = await self._summary_thumbnail(client, scientific_name)
        except EnrichmentSourceError as e:
            logger.debug("Wikipedia summary unavailable for %s: %s", scientific_name, e)
            thumbnail = None
        if thumbnail:
            return self.upgrade_thumbnail(thumbnail)

        return await self._commons_thumbnail(client, scientific_name)

    def upgrade_thumbnail(self, url: str) -> str:
        """Swap the width segment of a Wikimedia thumbnail URL for the configured size."""
        return _THUMBNAIL_WIDTH.sub(f"/{self.config.thumbnail_size}px-", url, count=1)

    async def _summary_thumbnail(
        self, client: httpx.AsyncClient, scientific_name: str
    ) -> str | None:
        url = WIKIPEDIA_SUMMARY_URL.format(title=quote(scientific_name, safe=""))
        data = await self._get_json(client, url)
        return (data.get("thumbnail") or {}).get("source")

    async def _commons_thumbnail(
        self, client: httpx.AsyncClient, scientific_name: str
    ) -> str | None:
        data = await self._get_json(
            client,
            WIKIMEDIA_COMMONS_API_URL,
            params={
                "action": "query",
                "format": "json",
                "prop": "pageimages",
                "titles": scientific_name,
                "pithumbsize": self.config.thumbnail_size,
                "origin": "*",
            },
        )
        pages = (data.get("query") or {}).get("pages")
        if not pages:
            return None
        first_page = next(iter(pages.values()))
        return (first_page.get("thumbnail") or {}).get("source")


class INaturalistImageSource(CatalogImageSource):
    """Default photo of the best matching active species-rank iNaturalist taxon."""

    name = "inaturalist"

    async def _fetch(self, client: httpx.AsyncClient, scientific_name: str) -> str | None:
        data = await self._get_json(
            client,
            INATURALIST_TAXA_URL,
            params={
                "q": scientific_name,
                "is_active": "true",
                "rank": "species",
                "per_page": 1,
            },
        )
        results = data.get("results") or []
        if not results:
            return None
        photo = results[0].get("default_photo") or {}
        return photo.get("medium_url") or photo.get("square_url")


class PhotoSearchImageSource(CatalogImageSource):
    """Keyword photo search; each candidate URL must pass a HEAD probe."""

    name = "unsplash"

    def __init__(
        self,
        config: EnrichmentConfig | None = None,
        query_templates: tuple[str, ...] = PRIMARY_QUERY_TEMPLATES,
        name: str | None = None,
    ):
        super().__init__(config)
        self.query_templates = query_templates
        if name:
            self.name = name

    def build_queries(self, scientific_name: str) -> list[str]:
        """Expand the query templates for a name, dropping blanks and repeats."""
        parts = scientific_name.split()
        fields = {
            "name": " ".join(parts),
            "genus": parts[0] if parts else "",
            "epithet": parts[1] if len(parts) > 1 else "",
        }
        queries = []
        for template in self.query_templates:
            query = " ".join(template.format(**fields).split())
            if query and query not in queries:
                queries.append(query)
        return queries

    def build_url(self, query: str) -> str:
        """Build the photo search URL for one keyword query."""
        return UNSPLASH_SOURCE_URL.format(terms=quote_plus(query))

    async def _fetch(self, client: httpx.AsyncClient, scientific_name: str) -> str | None:
        if not scientific_name.strip():
            return None
        for query in self.build_queries(scientific_name):
            url = self.build_url(query)
            try:
                response = await client.head(
                    url, follow_redirects=True, timeout=self.config.timeout
                )
            except httpx.HTTPError as e:
                logger.debug("Photo search probe failed for %r: %s", query, e)
                continue
            if response.is_success:
                return url
        return None


def default_sources(config: EnrichmentConfig | None = None) -> list[ImageSource]:
    """Sources for the representative image, in fallback order."""
    return [
        WikipediaImageSource(config),
        INaturalistImageSource(config),
        PhotoSearchImageSource(config),
    ]


def default_diverse_sources(config: EnrichmentConfig | None = None) -> list[ImageSource]:
    """Extra fetchers that only take part in the diverse image fan-out."""
    return [
        PhotoSearchImageSource(
            config, query_templates=DIVERSE_QUERY_TEMPLATES, name="unsplash-diverse"
        ),
    ]
