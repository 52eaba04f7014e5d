"""Representative and diverse species imagery from external catalogs."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncGenerator, Sequence

import httpx

from florascan.config.models import EnrichmentConfig
from florascan.enrichment.sources import ImageSource, default_diverse_sources, default_sources

logger = logging.getLogger(__name__)


async def first_available(
    sources: Sequence[ImageSource], client: httpx.AsyncClient, scientific_name: str
) -> tuple[str, str] | None:
    """Query sources one at a time and stop at the first image found.

    Returns:
        (source name, image URL), or None when every source comes back empty
    """
    for source in sources:
        url = await source.fetch(client, scientific_name)
        if url:
            return source.name, url
    return None


class ImageEnrichmentResolver:
    """Finds imagery for a species across ordered external catalogs.

    The resolver owns an httpx client between ``start()`` and ``stop()``.
    Calls made outside that window use a short-lived client of their own.
    """

    def __init__(
        self,
        config: EnrichmentConfig | None = None,
        sources: Sequence[ImageSource] | None = None,
        diverse_sources: Sequence[ImageSource] | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.config = config or EnrichmentConfig()
        self.sources = list(sources) if sources is not None else default_sources(self.config)
        self.diverse_sources = (
            list(diverse_sources)
            if diverse_sources is not None
            else default_diverse_sources(self.config)
        )
        self.client = client
        self._owns_client = False

    async def start(self) -> None:
        """Open a shared HTTP client for subsequent lookups."""
        if self.client is None:
            self.client = self._create_client()
            self._owns_client = True
            logger.info("Image enrichment client started with %d sources", len(self.sources))

    async def stop(self) -> None:
        """Close the shared HTTP client if this resolver opened it."""
        if self.client is not None and self._owns_client:
            await self.client.aclose()
            self.client = None
            self._owns_client = False
            logger.info("Image enrichment client stopped")

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
        )

    @contextlib.asynccontextmanager
    async def _client_session(self) -> AsyncGenerator[httpx.AsyncClient, None]:
        if self.client is not None:
            yield self.client
            return
        async with self._create_client() as client:
            yield client

    async def resolve_representative_image(self, scientific_name: str) -> str:
        """Return one displayable image for the species.

        Sources are tried in order and the first hit wins. When every source
        comes back empty the configured placeholder is returned instead.
        """
        async with self._client_session() as client:
            found = await first_available(self.sources, client, scientific_name)

        if found is None:
            logger.info("No catalog image for %s, using placeholder", scientific_name)
            return self.config.placeholder_image_url

        source_name, url = found
        logger.info("Representative image for %s from %s", scientific_name, source_name)
        return url

    async def resolve_diverse_images(self, scientific_name: str) -> list[str]:
        """Gather up to ``max_diverse_images`` distinct images from all sources at once.

        Every fetch runs concurrently and all of them are awaited, so a slow
        source delays the result but a failing one only shrinks it. Results
        keep the order the fetches were issued in, not completion order.
        """
        fetchers = [*self.sources, *self.diverse_sources]

        async with self._client_session() as client:
            results = await asyncio.gather(
                *(source.fetch(client, scientific_name) for source in fetchers),
                return_exceptions=True,
            )

        images: list[str] = []
        for source, result in zip(fetchers, results, strict=True):
            if isinstance(result, BaseException):
                logger.warning(
                    "Image source %s raised for %s: %r", source.name, scientific_name, result
                )
                continue
            if result and result not in images:
                images.append(result)

        images = images[: self.config.max_diverse_images]
        logger.info("Collected %d diverse images for %s", len(images), scientific_name)
        return images
