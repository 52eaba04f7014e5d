"""Plant.id identification API client."""

import logging

import httpx

from florascan.config.models import IdentificationConfig
from florascan.exceptions import IdentificationError
from florascan.identification.models import IdentificationResult

logger = logging.getLogger(__name__)


class PlantIdClient:
    """Sends photos to Plant.id and parses the ranked suggestions."""

    def __init__(
        self, config: IdentificationConfig | None = None, client: httpx.AsyncClient | None = None
    ):
        self.config = config or IdentificationConfig()
        self.client = client

    async def identify(self, images: list[str]) -> IdentificationResult:
        """Identify the plant shown in one or more base64-encoded photos.

        Several photos of the same plant go out in a single request, which
        gives the provider more to work with.

        Returns:
            Ranked candidates. Empty when the provider answers with a
            non-success status or suggests nothing.

        Raises:
            ValueError: If no images are given
            IdentificationError: If the provider cannot be reached or the body is not JSON
        """
        if not images:
            raise ValueError("At least one photo is required")

        payload = {
            "images": images,
            "modifiers": ["crops_simple"],
            "plant_details": ["common_names", "wiki_description"],
        }
        headers = {"Api-Key": self.config.api_key}

        try:
            if self.client is not None:
                response = await self.client.post(
                    self.config.api_url, json=payload, headers=headers, timeout=self.config.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await client.post(self.config.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Plant.id request failed: %s", e)
            raise IdentificationError(f"Identification request failed: {e}") from e

        logger.info("Plant.id responded with status %d", response.status_code)
        if not response.is_success:
            logger.warning(
                "Plant.id returned %d, treating as no match: %s",
                response.status_code,
                response.text[:200],
            )
            return IdentificationResult()

        try:
            data = response.json()
        except ValueError as e:
            raise IdentificationError("Invalid JSON response from Plant.id") from e

        if not isinstance(data, dict):
            raise IdentificationError("Unexpected Plant.id response shape")

        try:
            result = IdentificationResult.from_plant_id(data)
        except (ValueError, TypeError, AttributeError, KeyError) as e:
            raise IdentificationError(f"Malformed Plant.id suggestions: {e}") from e

        logger.info(
            "Plant.id suggested %d candidates for %d photo(s)", len(result.candidates), len(images)
        )
        return result
