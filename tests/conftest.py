from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, create_autospec, patch

import pytest
from dependency_injector import providers

from florascan.config import ConfigManager, FloraScanConfig
from florascan.database.core import DatabaseService
from florascan.enrichment.resolver import ImageEnrichmentResolver
from florascan.identification.client import PlantIdClient
from florascan.species.repository import SpeciesRepository
from florascan.system.path_resolver import PathResolver
from florascan.tags.canonicalizer import TagCanonicalizer
from florascan.tags.vocabulary import TagVocabulary
from florascan.web.core.factory import create_app


@pytest.fixture
def path_resolver(tmp_path: Path) -> PathResolver:
    """Provide a PathResolver whose writable paths all live under tmp_path.

    Tests must never write to /var/lib/florascan, so the config and database
    locations are overridden on the instance rather than through environment
    variables.
    """
    resolver = PathResolver()

    temp_data_dir = tmp_path / "data"
    temp_config_dir = tmp_path / "config"
    temp_database_dir = tmp_path / "database"
    for directory in (temp_data_dir, temp_config_dir, temp_database_dir):
        directory.mkdir(parents=True)

    resolver.data_dir = temp_data_dir
    resolver.get_data_dir = lambda: temp_data_dir
    resolver.get_database_dir = lambda: temp_database_dir
    resolver.get_database_path = lambda: temp_database_dir / "florascan.db"
    resolver.get_florascan_config_path = lambda: temp_config_dir / "florascan.yaml"

    return resolver


@pytest.fixture
def test_config(path_resolver: PathResolver) -> FloraScanConfig:
    """Should load test configuration from the test config file."""
    manager = ConfigManager(path_resolver)
    return manager.load()


@pytest.fixture
def minimal_vocabulary() -> TagVocabulary:
    """A tiny vocabulary so canonicalizer tests do not depend on the built-in lists."""
    return TagVocabulary.from_mapping(
        {
            "version": "test",
            "categories": {
                "therapeutic": ["anti-inflammatory", "antiviral", "calming"],
                "systems": ["digestive", "immune-support"],
            },
            "normalization_rules": {
                "anti inflammatory": "anti-inflammatory",
                "relaxing": "calming",
                "stomach soother": "digestive",
            },
            "keyword_heuristics": [
                ("immune", "immune-support"),
                ("stomach", "immune-support"),
                ("digest", "digestive"),
            ],
        }
    )


@pytest.fixture
def canonicalizer() -> TagCanonicalizer:
    """Canonicalizer over the built-in vocabulary."""
    return TagCanonicalizer()


@pytest.fixture
async def database_service(tmp_path: Path):
    """Create an initialized file-backed SQLite database in tmp_path."""
    service = DatabaseService(tmp_path / "database" / "florascan.db")
    await service.initialize()
    yield service
    await service.dispose()


@pytest.fixture
def species_repository(
    database_service: DatabaseService, canonicalizer: TagCanonicalizer
) -> SpeciesRepository:
    """Repository bound to the temporary database."""
    return SpeciesRepository(database_service, canonicalizer=canonicalizer)


@pytest.fixture
def plant_id_payload() -> Callable[..., dict[str, Any]]:
    """Build Plant.id v2 response bodies.

    Example usage:
        payload = plant_id_payload("Mentha piperita", common_names=["Peppermint"])
        payload = plant_id_payload()  # no suggestions
    """

    def _payload(
        scientific_name: str | None = None,
        common_names: list[str] | None = None,
        description: str | None = None,
        citation: str | None = None,
        similar_images: list[str] | None = None,
        probability: float = 0.93,
    ) -> dict[str, Any]:
        if scientific_name is None:
            return {"id": 1, "suggestions": []}
        return {
            "id": 1,
            "suggestions": [
                {
                    "id": 11,
                    "plant_name": scientific_name,
                    "probability": probability,
                    "plant_details": {
                        "common_names": common_names,
                        "wiki_description": {"value": description, "citation": citation}
                        if description is not None
                        else None,
                    },
                    "similar_images": [{"url": url} for url in similar_images or []],
                }
            ],
        }

    return _payload


@pytest.fixture
def mock_image_resolver() -> MagicMock:
    """Image resolver that never touches the network."""
    resolver = create_autospec(ImageEnrichmentResolver, instance=True)
    resolver.resolve_representative_image.return_value = (
        "https://upload.wikimedia.org/thumb/400px-Mentha.jpg"
    )
    resolver.resolve_diverse_images.return_value = []
    return resolver


@pytest.fixture
def mock_plantid_client() -> MagicMock:
    """Identification client whose identify() result each test sets."""
    return create_autospec(PlantIdClient, instance=True)


@pytest.fixture
def app_with_temp_data(
    path_resolver: PathResolver,
    test_config: FloraScanConfig,
    mock_image_resolver: MagicMock,
    mock_plantid_client: MagicMock,
):
    """Create the FastAPI app with temp paths and mocked external services.

    The database is only constructed here. The app lifespan initializes it,
    so every connection is opened on the TestClient's event loop.
    """
    app = create_app()
    container = app.container  # type: ignore[attr-defined]

    temp_db_service = DatabaseService(path_resolver.get_database_path())

    container.path_resolver.override(providers.Object(path_resolver))
    container.config.override(providers.Object(test_config))
    container.database_service.override(providers.Object(temp_db_service))
    container.image_resolver.override(providers.Object(mock_image_resolver))
    container.plantid_client.override(providers.Object(mock_plantid_client))

    # Leave pytest's logging handlers in place
    with patch("florascan.web.core.lifespan.configure_structlog", autospec=True):
        yield app

    container.path_resolver.reset_override()
    container.config.reset_override()
    container.database_service.reset_override()
    container.image_resolver.reset_override()
    container.plantid_client.reset_override()
    container.unwire()
