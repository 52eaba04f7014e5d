"""Dependency injection container for the FloraScan application."""

from dependency_injector import containers, providers

from florascan.config import FloraScanConfig
from florascan.database.core import DatabaseService
from florascan.enrichment.resolver import ImageEnrichmentResolver
from florascan.identification.client import PlantIdClient
from florascan.species.repository import SpeciesRepository
from florascan.species.resolver import SpeciesIdentityResolver
from florascan.system.path_resolver import PathResolver
from florascan.tags.canonicalizer import TagCanonicalizer
from florascan.tags.vocabulary import TagVocabulary, load_vocabulary
from florascan.web.core.config import get_config


def create_vocabulary(resolver: PathResolver, config: FloraScanConfig) -> TagVocabulary:
    """Load the tag vocabulary once, honouring a configured override file."""
    return load_vocabulary(resolver.get_vocabulary_path(config.vocabulary_path))


class Container(containers.DeclarativeContainer):
    """Application dependency injection container.

    Everything stateful is a singleton: the database engine, the loaded
    vocabulary, and the enrichment resolver's HTTP client all live for the
    lifetime of the process.
    """

    # Core infrastructure services - singletons
    path_resolver = providers.Singleton(PathResolver)

    # Configuration - singleton instance that uses our path_resolver
    config = providers.Singleton(
        get_config,
        path_resolver=path_resolver,
    )

    # Database path provider
    database_path = providers.Factory(
        lambda resolver: resolver.get_database_path(),
        resolver=path_resolver,
    )

    database_service = providers.Singleton(
        DatabaseService,
        db_path=database_path,
    )

    # Tag vocabulary, loaded once at startup
    vocabulary = providers.Singleton(
        create_vocabulary,
        resolver=path_resolver,
        config=config,
    )

    canonicalizer = providers.Singleton(
        TagCanonicalizer,
        vocabulary=vocabulary,
    )

    # External services
    image_resolver = providers.Singleton(
        ImageEnrichmentResolver,
        config=config.provided.enrichment,
    )

    plantid_client = providers.Singleton(
        PlantIdClient,
        config=config.provided.identification,
    )

    # Species data access and identity resolution
    species_repository = providers.Singleton(
        SpeciesRepository,
        database_service=database_service,
        canonicalizer=canonicalizer,
    )

    species_resolver = providers.Singleton(
        SpeciesIdentityResolver,
        repository=species_repository,
        canonicalizer=canonicalizer,
        image_resolver=image_resolver,
    )
