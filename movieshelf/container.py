"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers

from .adapters.api.catalog_client import CatalogAPIClient
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import SQLModelMovieRepository
from .services.catalog import MovieCatalogService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        catalog = container.catalog_service()
        client = container.catalog_client(token="...")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraiche
    movie_repository = providers.Factory(
        SQLModelMovieRepository,
        session=session,
    )

    # Services
    catalog_service = providers.Factory(
        MovieCatalogService,
        movie_repo=movie_repository,
    )

    # Client HTTP de l'API - Factory, le jeton est fourni a l'appel
    catalog_client = providers.Factory(
        CatalogAPIClient,
        base_url=config.provided.api_base_url,
        cookie_name=config.provided.session_cookie,
        timeout=config.provided.api_timeout,
    )
