"""
Source en processus pour la page liste.

Adapte MovieCatalogService au port IMovieCatalogClient afin que le rendu
serveur utilise la même machine d'état que le client HTTP.
"""

from sqlalchemy.exc import SQLAlchemyError

from movieshelf.core.entities.movie import MoviePage
from movieshelf.core.exceptions import CatalogAPIError
from movieshelf.core.ports.api_clients import IMovieCatalogClient
from movieshelf.services.catalog import MovieCatalogService


class LocalCatalogSource(IMovieCatalogClient):
    """Lecture directe du catalogue, sans aller-retour HTTP."""

    def __init__(self, catalog: MovieCatalogService) -> None:
        self._catalog = catalog

    async def fetch_movies(self, page: int, limit: int) -> MoviePage:
        try:
            return self._catalog.list_page(page=page, limit=limit)
        except (SQLAlchemyError, ValueError) as e:
            raise CatalogAPIError(f"Catalog read failed: {e}") from e

    async def logout(self) -> None:
        # La suppression du cookie est faite par la route /api/logout
        return None
