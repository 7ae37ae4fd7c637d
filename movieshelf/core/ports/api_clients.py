"""
Interface port pour la source de données de la page liste.

La page liste consomme le catalogue à travers ce contrat, qu'il soit
servi en processus (rendu serveur) ou via HTTP (client CLI).
"""

from abc import ABC, abstractmethod

from movieshelf.core.entities.movie import MoviePage


class IMovieCatalogClient(ABC):
    """
    Interface d'accès au catalogue, équivalent de GET /api/movies et GET /api/logout.
    """

    @abstractmethod
    async def fetch_movies(self, page: int, limit: int) -> MoviePage:
        """
        Récupère une page de films.

        Args:
            page: Numéro de page (commence à 1)
            limit: Nombre de films par page

        Returns:
            MoviePage avec les films et la pagination
        """
        ...

    @abstractmethod
    async def logout(self) -> None:
        """Termine la session courante. Lève une exception en cas d'échec."""
        ...
