"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
L'implémentation concrète utilise SQLModel (voir infrastructure/persistence).
"""

from abc import ABC, abstractmethod
from typing import Optional

from movieshelf.core.entities.movie import Movie


class IMovieRepository(ABC):
    """
    Interface de stockage des films du catalogue.

    Définit les opérations pour persister et récupérer les entités Movie.
    """

    @abstractmethod
    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        """Récupère un film par son ID. Retourne None si absent."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de films."""
        ...

    @abstractmethod
    def list_page(self, offset: int, limit: int) -> list[Movie]:
        """Liste une tranche de films, les plus récents en premier."""
        ...

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        """Sauvegarde un film (insertion ou mise à jour)."""
        ...
