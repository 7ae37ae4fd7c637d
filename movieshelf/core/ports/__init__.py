"""
Ports (interfaces abstraites) du domaine.

Exports :
- IMovieRepository : persistance des films
- IMovieCatalogClient : accès au catalogue pour la page liste
"""

from movieshelf.core.ports.api_clients import IMovieCatalogClient
from movieshelf.core.ports.repositories import IMovieRepository

__all__ = [
    "IMovieCatalogClient",
    "IMovieRepository",
]
