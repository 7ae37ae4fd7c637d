"""
Entités du catalogue de films.

Un film du catalogue et les métadonnées de pagination renvoyées avec
chaque page de films.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Movie:
    """
    Film du catalogue.

    Attributs :
        id : Identifiant opaque attribué par le stockage (None avant sauvegarde)
        title : Titre affiché
        publishing_year : Année de publication
        poster : URL ou chemin de l'affiche
    """

    id: Optional[str] = None
    title: str = ""
    publishing_year: Optional[int] = None
    poster: str = ""

    @property
    def is_displayable(self) -> bool:
        """Une carte exige un titre, une année et une affiche."""
        return bool(self.title and self.publishing_year and self.poster)


@dataclass
class Pagination:
    """
    Position d'une page dans le catalogue.

    Attributs :
        current_page : Numéro de page, à partir de 1
        total_pages : Nombre de pages pour la taille de page demandée
        total_movies : Nombre de films du catalogue
    """

    current_page: int = 1
    total_pages: int = 1
    total_movies: int = 0

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def page_numbers(self) -> list[int]:
        """Numéros de toutes les pages, pour les contrôles numérotés."""
        return list(range(1, self.total_pages + 1))


@dataclass
class MoviePage:
    """Une page de films avec sa pagination."""

    movies: list[Movie] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)
