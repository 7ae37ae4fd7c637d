"""
Service du catalogue de films.

Orchestre le repository pour :
- lister une page de films avec sa pagination
- créer et modifier un film après validation des champs

Un film n'est affichable qu'avec un titre, une année et une affiche :
la création et la modification refusent tout film incomplet.
"""

import math
from typing import Any, Optional

from loguru import logger

from movieshelf.core.entities.movie import Movie, MoviePage, Pagination
from movieshelf.core.exceptions import MovieNotFoundError, MovieValidationError
from movieshelf.core.ports.repositories import IMovieRepository

MIN_PUBLISHING_YEAR = 1888
MAX_PUBLISHING_YEAR = 2100
MAX_TITLE_LENGTH = 200


def validate_movie_fields(
    title: Any, publishing_year: Any, poster: Any
) -> tuple[dict[str, str], Optional[Movie]]:
    """
    Valide et normalise les champs d'un film.

    Les valeurs peuvent provenir d'un formulaire (chaînes) ou de JSON.

    Returns:
        Tuple (erreurs par champ, film normalisé ou None si erreurs)
    """
    errors: dict[str, str] = {}

    clean_title = str(title).strip() if title is not None else ""
    if not clean_title:
        errors["title"] = "Title is required"
    elif len(clean_title) > MAX_TITLE_LENGTH:
        errors["title"] = f"Title must be at most {MAX_TITLE_LENGTH} characters"

    year: Optional[int] = None
    if publishing_year is None or str(publishing_year).strip() == "":
        errors["publishing_year"] = "Publishing year is required"
    elif isinstance(publishing_year, bool):
        errors["publishing_year"] = "Publishing year must be a number"
    else:
        try:
            year = int(str(publishing_year).strip())
        except ValueError:
            errors["publishing_year"] = "Publishing year must be a number"
        else:
            if not MIN_PUBLISHING_YEAR <= year <= MAX_PUBLISHING_YEAR:
                errors["publishing_year"] = (
                    f"Publishing year must be between {MIN_PUBLISHING_YEAR} "
                    f"and {MAX_PUBLISHING_YEAR}"
                )

    clean_poster = str(poster).strip() if poster is not None else ""
    if not clean_poster:
        errors["poster"] = "Poster is required"

    if errors:
        return errors, None
    return errors, Movie(title=clean_title, publishing_year=year, poster=clean_poster)


class MovieCatalogService:
    """
    Service de lecture et d'écriture du catalogue.

    Example:
        service = MovieCatalogService(movie_repo)
        page = service.list_page(page=1, limit=8)
        movie = service.create("Inception", 2010, "https://.../inception.jpg")
    """

    def __init__(self, movie_repo: IMovieRepository) -> None:
        self._movie_repo = movie_repo

    def list_page(self, page: int = 1, limit: int = 8) -> MoviePage:
        """
        Retourne une page de films, les plus récents en premier.

        Args:
            page: Numéro de page (>= 1)
            limit: Nombre de films par page (>= 1)

        Returns:
            MoviePage ; une page au-delà de la dernière est vide
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        total_movies = self._movie_repo.count()
        total_pages = max(1, math.ceil(total_movies / limit))
        pagination = Pagination(
            current_page=page,
            total_pages=total_pages,
            total_movies=total_movies,
        )
        # Au-delà de la dernière page l'OFFSET peut dépasser un entier SQL
        if page > total_pages:
            return MoviePage(movies=[], pagination=pagination)

        movies = self._movie_repo.list_page(offset=(page - 1) * limit, limit=limit)
        return MoviePage(movies=movies, pagination=pagination)

    def get(self, movie_id: str) -> Movie:
        """Récupère un film ou lève MovieNotFoundError."""
        movie = self._movie_repo.get_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    def create(self, title: Any, publishing_year: Any, poster: Any) -> Movie:
        """Crée un film après validation."""
        errors, movie = validate_movie_fields(title, publishing_year, poster)
        if errors:
            raise MovieValidationError(errors)
        saved = self._movie_repo.save(movie)
        logger.info("Film cree", movie_id=saved.id, title=saved.title)
        return saved

    def update(
        self, movie_id: str, title: Any, publishing_year: Any, poster: Any
    ) -> Movie:
        """Modifie un film existant après validation."""
        self.get(movie_id)
        errors, movie = validate_movie_fields(title, publishing_year, poster)
        if errors:
            raise MovieValidationError(errors)
        movie.id = movie_id
        saved = self._movie_repo.save(movie)
        logger.info("Film modifie", movie_id=saved.id, title=saved.title)
        return saved
