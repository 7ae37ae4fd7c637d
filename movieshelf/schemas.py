"""
Schémas pydantic de l'API JSON du catalogue.

Les noms de champs côté fil suivent le format historique de l'API
(`_id`, `publishingYear`, `currentPage`...) ; côté Python les attributs
restent en snake_case grâce aux alias.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from movieshelf.core.entities.movie import Movie, MoviePage, Pagination


class MovieOut(BaseModel):
    """Film tel que renvoyé par l'API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    publishing_year: int = Field(alias="publishingYear")
    poster: str

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieOut":
        return cls(
            id=movie.id,
            title=movie.title,
            publishing_year=movie.publishing_year,
            poster=movie.poster,
        )

    def to_entity(self) -> Movie:
        return Movie(
            id=self.id,
            title=self.title,
            publishing_year=self.publishing_year,
            poster=self.poster,
        )


class PaginationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_movies: int = Field(alias="totalMovies")


class MoviePageOut(BaseModel):
    """Réponse de GET /api/movies."""

    movies: list[MovieOut]
    pagination: PaginationOut

    @classmethod
    def from_entity(cls, page: MoviePage) -> "MoviePageOut":
        return cls(
            movies=[MovieOut.from_entity(m) for m in page.movies],
            pagination=PaginationOut(
                current_page=page.pagination.current_page,
                total_pages=page.pagination.total_pages,
                total_movies=page.pagination.total_movies,
            ),
        )

    def to_entity(self) -> MoviePage:
        return MoviePage(
            movies=[m.to_entity() for m in self.movies],
            pagination=Pagination(
                current_page=self.pagination.current_page,
                total_pages=self.pagination.total_pages,
                total_movies=self.pagination.total_movies,
            ),
        )


class MovieIn(BaseModel):
    """
    Corps de POST /api/movies et PUT /api/movies/{id}.

    Les types sont volontairement larges : la validation métier
    (champs requis, bornes de l'année) est faite par le service.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    publishing_year: Optional[Union[int, str]] = Field(default=None, alias="publishingYear")
    poster: Optional[str] = None


class LogoutOut(BaseModel):
    message: str
    success: bool
