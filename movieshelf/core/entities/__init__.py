"""
Business entities representing core domain concepts.

Exports:
- Movie: A catalog entry (title, year, poster)
- Pagination: Position of a page within the catalog
- MoviePage: A page of movies with its pagination
"""

from movieshelf.core.entities.movie import Movie, MoviePage, Pagination

__all__ = [
    "Movie",
    "MoviePage",
    "Pagination",
]
