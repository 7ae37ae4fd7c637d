"""
Exceptions métier de MovieShelf.

Chaque exception porte le code HTTP que la couche web renvoie au client.
"""

from http import HTTPStatus
from typing import Optional


class MovieShelfError(Exception):
    """Exception de base de l'application."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        """Corps JSON de la réponse d'erreur."""
        return {"detail": self.message}


class MovieNotFoundError(MovieShelfError):
    """Levée quand aucun film ne correspond à l'identifiant demandé."""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, movie_id: str) -> None:
        self.movie_id = movie_id
        super().__init__(f"Movie not found: {movie_id}")


class MovieValidationError(MovieShelfError):
    """
    Levée quand les champs d'un film sont invalides.

    Attributes:
        errors: Message d'erreur par nom de champ
    """

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__("Invalid movie: " + ", ".join(sorted(errors)))

    def to_dict(self) -> dict:
        return {**super().to_dict(), "errors": self.errors}


class CatalogAPIError(MovieShelfError):
    """
    Erreur de communication avec l'API du catalogue.

    Attributes:
        status: Code HTTP de la réponse, ou None si la requête n'a pas abouti
    """

    status_code = HTTPStatus.BAD_GATEWAY

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)
