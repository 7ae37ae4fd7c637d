"""
État de la page liste des films.

Machine d'état de la page d'accueil :
- chargement initial de la page 1
- pagination numérotée sur écran moyen / grand (la page remplace la liste)
- défilement infini sur petit écran (les pages suivantes s'ajoutent)
- déconnexion best-effort

Les échecs (chargement, déconnexion) ne sont jamais fatals : ils sont
journalisés et convertis en notifications transitoires.
Aucun retry ni annulation : des appels concurrents à go_to_page peuvent
se croiser, la dernière réponse l'emporte. load_more est protégé par le
drapeau loading.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from movieshelf.core.entities.movie import Movie, Pagination
from movieshelf.core.exceptions import MovieShelfError
from movieshelf.core.ports.api_clients import IMovieCatalogClient

DEFAULT_LIMIT = 8

HOME_PATH = "/"
LOGIN_PATH = "/login"
ADD_PATH = "/add"

LOGOUT_SUCCESS_MESSAGE = "Logout successful"
LOGOUT_FAILURE_MESSAGE = "Logout failed. Please try again."
FETCH_FAILURE_MESSAGE = "Failed to fetch movies"


class NotificationLevel(str, Enum):
    """Niveau d'une notification (toast)."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """Message transitoire affiché à l'utilisateur."""

    message: str
    level: NotificationLevel = NotificationLevel.INFO


def edit_path(movie: Movie) -> str:
    """Lien d'édition d'une carte de film."""
    return f"/edit/{movie.id}"


class MovieListState:
    """
    État de chargement et de pagination de la liste.

    Attributes:
        loading: Une requête est en cours
        movies: Films chargés (None avant le premier chargement réussi)
        pagination: Dernière pagination reçue
        has_more: Il reste des pages à charger (défilement infini)
        limit: Taille de page demandée
        last_batch: Films reçus lors du dernier chargement

    Example:
        state = MovieListState(client)
        await state.fetch_movies()
        await state.load_more()      # petit écran : ajoute la page 2
        await state.go_to_page(3)    # pagination : remplace par la page 3
    """

    def __init__(self, client: IMovieCatalogClient, limit: int = DEFAULT_LIMIT) -> None:
        self._client = client
        self.limit = limit
        self.loading = False
        self.movies: Optional[list[Movie]] = None
        self.pagination = Pagination()
        self.has_more = True
        self.last_batch: list[Movie] = []
        self._notifications: list[Notification] = []

    @classmethod
    def resume(
        cls,
        client: IMovieCatalogClient,
        current_page: int,
        limit: int = DEFAULT_LIMIT,
    ) -> "MovieListState":
        """
        Reconstruit l'état après `current_page` pages déjà affichées.

        Utilisé par le fragment de défilement infini : le navigateur garde
        les cartes déjà rendues, le serveur ne charge que la suite.
        """
        state = cls(client, limit=limit)
        state.pagination = Pagination(
            current_page=current_page,
            total_pages=max(current_page + 1, 1),
        )
        return state

    # ------------------------------------------------------------------
    # Propriétés de rendu
    # ------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        """Aucun film à afficher (catalogue vide ou chargement échoué)."""
        return not self.movies

    def drain_notifications(self) -> list[Notification]:
        """Retourne puis efface les notifications en attente."""
        pending, self._notifications = self._notifications, []
        return pending

    def _notify(self, message: str, level: NotificationLevel) -> None:
        self._notifications.append(Notification(message=message, level=level))

    # ------------------------------------------------------------------
    # Chargement
    # ------------------------------------------------------------------

    async def fetch_movies(self, page: int = 1, append: bool = False) -> bool:
        """
        Charge une page de films.

        Args:
            page: Numéro de page à charger
            append: Ajouter à la liste courante au lieu de la remplacer

        Returns:
            True si la page a été chargée, False en cas d'échec
        """
        self.loading = True
        try:
            result = await self._client.fetch_movies(page, self.limit)
        except MovieShelfError as e:
            logger.error("Echec du chargement des films", page=page, error=str(e))
            self._notify(FETCH_FAILURE_MESSAGE, NotificationLevel.ERROR)
            return False
        finally:
            self.loading = False

        self.last_batch = list(result.movies)
        if append:
            self.movies = (self.movies or []) + self.last_batch
        else:
            self.movies = self.last_batch
        self.pagination = Pagination(
            current_page=result.pagination.current_page,
            total_pages=result.pagination.total_pages,
            total_movies=result.pagination.total_movies,
        )
        self.has_more = page < result.pagination.total_pages
        return True

    async def load_more(self) -> bool:
        """
        Charge la page suivante en mode ajout (défilement infini).

        Sans effet s'il n'y a plus de pages ou si un chargement est en cours.

        Returns:
            True si une requête a été émise
        """
        if not self.has_more or self.loading:
            return False
        await self.fetch_movies(self.pagination.current_page + 1, append=True)
        return True

    async def go_to_page(self, page: int) -> bool:
        """
        Remplace la liste par la page demandée (pagination numérotée).

        Sans effet si la page est hors de [1, total_pages].

        Returns:
            True si une requête a été émise
        """
        if not 1 <= page <= self.pagination.total_pages:
            return False
        await self.fetch_movies(page)
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def on_add(self) -> str:
        return ADD_PATH

    async def logout(self) -> Optional[str]:
        """
        Déconnexion best-effort.

        Returns:
            Le chemin de redirection (/login) en cas de succès, sinon None
        """
        try:
            await self._client.logout()
        except MovieShelfError as e:
            logger.error("Echec de la deconnexion", error=str(e))
            self._notify(LOGOUT_FAILURE_MESSAGE, NotificationLevel.ERROR)
            return None
        self._notify(LOGOUT_SUCCESS_MESSAGE, NotificationLevel.SUCCESS)
        return LOGIN_PATH
