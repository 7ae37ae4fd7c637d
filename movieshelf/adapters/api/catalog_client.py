"""
Client HTTP de l'API du catalogue MovieShelf.

Implemente l'interface IMovieCatalogClient au-dessus de :
- GET /api/movies?page&limit
- GET /api/logout

Le jeton de session est transmis dans le cookie `token` (presence seule).
Pas de retry : chaque echec remonte en CatalogAPIError.

Usage:
    client = CatalogAPIClient(base_url="http://localhost:8000", token="abc")
    page = await client.fetch_movies(1, 8)
    await client.logout()
    await client.close()
"""

from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from movieshelf.core.entities.movie import MoviePage
from movieshelf.core.exceptions import CatalogAPIError
from movieshelf.core.ports.api_clients import IMovieCatalogClient
from movieshelf.schemas import MoviePageOut


class CatalogAPIClient(IMovieCatalogClient):
    """
    Client API du catalogue.

    Example:
        client = CatalogAPIClient(base_url="http://localhost:8000", token="abc")
        page = await client.fetch_movies(2, 8)
        print(page.pagination.total_movies)
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        cookie_name: str = "token",
        timeout: float = 10.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL du serveur MovieShelf (sans /api)
            token: Valeur du cookie de session, si connue
            cookie_name: Nom du cookie de session
            timeout: Timeout des requetes en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._cookie_name = cookie_name
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            cookies = {self._cookie_name: self._token} if self._token else None
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                cookies=cookies,
                timeout=self._timeout,
            )
        return self._client

    async def _get(self, path: str, params: Optional[dict] = None) -> httpx.Response:
        client = self._get_client()
        try:
            response = await client.get(path, params=params)
        except httpx.HTTPError as e:
            raise CatalogAPIError(f"GET {path} failed: {e}") from e
        if response.is_error:
            raise CatalogAPIError(
                f"GET {path} returned {response.status_code}",
                status=response.status_code,
            )
        return response

    async def fetch_movies(self, page: int, limit: int) -> MoviePage:
        """Recupere une page de films depuis GET /api/movies."""
        response = await self._get("/api/movies", params={"page": page, "limit": limit})
        try:
            payload = MoviePageOut.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CatalogAPIError(f"Invalid /api/movies payload: {e}") from e
        logger.debug(
            "Page de films recue",
            page=payload.pagination.current_page,
            count=len(payload.movies),
        )
        return payload.to_entity()

    async def logout(self) -> None:
        """Appelle GET /api/logout et oublie le jeton local."""
        await self._get("/api/logout")
        self._token = None
        self._get_client().cookies.delete(self._cookie_name)

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
