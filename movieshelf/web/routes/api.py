"""
API JSON du catalogue.

- GET  /api/movies?page&limit : page de films + pagination
- GET  /api/movies/{id}        : un film
- POST /api/movies             : création
- PUT  /api/movies/{id}        : modification
- GET  /api/logout             : suppression du cookie de session

Les erreurs métier (MovieShelfError) sont converties par le handler
enregistré dans app.py.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from loguru import logger

from ...config import Settings
from ...services.catalog import MovieCatalogService
from ...services.movie_list import (
    LOGIN_PATH,
    LOGOUT_SUCCESS_MESSAGE,
    Notification,
    NotificationLevel,
)
from ...schemas import LogoutOut, MovieIn, MovieOut, MoviePageOut
from ..deps import get_catalog_service, get_settings, is_htmx
from ..notifications import flash

router = APIRouter(prefix="/api", tags=["movies"])


def _is_page_navigation(request: Request) -> bool:
    """Lien suivi par le navigateur (HTML attendu), hors htmx."""
    return not is_htmx(request) and "text/html" in request.headers.get("accept", "")


@router.get("/movies", response_model=MoviePageOut)
async def list_movies(
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
    catalog: MovieCatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_settings),
):
    """Page de films, les plus récents en premier."""
    if limit is None:
        limit = settings.page_size
    if limit > settings.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"limit must be <= {settings.max_page_size}",
        )
    return MoviePageOut.from_entity(catalog.list_page(page=page, limit=limit))


@router.get("/movies/{movie_id}", response_model=MovieOut)
async def get_movie(
    movie_id: str,
    catalog: MovieCatalogService = Depends(get_catalog_service),
):
    return MovieOut.from_entity(catalog.get(movie_id))


@router.post("/movies", response_model=MovieOut, status_code=status.HTTP_201_CREATED)
async def create_movie(
    payload: MovieIn,
    catalog: MovieCatalogService = Depends(get_catalog_service),
):
    movie = catalog.create(payload.title, payload.publishing_year, payload.poster)
    return MovieOut.from_entity(movie)


@router.put("/movies/{movie_id}", response_model=MovieOut)
async def update_movie(
    movie_id: str,
    payload: MovieIn,
    catalog: MovieCatalogService = Depends(get_catalog_service),
):
    movie = catalog.update(movie_id, payload.title, payload.publishing_year, payload.poster)
    return MovieOut.from_entity(movie)


@router.get("/logout", response_model=LogoutOut)
async def logout(request: Request, settings: Settings = Depends(get_settings)):
    """
    Supprime le cookie de session.

    Une requête htmx reçoit en plus HX-Redirect vers /login et le toast
    de confirmation via le cookie flash. Une navigation de page (lien suivi
    sans htmx) est redirigée vers /login avec le même toast.
    """
    toast = Notification(LOGOUT_SUCCESS_MESSAGE, NotificationLevel.SUCCESS)
    if _is_page_navigation(request):
        response = RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
        flash(response, toast)
    else:
        response = JSONResponse(
            LogoutOut(message=LOGOUT_SUCCESS_MESSAGE, success=True).model_dump()
        )
        if is_htmx(request):
            response.headers["HX-Redirect"] = LOGIN_PATH
            flash(response, toast)
    response.delete_cookie(settings.session_cookie)
    logger.info("Deconnexion")
    return response
