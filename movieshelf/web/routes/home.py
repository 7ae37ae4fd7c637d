"""
Route de la page d'accueil : liste des films.

Petit écran : défilement infini (fragment /movies/more ajouté au fil de
l'eau). Écran moyen / grand : pagination numérotée, chaque page remplace
la liste.
"""

from fastapi import APIRouter, Depends, Request

from ...adapters.api.local_source import LocalCatalogSource
from ...config import Settings
from ...services.catalog import MovieCatalogService
from ...services.movie_list import MovieListState, edit_path
from ..deps import get_catalog_service, get_settings, get_viewport, is_htmx
from ..notifications import render

router = APIRouter()


def _context(state: MovieListState, viewport) -> dict:
    return {
        "state": state,
        "movies": state.movies or [],
        "pagination": state.pagination,
        "viewport": viewport,
        "add_path": state.on_add(),
        "edit_path": edit_path,
    }


@router.get("/")
async def home(
    request: Request,
    page: int = 1,
    catalog: MovieCatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_settings),
):
    """Page d'accueil : charge la page 1 puis, en pagination, la page demandée."""
    viewport = get_viewport(request)
    state = MovieListState(LocalCatalogSource(catalog), limit=settings.page_size)
    await state.fetch_movies()
    if page != 1 and not viewport.is_small_device:
        await state.go_to_page(page)

    context = _context(state, viewport)

    # Clic sur un contrôle de pagination : seul le bloc #movie-list est remplacé
    if is_htmx(request):
        response = render(request, "movies/_list.html", context, state.drain_notifications())
    else:
        response = render(request, "home.html", context, state.drain_notifications())
    response.headers["Vary"] = "HX-Request, Cookie"
    return response


@router.get("/movies/more")
async def more_movies(
    request: Request,
    after: int = 1,
    catalog: MovieCatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_settings),
):
    """
    Fragment de défilement infini.

    Retourne les cartes de la page suivant `after`, à ajouter à la grille,
    et remplace la sentinelle (hx-swap-oob) tant qu'il reste des pages.
    """
    state = MovieListState.resume(
        LocalCatalogSource(catalog), current_page=max(after, 0), limit=settings.page_size
    )
    await state.load_more()
    return render(
        request,
        "movies/_more.html",
        _context(state, get_viewport(request)),
        state.drain_notifications(),
    )
