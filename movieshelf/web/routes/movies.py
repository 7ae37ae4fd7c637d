"""
Routes d'ajout et d'édition d'un film (formulaires HTML).

Un film est enregistré avec un titre, une année de publication et l'URL
de son affiche. En cas d'erreur de validation le formulaire est réaffiché
avec les messages par champ ; en cas de succès retour à l'accueil avec un toast.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from loguru import logger

from ...core.exceptions import MovieNotFoundError, MovieValidationError
from ...services.catalog import MovieCatalogService
from ...services.movie_list import HOME_PATH, Notification, NotificationLevel
from ..deps import get_catalog_service
from ..notifications import flash, render

router = APIRouter()

_FORM_FIELDS = ("title", "publishing_year", "poster")


async def _read_form(request: Request) -> dict[str, str]:
    form = await request.form()
    return {key: str(form.get(key, "")) for key in _FORM_FIELDS}


def _form_page(
    request: Request,
    *,
    heading: str,
    action: str,
    submit_label: str,
    form_data: dict,
    errors: dict | None = None,
):
    return render(
        request,
        "movies/form.html",
        {
            "heading": heading,
            "action": action,
            "submit_label": submit_label,
            "form_data": form_data,
            "errors": errors or {},
        },
    )


def _back_home(message: str):
    response = RedirectResponse(url=HOME_PATH, status_code=303)
    flash(response, Notification(message=message, level=NotificationLevel.SUCCESS))
    return response


@router.get("/add")
async def add_page(request: Request):
    """Formulaire de création d'un film."""
    return _form_page(
        request,
        heading="Create a new movie",
        action="/add",
        submit_label="Submit",
        form_data={key: "" for key in _FORM_FIELDS},
    )


@router.post("/add")
async def add_submit(
    request: Request,
    catalog: MovieCatalogService = Depends(get_catalog_service),
):
    """Crée le film puis retourne à l'accueil."""
    form_data = await _read_form(request)
    try:
        catalog.create(form_data["title"], form_data["publishing_year"], form_data["poster"])
    except MovieValidationError as e:
        return _form_page(
            request,
            heading="Create a new movie",
            action="/add",
            submit_label="Submit",
            form_data=form_data,
            errors=e.errors,
        )
    return _back_home("Movie added")


@router.get("/edit/{movie_id}")
async def edit_page(
    request: Request,
    movie_id: str,
    catalog: MovieCatalogService = Depends(get_catalog_service),
):
    """Formulaire d'édition pré-rempli."""
    try:
        movie = catalog.get(movie_id)
    except MovieNotFoundError:
        return HTMLResponse("Movie not found", status_code=404)

    return _form_page(
        request,
        heading="Edit",
        action=f"/edit/{movie.id}",
        submit_label="Update",
        form_data={
            "title": movie.title,
            "publishing_year": str(movie.publishing_year),
            "poster": movie.poster,
        },
    )


@router.post("/edit/{movie_id}")
async def edit_submit(
    request: Request,
    movie_id: str,
    catalog: MovieCatalogService = Depends(get_catalog_service),
):
    """Enregistre les modifications puis retourne à l'accueil."""
    form_data = await _read_form(request)
    try:
        catalog.update(
            movie_id, form_data["title"], form_data["publishing_year"], form_data["poster"]
        )
    except MovieNotFoundError:
        logger.warning("Edition d'un film inexistant", movie_id=movie_id)
        return HTMLResponse("Movie not found", status_code=404)
    except MovieValidationError as e:
        return _form_page(
            request,
            heading="Edit",
            action=f"/edit/{movie_id}",
            submit_label="Update",
            form_data=form_data,
            errors=e.errors,
        )
    return _back_home("Movie updated")
