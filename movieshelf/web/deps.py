"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2, les paramètres, le service du catalogue
par requête et la classification d'écran du client.
"""

import tomllib
from collections.abc import Iterator
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..config import Settings
from ..core.value_objects import Viewport, classify_viewport, parse_width
from ..infrastructure.persistence.database import get_session
from ..infrastructure.persistence.repositories import SQLModelMovieRepository
from ..services.catalog import MovieCatalogService

_WEB_DIR = Path(__file__).parent
_PROJECT_ROOT = _WEB_DIR.parent.parent

VIEWPORT_COOKIE = "viewport_width"
VIEWPORT_HEADERS = ("Sec-CH-Viewport-Width", "Viewport-Width")

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version lue depuis pyproject.toml, disponible dans tous les templates
_PYPROJECT = _PROJECT_ROOT / "pyproject.toml"
if _PYPROJECT.exists():
    with open(_PYPROJECT, "rb") as f:
        _version = tomllib.load(f)["project"]["version"]
else:
    _version = "dev"
templates.env.globals["app_version"] = f"MovieShelf v{_version}"


def get_settings(request: Request) -> Settings:
    """Paramètres du container de l'application (Settings() hors lifespan)."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        return Settings()
    return container.config()


def get_catalog_service() -> Iterator[MovieCatalogService]:
    """Service du catalogue avec une session dédiée à la requête."""
    session = next(get_session())
    try:
        yield MovieCatalogService(SQLModelMovieRepository(session))
    finally:
        session.close()


def get_viewport(request: Request) -> Viewport:
    """
    Classe l'écran du client.

    La largeur vient du cookie écrit par static/js/app.js, sinon des
    en-têtes Client Hints. Sans information, les trois drapeaux sont faux.
    """
    width = parse_width(request.cookies.get(VIEWPORT_COOKIE))
    if width is None:
        for header in VIEWPORT_HEADERS:
            width = parse_width(request.headers.get(header))
            if width is not None:
                break
    return classify_viewport(width)


def is_htmx(request: Request) -> bool:
    return bool(request.headers.get("HX-Request"))
