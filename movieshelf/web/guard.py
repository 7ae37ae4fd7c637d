"""
Garde d'authentification des routes.

Table à deux règles appliquée à chaque navigation, sur la seule présence
du cookie de session :
- session présente + page d'authentification (/login, /signup) -> accueil
- session absente + page protégée (/, /add, /edit/<id>) -> /login
- sinon la requête continue

Aucune validation du jeton n'est faite ici.
"""

import re
from typing import Optional

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

DEFAULT_COOKIE_NAME = "token"

HOME_PATH = "/"
LOGIN_PATH = "/login"

PROTECTED_ROUTES = (
    re.compile(r"^/$"),
    re.compile(r"^/add$"),
    re.compile(r"^/edit/[^/]+$"),
    re.compile(r"^/movies/more$"),
)
AUTH_ROUTES = frozenset({"/login", "/signup"})


def _normalize(path: str) -> str:
    if len(path) > 1:
        return path.rstrip("/") or "/"
    return path or "/"


def is_protected(path: str) -> bool:
    """Vrai si le chemin exige une session."""
    path = _normalize(path)
    return any(pattern.match(path) for pattern in PROTECTED_ROUTES)


def is_auth_page(path: str) -> bool:
    """Vrai pour les pages de connexion / inscription."""
    return _normalize(path) in AUTH_ROUTES


def resolve_redirect(path: str, token: Optional[str]) -> Optional[str]:
    """
    Décide de la redirection d'une navigation.

    Args:
        path: Chemin demandé
        token: Valeur du cookie de session (None ou vide si absent)

    Returns:
        Chemin de redirection, ou None pour laisser passer
    """
    if token and is_auth_page(path):
        return HOME_PATH
    if not token and is_protected(path):
        return LOGIN_PATH
    return None


class AuthGuardMiddleware(BaseHTTPMiddleware):
    """Applique resolve_redirect à chaque requête HTTP."""

    def __init__(self, app, cookie_name: Optional[str] = None) -> None:
        super().__init__(app)
        self._cookie_name = cookie_name

    def _resolve_cookie_name(self, request: Request) -> str:
        if self._cookie_name:
            return self._cookie_name
        container = getattr(request.app.state, "container", None)
        if container is not None:
            return container.config().session_cookie
        return DEFAULT_COOKIE_NAME

    async def dispatch(self, request: Request, call_next):
        token = request.cookies.get(self._resolve_cookie_name(request))
        target = resolve_redirect(request.url.path, token)
        if target is None:
            return await call_next(request)

        logger.debug("Redirection de garde", path=request.url.path, target=target)
        if request.headers.get("HX-Request"):
            # Une redirection 3xx serait suivie par htmx et insérée dans la page
            return Response(status_code=200, headers={"HX-Redirect": target})
        return RedirectResponse(target, status_code=307)
