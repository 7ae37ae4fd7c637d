"""
Notifications transitoires (toasts) de l'interface web.

Deux transports :
- cookie `flash` de courte durée, qui survit à une redirection et est
  consommé par la page suivante
- en-tête `HX-Trigger` (événement `showToast`) pour les réponses htmx
"""

import base64
import binascii
import json
from collections.abc import Iterable

from fastapi import Request, Response

from ..services.movie_list import Notification, NotificationLevel
from .deps import templates

FLASH_COOKIE = "flash"
FLASH_MAX_AGE = 60


def _encode(notifications: Iterable[Notification]) -> str:
    raw = json.dumps([{"message": n.message, "level": n.level.value} for n in notifications])
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def _decode(value: str) -> list[Notification]:
    try:
        items = json.loads(base64.urlsafe_b64decode(value.encode("ascii")))
    except (binascii.Error, UnicodeError, ValueError):
        return []
    if not isinstance(items, list):
        return []
    decoded = []
    for item in items:
        try:
            decoded.append(
                Notification(message=str(item["message"]), level=NotificationLevel(item["level"]))
            )
        except (KeyError, TypeError, ValueError):
            continue
    return decoded


def flash(response: Response, *notifications: Notification) -> None:
    """Dépose des notifications pour la prochaine page rendue."""
    if notifications:
        response.set_cookie(
            FLASH_COOKIE,
            _encode(notifications),
            max_age=FLASH_MAX_AGE,
            httponly=True,
            samesite="lax",
        )


def pending_flash(request: Request) -> list[Notification]:
    """Notifications déposées par la requête précédente."""
    value = request.cookies.get(FLASH_COOKIE)
    return _decode(value) if value else []


def attach(request: Request, response: Response, notifications: list[Notification]) -> None:
    """
    Livre les notifications avec la réponse.

    Les requêtes htmx reçoivent l'événement showToast ; le cookie flash
    éventuellement consommé est effacé.
    """
    if request.headers.get("HX-Request") and notifications:
        response.headers["HX-Trigger"] = json.dumps(
            {"showToast": [{"message": n.message, "level": n.level.value} for n in notifications]}
        )
    if FLASH_COOKIE in request.cookies:
        response.delete_cookie(FLASH_COOKIE)


def render(
    request: Request,
    template: str,
    context: dict,
    notifications: list[Notification] | None = None,
    status_code: int = 200,
) -> Response:
    """
    Rend un template en y joignant les toasts (flash + nouvelles notifications).

    Pour une page complète les toasts sont dans le contexte `toasts` ;
    pour un fragment htmx ils partent dans l'en-tête HX-Trigger.
    """
    toasts = pending_flash(request) + list(notifications or [])
    response = templates.TemplateResponse(
        request, template, {**context, "toasts": toasts}, status_code=status_code
    )
    attach(request, response, toasts)
    return response

