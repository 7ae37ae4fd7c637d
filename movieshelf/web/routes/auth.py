"""
Pages de connexion et d'inscription.

Les formulaires sont envoyés au service d'authentification externe
(paramètre auth_base_url) : l'émission du jeton n'est pas gérée ici.
"""

from fastapi import APIRouter, Depends, Request

from ...config import Settings
from ..deps import get_settings
from ..notifications import render

router = APIRouter()


@router.get("/login")
async def login_page(request: Request, settings: Settings = Depends(get_settings)):
    """Formulaire de connexion."""
    return render(
        request,
        "auth/login.html",
        {"action": f"{settings.auth_base_url.rstrip('/')}/login"},
    )


@router.get("/signup")
async def signup_page(request: Request, settings: Settings = Depends(get_settings)):
    """Formulaire d'inscription."""
    return render(
        request,
        "auth/signup.html",
        {"action": f"{settings.auth_base_url.rstrip('/')}/signup"},
    )
