"""
Application FastAPI de MovieShelf.

Initialise l'application web avec le Container DI, installe la garde
d'authentification, configure les fichiers statiques et monte les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from ..core.exceptions import MovieShelfError
from ..logging_config import configure_logging
from .guard import AuthGuardMiddleware
from .routes.api import router as api_router
from .routes.auth import router as auth_router
from .routes.home import router as home_router
from .routes.movies import router as movies_router

_WEB_DIR = Path(__file__).parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI et la journalisation au démarrage."""
    container = Container()
    configure_logging(container.config(), component="web")
    container.database.init()
    app.state.container = container
    yield


app = FastAPI(title="MovieShelf", lifespan=lifespan)

app.add_middleware(AuthGuardMiddleware)

# Fichiers statiques
app.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")


@app.exception_handler(MovieShelfError)
async def movieshelf_error_handler(request: Request, exc: MovieShelfError):
    """Convertit les erreurs métier en réponse JSON avec le code HTTP associé."""
    if exc.status_code >= 500:
        logger.error("Erreur applicative", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=int(exc.status_code), content=exc.to_dict())


# Routes
app.include_router(home_router)
app.include_router(movies_router)
app.include_router(auth_router)
app.include_router(api_router)
