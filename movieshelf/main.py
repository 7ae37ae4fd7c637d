"""
Point d'entrée CLI de MovieShelf.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import add, browse, logout
from .config import Settings
from .container import Container
from .logging_config import configure_logging

VERSION = "0.1.0"

app = typer.Typer(
    name="movieshelf",
    help="Catalogue de films personnel",
)
container = Container()

app.command()(add)
app.command()(browse)
app.command()(logout)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Films par page : {config.page_size}")
    typer.echo(f"Cookie de session : {config.session_cookie}")
    typer.echo(f"Service d'authentification : {config.auth_base_url}")
    typer.echo(f"API : {config.api_base_url}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieShelf v{VERSION}")


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables de la base de données."""
    container.database.init()
    typer.echo(f"Base initialisée : {get_config().database_url}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web MovieShelf."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("movieshelf.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    configure_logging(container.config(), component="cli")
    logger.info("Démarrage de MovieShelf", version=VERSION)

    app()


if __name__ == "__main__":
    main()
