"""
Commandes CLI du catalogue.

- add : ajoute un film directement dans la base
- browse : parcourt le catalogue d'un serveur (pagination ou defilement infini)
- logout : termine la session aupres d'un serveur
"""

from typing import Annotated, Optional

import typer
from rich.table import Table

from ...container import Container
from ...core.exceptions import MovieValidationError
from ...services.movie_list import MovieListState, NotificationLevel
from .helpers import async_command, console, suppress_loguru

BROWSE_HELP = "[n]ext  [p]rev  [m]ore  [<numero>] page  [l]ogout  [q]uit"

_LEVEL_STYLES = {
    NotificationLevel.SUCCESS: "green",
    NotificationLevel.ERROR: "red",
    NotificationLevel.INFO: "cyan",
}


def add(
    title: Annotated[str, typer.Option(help="Titre du film")],
    year: Annotated[int, typer.Option(help="Annee de publication")],
    poster: Annotated[str, typer.Option(help="URL de l'affiche")],
) -> None:
    """Ajoute un film au catalogue."""
    container = Container()
    container.database.init()
    catalog = container.catalog_service()
    try:
        movie = catalog.create(title, year, poster)
    except MovieValidationError as e:
        for field, message in e.errors.items():
            console.print(f"[red]{field}[/red] : {message}")
        raise typer.Exit(code=1)
    console.print(f"[green]Film ajoute[/green] : {movie.title} ({movie.publishing_year}) #{movie.id}")


def render_movies_table(state: MovieListState) -> Table:
    """Construit le tableau Rich de la liste courante."""
    pagination = state.pagination
    table = Table(
        title=(
            f"My Movies - page {pagination.current_page}/{pagination.total_pages} "
            f"({pagination.total_movies} films)"
        )
    )
    table.add_column("ID", style="dim")
    table.add_column("Titre")
    table.add_column("Annee", justify="right")
    table.add_column("Affiche", overflow="fold")
    for movie in state.movies or []:
        table.add_row(
            str(movie.id), movie.title, str(movie.publishing_year), movie.poster
        )
    return table


def print_notifications(state: MovieListState) -> None:
    for notification in state.drain_notifications():
        style = _LEVEL_STYLES[notification.level]
        console.print(f"[{style}]{notification.message}[/{style}]")


async def apply_choice(state: MovieListState, choice: str) -> Optional[str]:
    """
    Applique une commande de navigation a l'etat de la liste.

    Returns:
        "quit" pour terminer la boucle, sinon None
    """
    choice = choice.strip().lower()
    if choice in ("q", "quit"):
        return "quit"
    if choice in ("n", "next"):
        await state.go_to_page(state.pagination.current_page + 1)
    elif choice in ("p", "prev"):
        await state.go_to_page(state.pagination.current_page - 1)
    elif choice in ("m", "more"):
        if not await state.load_more():
            console.print("[yellow]Plus aucun film a charger[/yellow]")
    elif choice in ("l", "logout"):
        if await state.logout():
            return "quit"
    elif choice.isdigit():
        if not await state.go_to_page(int(choice)):
            console.print(f"[yellow]Page hors limites : {choice}[/yellow]")
    else:
        console.print(f"[yellow]Commande inconnue[/yellow] - {BROWSE_HELP}")
    return None


@async_command
async def browse(
    token: Annotated[Optional[str], typer.Option(help="Valeur du cookie de session")] = None,
    url: Annotated[Optional[str], typer.Option(help="URL du serveur MovieShelf")] = None,
    limit: Annotated[Optional[int], typer.Option(help="Films par page")] = None,
) -> None:
    """Parcourt le catalogue d'un serveur MovieShelf."""
    container = Container()
    settings = container.config()
    client = container.catalog_client(token=token, base_url=url or settings.api_base_url)
    state = MovieListState(client, limit=limit or settings.page_size)
    try:
        with suppress_loguru():
            await state.fetch_movies()
        while True:
            print_notifications(state)
            if state.is_empty:
                console.print("Your movie list is empty")
                break
            console.print(render_movies_table(state))
            choice = typer.prompt(BROWSE_HELP, default="q")
            with suppress_loguru():
                if await apply_choice(state, choice) == "quit":
                    print_notifications(state)
                    break
    finally:
        await client.close()


@async_command
async def logout(
    token: Annotated[Optional[str], typer.Option(help="Valeur du cookie de session")] = None,
    url: Annotated[Optional[str], typer.Option(help="URL du serveur MovieShelf")] = None,
) -> None:
    """Termine la session aupres du serveur."""
    container = Container()
    settings = container.config()
    client = container.catalog_client(token=token, base_url=url or settings.api_base_url)
    state = MovieListState(client)
    try:
        with suppress_loguru():
            target = await state.logout()
        print_notifications(state)
    finally:
        await client.close()
    if target is None:
        raise typer.Exit(code=1)
