"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- version / info / init-db
- add : creation en base et erreurs de validation
- apply_choice : navigation de la commande browse
- render_movies_table : rendu Rich
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from movieshelf.adapters.cli.commands import apply_choice, render_movies_table
from movieshelf.infrastructure.persistence import database
from movieshelf.main import app
from movieshelf.services.movie_list import MovieListState

runner = CliRunner()


@pytest.fixture
def cli_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Base SQLite temporaire pour les commandes qui ecrivent."""
    db_path = tmp_path / "cli.db"
    monkeypatch.setenv("MOVIESHELF_DATABASE_URL", f"sqlite:///{db_path}")
    database.reset_engine()
    yield db_path
    database.reset_engine()


@pytest.fixture
def paged_state(mock_catalog_client: MagicMock, page_factory) -> MovieListState:
    mock_catalog_client.fetch_movies.side_effect = lambda page, limit: page_factory(page, 3, limit)
    return MovieListState(mock_catalog_client)


class TestBasicCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "MovieShelf v0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Films par page" in result.output

    def test_init_db_creates_database(self, cli_database: Path):
        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        assert "Base initialisée" in result.output
        assert cli_database.exists()


class TestAddCommand:
    def test_add_creates_movie(self, cli_database: Path):
        result = runner.invoke(
            app, ["add", "--title", "Alien", "--year", "1979", "--poster", "https://x/alien.jpg"]
        )

        assert result.exit_code == 0
        assert "Alien (1979)" in result.output
        assert cli_database.exists()

    def test_add_rejects_invalid_year(self, cli_database: Path):
        result = runner.invoke(
            app, ["add", "--title", "Alien", "--year", "1500", "--poster", "https://x/alien.jpg"]
        )

        assert result.exit_code == 1
        assert "publishing_year" in result.output


class TestApplyChoice:
    @pytest.mark.asyncio
    async def test_quit(self, paged_state: MovieListState):
        assert await apply_choice(paged_state, " Q ") == "quit"

    @pytest.mark.asyncio
    async def test_next_then_prev(self, paged_state: MovieListState):
        await paged_state.fetch_movies()

        await apply_choice(paged_state, "n")
        assert paged_state.pagination.current_page == 2
        await apply_choice(paged_state, "p")
        assert paged_state.pagination.current_page == 1

    @pytest.mark.asyncio
    async def test_prev_on_first_page_is_ignored(self, paged_state: MovieListState):
        await paged_state.fetch_movies()

        await apply_choice(paged_state, "prev")

        assert paged_state._client.fetch_movies.await_count == 1

    @pytest.mark.asyncio
    async def test_more_appends(self, paged_state: MovieListState):
        await paged_state.fetch_movies()

        await apply_choice(paged_state, "m")

        assert len(paged_state.movies) == 16

    @pytest.mark.asyncio
    async def test_page_number(self, paged_state: MovieListState):
        await paged_state.fetch_movies()

        await apply_choice(paged_state, "3")

        assert paged_state.pagination.current_page == 3

    @pytest.mark.asyncio
    async def test_logout_quits(self, paged_state: MovieListState):
        assert await apply_choice(paged_state, "l") == "quit"

    @pytest.mark.asyncio
    async def test_unknown_command(self, paged_state: MovieListState):
        assert await apply_choice(paged_state, "zzz") is None


class TestRenderMoviesTable:
    @pytest.mark.asyncio
    async def test_rows_and_title(self, paged_state: MovieListState):
        await paged_state.fetch_movies()

        table = render_movies_table(paged_state)

        assert table.row_count == 8
        assert "page 1/3" in str(table.title)
