"""
Fixtures pytest partagees pour les tests MovieShelf.

Ce module contient les fixtures communes utilisees dans les tests:
- Session SQLModel sur une base SQLite en memoire
- Settings de test
- Client HTTP de test de l'application web (base SQLite temporaire)
"""

import sys
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from loguru import logger
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from movieshelf.config import Settings
from movieshelf.core.entities.movie import Movie, MoviePage, Pagination
from movieshelf.core.ports.api_clients import IMovieCatalogClient
from movieshelf.infrastructure.persistence import database
from movieshelf.infrastructure.persistence import models  # noqa: F401
from movieshelf.infrastructure.persistence.repositories import SQLModelMovieRepository
from movieshelf.services.catalog import MovieCatalogService


def make_movies(count: int, start: int = 1) -> list[Movie]:
    """Films factices numerotes a partir de `start`."""
    return [
        Movie(
            id=str(i),
            title=f"Movie {i}",
            publishing_year=2000 + i,
            poster=f"https://img.example.com/{i}.jpg",
        )
        for i in range(start, start + count)
    ]


def make_page(page: int, total_pages: int, per_page: int = 8) -> MoviePage:
    """Page factice coherente avec la pagination annoncee."""
    return MoviePage(
        movies=make_movies(per_page, start=(page - 1) * per_page + 1),
        pagination=Pagination(
            current_page=page,
            total_pages=total_pages,
            total_movies=total_pages * per_page,
        ),
    )


def restore_loguru() -> None:
    """Retire les sorties installees par configure_logging (fichier, file d'attente)."""
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def page_factory():
    """Fabrique de pages factices : page_factory(page, total_pages, per_page=8)."""
    return make_page


@pytest.fixture
def movies_factory():
    """Fabrique de films factices : movies_factory(count, start=1)."""
    return make_movies


@pytest.fixture
def session() -> Iterator[Session]:
    """Session SQLModel sur une base SQLite en memoire."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as s:
        yield s
    engine.dispose()


@pytest.fixture
def movie_repo(session: Session) -> SQLModelMovieRepository:
    return SQLModelMovieRepository(session)


@pytest.fixture
def catalog(movie_repo: SQLModelMovieRepository) -> MovieCatalogService:
    return MovieCatalogService(movie_repo)


@pytest.fixture
def mock_catalog_client() -> MagicMock:
    """
    Mock de IMovieCatalogClient.

    fetch_movies retourne par defaut une page 1/1 de 8 films.
    """
    client = MagicMock(spec=IMovieCatalogClient)
    client.fetch_movies = AsyncMock(return_value=make_page(1, 1))
    client.logout = AsyncMock(return_value=None)
    return client


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans tmp_path."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def web_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """
    Client de test de l'application web, sans cookie de session.

    La base SQLite est isolee dans tmp_path.
    """
    monkeypatch.setenv("MOVIESHELF_DATABASE_URL", f"sqlite:///{tmp_path / 'web.db'}")
    monkeypatch.setenv("MOVIESHELF_LOG_FILE", str(tmp_path / "logs" / "web.log"))
    database.reset_engine()

    from movieshelf.web.app import app

    with TestClient(app) as client:
        yield client
    database.reset_engine()
    restore_loguru()


@pytest.fixture
def auth_client(web_client: TestClient) -> TestClient:
    """Client de test avec le cookie de session positionne."""
    web_client.cookies.set("token", "session-token")
    return web_client


@pytest.fixture
def seed_movies(web_client: TestClient):
    """Insere `count` films via le service, dans la base du client web."""

    def _seed(count: int) -> list[Movie]:
        session = next(database.get_session())
        try:
            service = MovieCatalogService(SQLModelMovieRepository(session))
            return [
                service.create(f"Movie {i}", 2000 + (i % 100), f"https://img.example.com/{i}.jpg")
                for i in range(1, count + 1)
            ]
        finally:
            session.close()

    return _seed
