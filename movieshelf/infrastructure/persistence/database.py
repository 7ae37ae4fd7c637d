"""
Configuration de la base de donnees pour MovieShelf.

Ce module fournit :
- Engine SQLModel configure depuis les parametres de l'application
- Generateur de session
- Fonction d'initialisation des tables

La base de donnees est configuree via MOVIESHELF_DATABASE_URL (defaut: sqlite:///movieshelf.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """
    Retourne l'engine, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from movieshelf.config import Settings
        settings = Settings()
        _engine = _create_engine(settings.database_url)
    return _engine


def _create_engine(db_url: str) -> Engine:
    """Cree l'engine, avec les options propres a SQLite si besoin."""
    if not db_url.startswith("sqlite"):
        return create_engine(db_url, echo=False, pool_pre_ping=True)

    if db_url in ("sqlite://", "sqlite:///:memory:"):
        # Une seule connexion partagee, sinon chaque session voit une base vide
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # Creer le repertoire parent du fichier SQLite
    db_path = Path(db_url.replace("sqlite:///", ""))
    db_path.parent.mkdir(exist_ok=True, parents=True)
    return create_engine(
        db_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def reset_engine() -> None:
    """Oublie l'engine courant (changement d'URL, tests)."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())
        try:
            # operations
        finally:
            session.close()

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(get_engine()) as session:
        yield session


def init_db() -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # L'import est fait ici pour eviter les imports circulaires
    from movieshelf.infrastructure.persistence import models  # noqa: F401

    engine = get_engine()
    SQLModel.metadata.create_all(engine)
    logger.debug("Base de donnees initialisee", url=str(engine.url))
