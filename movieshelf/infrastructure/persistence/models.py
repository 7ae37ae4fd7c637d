"""
Modeles SQLModel pour la base de donnees MovieShelf.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Films du catalogue (titre, annee de publication, affiche)
"""

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MovieModel(SQLModel, table=True):
    """Modele representant un film du catalogue."""

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    publishing_year: int
    poster: str  # URL ou chemin de l'image
    created_at: datetime | None = Field(default_factory=_utcnow, index=True)
    updated_at: datetime | None = Field(default_factory=_utcnow)
