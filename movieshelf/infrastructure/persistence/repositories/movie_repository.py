"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
via SQLModel.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from movieshelf.core.entities.movie import Movie
from movieshelf.core.ports.repositories import IMovieRepository
from movieshelf.infrastructure.persistence.models import MovieModel


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """Convertit un modele DB en entite domaine."""
        return Movie(
            id=str(model.id) if model.id is not None else None,
            title=model.title,
            publishing_year=model.publishing_year,
            poster=model.poster,
        )

    def _get_model(self, movie_id: str) -> Optional[MovieModel]:
        try:
            pk = int(movie_id)
        except (TypeError, ValueError):
            return None
        return self._session.get(MovieModel, pk)

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        """Recupere un film par son ID interne."""
        model = self._get_model(movie_id)
        if model:
            return self._to_entity(model)
        return None

    def count(self) -> int:
        """Compte les films du catalogue."""
        return self._session.exec(select(func.count()).select_from(MovieModel)).one()

    def list_page(self, offset: int, limit: int) -> list[Movie]:
        """Liste une tranche de films, les plus recents en premier."""
        statement = (
            select(MovieModel)
            .order_by(MovieModel.created_at.desc(), MovieModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def save(self, movie: Movie) -> Movie:
        """
        Sauvegarde un film (insertion ou mise a jour).

        Si l'entite porte un ID existant, met a jour le modele correspondant.
        Sinon, insere un nouveau film.
        """
        model = self._get_model(movie.id) if movie.id else None
        if model:
            model.title = movie.title
            model.publishing_year = movie.publishing_year
            model.poster = movie.poster
            model.updated_at = datetime.now(timezone.utc)
        else:
            model = MovieModel(
                title=movie.title,
                publishing_year=movie.publishing_year,
                poster=movie.poster,
            )
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)
