"""
Tests pour MovieCatalogService.

Couvre :
- calcul de la pagination (pages, page au-dela de la derniere)
- validation des champs (titre, annee, affiche)
- creation, lecture et modification
"""

from unittest.mock import MagicMock

import pytest

from movieshelf.core.exceptions import MovieNotFoundError, MovieValidationError
from movieshelf.core.ports.repositories import IMovieRepository
from movieshelf.services.catalog import MovieCatalogService, validate_movie_fields


class TestValidateMovieFields:
    """Tests pour validate_movie_fields()."""

    def test_valid_fields_are_normalized(self):
        errors, movie = validate_movie_fields("  Dune ", "2021", " https://x/dune.jpg ")
        assert errors == {}
        assert movie.title == "Dune"
        assert movie.publishing_year == 2021
        assert movie.poster == "https://x/dune.jpg"

    def test_all_fields_missing(self):
        errors, movie = validate_movie_fields(None, None, None)
        assert movie is None
        assert set(errors) == {"title", "publishing_year", "poster"}

    def test_blank_title(self):
        errors, _ = validate_movie_fields("   ", 2000, "/p.jpg")
        assert errors == {"title": "Title is required"}

    def test_title_too_long(self):
        errors, _ = validate_movie_fields("x" * 201, 2000, "/p.jpg")
        assert "title" in errors

    def test_year_not_a_number(self):
        errors, _ = validate_movie_fields("Dune", "twenty", "/p.jpg")
        assert errors == {"publishing_year": "Publishing year must be a number"}

    def test_boolean_year_rejected(self):
        errors, _ = validate_movie_fields("Dune", True, "/p.jpg")
        assert "publishing_year" in errors

    @pytest.mark.parametrize("year", [1887, 2101])
    def test_year_out_of_range(self, year: int):
        errors, _ = validate_movie_fields("Dune", year, "/p.jpg")
        assert "publishing_year" in errors

    @pytest.mark.parametrize("year", [1888, 2100])
    def test_year_bounds_accepted(self, year: int):
        errors, _ = validate_movie_fields("Dune", year, "/p.jpg")
        assert errors == {}


class TestListPage:
    """Tests pour list_page()."""

    def test_empty_catalog_has_one_page(self, catalog: MovieCatalogService):
        page = catalog.list_page(page=1, limit=8)
        assert page.movies == []
        assert page.pagination.current_page == 1
        assert page.pagination.total_pages == 1
        assert page.pagination.total_movies == 0

    def test_total_pages_rounds_up(self, catalog: MovieCatalogService):
        for i in range(17):
            catalog.create(f"Movie {i}", 2000, "/p.jpg")

        page = catalog.list_page(page=3, limit=8)
        assert len(page.movies) == 1
        assert page.pagination.total_pages == 3
        assert page.pagination.total_movies == 17

    def test_page_beyond_last_is_empty(self, catalog: MovieCatalogService):
        catalog.create("Solo", 2018, "/p.jpg")

        page = catalog.list_page(page=5, limit=8)
        assert page.movies == []
        assert page.pagination.current_page == 5
        assert page.pagination.total_pages == 1

    def test_huge_page_does_not_query_store(self):
        repo = MagicMock(spec=IMovieRepository)
        repo.count.return_value = 1

        page = MovieCatalogService(repo).list_page(page=10**20, limit=8)

        assert page.movies == []
        assert page.pagination.current_page == 10**20
        assert page.pagination.total_movies == 1
        repo.list_page.assert_not_called()

    @pytest.mark.parametrize("page,limit", [(0, 8), (1, 0)])
    def test_invalid_arguments(self, catalog: MovieCatalogService, page: int, limit: int):
        with pytest.raises(ValueError):
            catalog.list_page(page=page, limit=limit)


class TestCreateAndUpdate:
    """Tests pour create(), get() et update()."""

    def test_create_then_get(self, catalog: MovieCatalogService):
        created = catalog.create("Arrival", "2016", "https://x/arrival.jpg")
        assert catalog.get(created.id) == created

    def test_create_invalid_raises_with_field_errors(self, catalog: MovieCatalogService):
        with pytest.raises(MovieValidationError) as exc_info:
            catalog.create("", 2016, "")
        assert set(exc_info.value.errors) == {"title", "poster"}
        assert catalog.list_page().pagination.total_movies == 0

    def test_get_unknown(self, catalog: MovieCatalogService):
        with pytest.raises(MovieNotFoundError):
            catalog.get("42")

    def test_update(self, catalog: MovieCatalogService):
        created = catalog.create("Arival", 2015, "/old.jpg")
        updated = catalog.update(created.id, "Arrival", 2016, "/new.jpg")

        assert updated.id == created.id
        assert catalog.get(created.id).title == "Arrival"
        assert catalog.get(created.id).poster == "/new.jpg"

    def test_update_unknown(self, catalog: MovieCatalogService):
        with pytest.raises(MovieNotFoundError):
            catalog.update("42", "Arrival", 2016, "/p.jpg")

    def test_update_invalid_keeps_movie(self, catalog: MovieCatalogService):
        created = catalog.create("Arrival", 2016, "/p.jpg")
        with pytest.raises(MovieValidationError):
            catalog.update(created.id, "Arrival", 1500, "/p.jpg")
        assert catalog.get(created.id).publishing_year == 2016
