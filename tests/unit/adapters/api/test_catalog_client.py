"""
Tests for CatalogAPIClient - HTTP client of the catalog API.

Uses respx to mock httpx calls and verifies:
- the wire format (_id, publishingYear, currentPage...) is parsed into entities
- the session cookie is sent
- HTTP, transport and payload errors become CatalogAPIError
"""

import httpx
import pytest
import respx

from movieshelf.adapters.api.catalog_client import CatalogAPIClient
from movieshelf.core.entities.movie import Movie
from movieshelf.core.exceptions import CatalogAPIError
from movieshelf.core.ports.api_clients import IMovieCatalogClient

BASE_URL = "http://movieshelf.test"

MOVIES_RESPONSE = {
    "movies": [
        {"_id": "7", "title": "Heat", "publishingYear": 1995, "poster": "https://x/heat.jpg"},
        {"_id": "6", "title": "Ronin", "publishingYear": 1998, "poster": "https://x/ronin.jpg"},
    ],
    "pagination": {"currentPage": 2, "totalPages": 4, "totalMovies": 30},
}


@pytest.fixture
def client() -> CatalogAPIClient:
    return CatalogAPIClient(base_url=BASE_URL + "/", token="abc123")


class TestInterface:
    def test_implements_port(self, client: CatalogAPIClient):
        assert isinstance(client, IMovieCatalogClient)


class TestFetchMovies:
    @pytest.mark.asyncio
    @respx.mock
    async def test_parses_page(self, client: CatalogAPIClient):
        route = respx.get(f"{BASE_URL}/api/movies").mock(
            return_value=httpx.Response(200, json=MOVIES_RESPONSE)
        )

        page = await client.fetch_movies(2, 8)

        assert route.called
        request = route.calls.last.request
        assert request.url.params["page"] == "2"
        assert request.url.params["limit"] == "8"
        assert "token=abc123" in request.headers["cookie"]
        assert page.movies[0] == Movie(
            id="7", title="Heat", publishing_year=1995, poster="https://x/heat.jpg"
        )
        assert page.pagination.current_page == 2
        assert page.pagination.total_pages == 4
        assert page.pagination.total_movies == 30
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error(self, client: CatalogAPIClient):
        respx.get(f"{BASE_URL}/api/movies").mock(return_value=httpx.Response(500))

        with pytest.raises(CatalogAPIError) as exc_info:
            await client.fetch_movies(1, 8)
        assert exc_info.value.status == 500
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error(self, client: CatalogAPIClient):
        respx.get(f"{BASE_URL}/api/movies").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(CatalogAPIError) as exc_info:
            await client.fetch_movies(1, 8)
        assert exc_info.value.status is None
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_payload(self, client: CatalogAPIClient):
        respx.get(f"{BASE_URL}/api/movies").mock(
            return_value=httpx.Response(200, json={"movies": "nope"})
        )

        with pytest.raises(CatalogAPIError):
            await client.fetch_movies(1, 8)
        await client.close()


class TestLogout:
    @pytest.mark.asyncio
    @respx.mock
    async def test_logout_calls_endpoint(self, client: CatalogAPIClient):
        route = respx.get(f"{BASE_URL}/api/logout").mock(
            return_value=httpx.Response(200, json={"message": "Logout successful", "success": True})
        )

        await client.logout()

        assert route.called
        assert "token=abc123" in route.calls.last.request.headers["cookie"]
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_logout_failure(self, client: CatalogAPIClient):
        respx.get(f"{BASE_URL}/api/logout").mock(return_value=httpx.Response(503))

        with pytest.raises(CatalogAPIError):
            await client.logout()
        await client.close()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, client: CatalogAPIClient):
        await client.close()
        await client.close()
