"""
Tests unitaires pour le mecanisme de retry vers l'hote Jellyfin.

Ces tests verifient:
- HostUnavailableError capture le code HTTP et le header Retry-After
- with_retry relance sur HostUnavailableError uniquement
- request_with_retry relance sur 429/502/503/504 et erreurs de transport
- Les autres erreurs HTTP remontent sans retry
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
import respx

from src.adapters.jellyfin.retry import HostUnavailableError, request_with_retry, with_retry

BASE_URL = "http://jellyfin.test:8096"


@pytest.fixture(autouse=True)
def no_backoff_sleep():
    """Supprime l'attente reelle entre les tentatives."""
    with patch("asyncio.sleep", new=AsyncMock()):
        yield


class TestHostUnavailableError:
    """Tests pour l'exception HostUnavailableError."""

    def test_stores_status_and_retry_after(self) -> None:
        error = HostUnavailableError(status_code=503, retry_after=30)
        assert error.status_code == 503
        assert error.retry_after == 30
        assert "503" in str(error)

    def test_transport_error_has_no_status(self) -> None:
        error = HostUnavailableError()
        assert error.status_code is None
        assert error.retry_after is None


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_retries_on_host_unavailable(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def flaky() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise HostUnavailableError(503)
            return "ok"

        assert await flaky() == "ok"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_reraises_after_max_attempts(self) -> None:
        call_count = 0

        @with_retry(max_attempts=2, max_wait=1)
        async def always_down() -> str:
            nonlocal call_count
            call_count += 1
            raise HostUnavailableError(502)

        with pytest.raises(HostUnavailableError):
            await always_down()
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_does_not_retry_other_exceptions(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def broken() -> str:
            nonlocal call_count
            call_count += 1
            raise ValueError("bad payload")

        with pytest.raises(ValueError):
            await broken()
        assert call_count == 1


class TestRequestWithRetry:
    """Tests pour request_with_retry."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_success_on_first_try(self) -> None:
        route = respx.get(f"{BASE_URL}/Library/VirtualFolders").mock(
            return_value=httpx.Response(200, json=[])
        )
        async with httpx.AsyncClient(base_url=BASE_URL) as client:
            response = await request_with_retry(client, "GET", "/Library/VirtualFolders")

        assert response.status_code == 200
        assert route.call_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [429, 502, 503, 504])
    @respx.mock
    async def test_retries_transient_status(self, status_code) -> None:
        route = respx.get(f"{BASE_URL}/Items").mock(
            side_effect=[
                httpx.Response(status_code, headers={"Retry-After": "1"}),
                httpx.Response(200, json={"Items": []}),
            ]
        )
        async with httpx.AsyncClient(base_url=BASE_URL) as client:
            response = await request_with_retry(client, "GET", "/Items")

        assert response.json() == {"Items": []}
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_retries_transport_errors(self) -> None:
        route = respx.get(f"{BASE_URL}/Items").mock(
            side_effect=[
                httpx.ConnectError("connection refused"),
                httpx.Response(200, json={"Items": []}),
            ]
        )
        async with httpx.AsyncClient(base_url=BASE_URL) as client:
            response = await request_with_retry(client, "GET", "/Items")

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_gives_up_after_max_attempts(self) -> None:
        route = respx.get(f"{BASE_URL}/Items").mock(return_value=httpx.Response(503))
        async with httpx.AsyncClient(base_url=BASE_URL) as client:
            with pytest.raises(HostUnavailableError) as exc_info:
                await request_with_retry(client, "GET", "/Items", max_attempts=3)

        assert exc_info.value.status_code == 503
        assert route.call_count == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_other_http_errors_are_not_retried(self) -> None:
        route = respx.get(f"{BASE_URL}/Items").mock(return_value=httpx.Response(401))
        async with httpx.AsyncClient(base_url=BASE_URL) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await request_with_retry(client, "GET", "/Items")

        assert route.call_count == 1
