"""Unit tests for HttpChecker."""

import httpx
import pytest

from domain_manager_testkit.infrastructure.http_checker import HttpChecker


def make_checker(handler) -> HttpChecker:
    """Build a checker backed by an in-memory transport."""
    return HttpChecker(timeout=5.0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_get_status_ok() -> None:
    """Test that a 200 response returns its status."""
    checker = make_checker(lambda request: httpx.Response(200, text="hello"))

    assert await checker.get_status("https://basic-abc123.example.com/hello") == 200


@pytest.mark.asyncio
async def test_get_status_follows_redirects() -> None:
    """Test that redirects are followed to the final response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://api.example.com/new"})
        return httpx.Response(204)

    checker = make_checker(handler)

    assert await checker.get_status("https://api.example.com/old") == 204


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [403, 404, 500, 502])
async def test_get_status_error_response(status_code: int) -> None:
    """Test that error responses map to None."""
    checker = make_checker(lambda request: httpx.Response(status_code))

    assert await checker.get_status("https://api.example.com/hello") is None


@pytest.mark.asyncio
async def test_get_status_connection_error() -> None:
    """Test that transport failures map to None."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    checker = make_checker(handler)

    assert await checker.get_status("https://missing.example.com") is None


@pytest.mark.asyncio
async def test_get_status_invalid_url() -> None:
    """Test that a URL without a scheme maps to None."""
    checker = HttpChecker(timeout=5.0)

    assert await checker.get_status("not a url") is None
