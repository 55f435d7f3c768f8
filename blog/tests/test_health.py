"""Tests for the health check endpoint."""

from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient


async def _get_health():
    from blog.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        return await client.get("/api/blog/health")


async def test_health_ok(mock_settings, mocker):
    mocker.patch(
        "blog.main.check_store_connectivity",
        new_callable=AsyncMock,
        return_value=True,
    )
    response = await _get_health()

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["checks"] == {"config": "ok", "content_store": "ok"}


async def test_health_degraded_when_store_unreachable(mock_settings, mocker):
    mocker.patch(
        "blog.main.check_store_connectivity",
        new_callable=AsyncMock,
        return_value=False,
    )
    response = await _get_health()

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["checks"]["content_store"] == "fail"


async def test_health_degraded_without_store_url(mock_settings, mocker):
    mock_settings.content_store_url = ""
    mocker.patch(
        "blog.main.check_store_connectivity",
        new_callable=AsyncMock,
        return_value=False,
    )
    data = (await _get_health()).json()
    assert data["checks"]["config"] == "fail"


async def test_health_result_is_cached(mock_settings, mocker):
    check = mocker.patch(
        "blog.main.check_store_connectivity",
        new_callable=AsyncMock,
        return_value=True,
    )
    await _get_health()
    await _get_health()
    assert check.await_count == 1
