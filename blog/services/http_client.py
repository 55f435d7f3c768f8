"""Shared HTTP client utilities — reusable httpx client for the content store."""

import logging

import httpx

from blog.config import get_settings

logger = logging.getLogger(__name__)

# Module-level shared client (created lazily, lives for the process lifetime)
_client: httpx.AsyncClient | None = None


def get_shared_client() -> httpx.AsyncClient:
    """Return a shared httpx.AsyncClient, creating it on first call."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(timeout=get_settings().http_timeout)
    return _client


async def close_shared_client() -> None:
    """Close the shared client (app shutdown)."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
    _client = None


def store_headers() -> dict[str, str]:
    """Build standard content-store (PostgREST) request headers.

    Includes the apikey/Authorization pair only when a key is configured.
    """
    settings = get_settings()
    headers: dict[str, str] = {"Accept": "application/json"}
    if settings.content_store_key:
        headers["apikey"] = settings.content_store_key
        headers["Authorization"] = f"Bearer {settings.content_store_key}"
    return headers


def store_rest_url() -> str:
    """Base URL of the store's REST endpoint (``{url}/rest/v1``)."""
    return f"{get_settings().content_store_url.rstrip('/')}/rest/v1"


async def check_store_connectivity() -> bool:
    """Lightweight store connectivity check — fetches one category id."""
    if not get_settings().content_store_url:
        return False
    client = get_shared_client()
    try:
        resp = await client.get(
            f"{store_rest_url()}/categories",
            headers=store_headers(),
            params={"select": "id", "limit": "1"},
        )
        return resp.status_code == 200
    except httpx.HTTPError:
        logger.warning("Content store unreachable", exc_info=True)
        return False
