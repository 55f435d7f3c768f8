"""
Multilingual Blog API

Thin FastAPI backend serving localized blog pages from the content store.
"""

import logging
import time
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog.config import get_settings
from blog.middleware import (
    ContentLanguageMiddleware,
    RequestIDLogFilter,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
)
from blog.routers import blog, navigation
from blog.services.http_client import check_store_connectivity, close_shared_client

logger = logging.getLogger(__name__)

settings = get_settings()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"

# Health check cache: (result_dict, timestamp)
_health_cache: tuple[dict[str, Any], float] | None = None
_HEALTH_CACHE_TTL = 30  # seconds


def configure_logging(debug: bool = False) -> None:
    """Install a root handler whose records carry the request ID."""
    root = logging.getLogger()
    for existing in root.handlers:
        if any(isinstance(f, RequestIDLogFilter) for f in existing.filters):
            return
    handler = logging.StreamHandler()
    handler.addFilter(RequestIDLogFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    configure_logging(settings.debug)
    yield
    await close_shared_client()


app = FastAPI(
    title="Multilingual Blog API",
    description="Localized blog pages backed by a remote content store",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(ContentLanguageMiddleware, default_locale=settings.default_locale)
app.add_middleware(SecurityHeadersMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Accept-Language", "X-Request-ID"],
)

# Request ID (added last, so it is the outermost middleware)
app.add_middleware(RequestIDMiddleware)

# Routers
app.include_router(blog.router, prefix="/api")
app.include_router(navigation.router, prefix="/api")


def _check_config() -> str:
    """Verify required configuration is loaded. Returns 'ok' or 'fail'."""
    s = get_settings()
    if s.content_store_url and s.default_locale:
        return "ok"
    return "fail"


async def _run_health_checks() -> dict[str, Any]:
    """Run all health checks, returning the full response body."""
    global _health_cache
    now = time.time()
    if _health_cache is not None:
        cached_result, cached_at = _health_cache
        if now - cached_at < _HEALTH_CACHE_TTL:
            return cached_result

    config_status = _check_config()
    store_status = "ok" if await check_store_connectivity() else "fail"

    checks = {"config": config_status, "content_store": store_status}
    failed = [k for k, v in checks.items() if v != "ok"]

    if failed:
        overall = "degraded"
        logger.warning("Health check degraded — failed: %s", ", ".join(failed))
    else:
        overall = "ok"

    result: dict[str, Any] = {
        "status": overall,
        "service": "multilingual-blog-api",
        "version": "0.1.0",
        "checks": checks,
    }
    _health_cache = (result, now)
    return result


@app.get("/api/blog/health")
async def health_check() -> JSONResponse:
    """Health check verifying service dependencies."""
    result = await _run_health_checks()
    status_code = 200 if result["status"] in ("ok", "degraded") else 503
    return JSONResponse(content=result, status_code=status_code)
