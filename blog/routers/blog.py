"""Blog page endpoints — list, topic and single-post views.

Each request is one page activation. The response is the settled page
state; lifecycle outcomes (empty, not found, error) travel in ``status``
rather than the HTTP status code, so the page can render its own panel.
"""

import logging

from fastapi import APIRouter, Depends, Path, Query

from blog.config import get_settings
from blog.models.content import SLUG_PATTERN
from blog.models.page import PageState
from blog.services.content_store import ContentRepository
from blog.services.page_lifecycle import (
    AllPostsQuery,
    CategoryQuery,
    PageLifecycleController,
    PageQuery,
    PostQuery,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["blog"])

LOCALE_PATTERN = r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$"


def get_repository() -> ContentRepository:
    return ContentRepository.from_settings()


def resolve_locale(
    locale: str | None = Query(default=None, pattern=LOCALE_PATTERN, max_length=35),
) -> str:
    """The requested locale, or the site default when none is given."""
    return locale or get_settings().default_locale


async def _render(repository: ContentRepository, query: PageQuery) -> PageState:
    settings = get_settings()
    controller = PageLifecycleController(
        repository,
        default_locale=settings.default_locale,
        words_per_minute=settings.words_per_minute,
    )
    controller.activate(query)
    state = await controller.wait()
    logger.debug("Rendered %r as %s", query, state.status)
    return state


@router.get("/posts", response_model=PageState)
async def list_posts(
    locale: str = Depends(resolve_locale),
    repository: ContentRepository = Depends(get_repository),
):
    """All posts, newest first."""
    return await _render(repository, AllPostsQuery(locale=locale))


@router.get("/posts/{slug}", response_model=PageState)
async def get_post(
    slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200),
    locale: str = Depends(resolve_locale),
    repository: ContentRepository = Depends(get_repository),
):
    """A single post by slug."""
    return await _render(repository, PostQuery(slug=slug, locale=locale))


@router.get("/topics/{slug}", response_model=PageState)
async def get_topic(
    slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200),
    locale: str = Depends(resolve_locale),
    repository: ContentRepository = Depends(get_repository),
):
    """Posts in one category (topic), newest first."""
    return await _render(repository, CategoryQuery(slug=slug, locale=locale))
