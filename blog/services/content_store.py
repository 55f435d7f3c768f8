"""Read-only access to posts and categories in the remote content store.

The store is a Supabase project queried through its PostgREST endpoint.
Every call is a single request: no retries, no caching, no writes.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from blog.models.content import Category, Post
from blog.services.http_client import get_shared_client, store_headers, store_rest_url

logger = logging.getLogger(__name__)

POSTS_TABLE = "posts"
CATEGORIES_TABLE = "categories"
# Embed the joined category as {slug, icon}
POST_SELECT = "*,categories(slug,icon)"


class ContentStoreError(Exception):
    """Base class for content store failures."""


class TransportError(ContentStoreError):
    """The store could not be reached or answered with something unusable."""


class NotFoundError(ContentStoreError):
    """The queried post or category does not exist."""

    def __init__(self, kind: str, slug: str) -> None:
        super().__init__(f"{kind} not found: {slug}")
        self.kind = kind
        self.slug = slug


class EmptyResultSet(ContentStoreError):
    """A valid query matched zero rows."""


def sort_newest_first(posts: list[Post]) -> list[Post]:
    return sorted(posts, key=lambda p: p.created_at, reverse=True)


class ContentRepository:
    """Query surface over the content store.

    Usage::

        repo = ContentRepository.from_settings()
        posts = await repo.list_posts()
        post = await repo.get_post_by_slug("hello-world")
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._headers = headers or {}

    @classmethod
    def from_settings(cls) -> "ContentRepository":
        """Build a repository on the shared client and configured store."""
        return cls(get_shared_client(), store_rest_url(), store_headers())

    async def _select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        """Run one SELECT against *table*, returning the raw rows."""
        url = f"{self._base_url}/{table}"
        try:
            resp = await self._client.get(url, headers=self._headers, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Content store request to %s failed: %s", table, exc)
            raise TransportError(f"request to {table} failed") from exc

        if resp.status_code != 200:
            logger.warning(
                "Content store returned %d for %s (%s)",
                resp.status_code,
                table,
                resp.text[:200],
            )
            raise TransportError(f"{table} query returned HTTP {resp.status_code}")

        try:
            rows = resp.json()
        except ValueError as exc:
            raise TransportError(f"{table} query returned invalid JSON") from exc
        if not isinstance(rows, list):
            raise TransportError(f"{table} query returned {type(rows).__name__}, not rows")
        return rows

    def _parse_posts(self, rows: list[dict[str, Any]]) -> list[Post]:
        try:
            return [Post.model_validate(row) for row in rows]
        except ValidationError as exc:
            logger.warning("Malformed post rows from content store: %s", exc)
            raise TransportError("malformed post row") from exc

    async def list_posts(self) -> list[Post]:
        """All posts, newest first, each with its optional category."""
        rows = await self._select(
            POSTS_TABLE, {"select": POST_SELECT, "order": "created_at.desc"}
        )
        return sort_newest_first(self._parse_posts(rows))

    async def list_posts_by_category(self, category_slug: str) -> list[Post]:
        """Posts in one category, newest first.

        Raises NotFoundError when the category slug does not exist.
        """
        _category, posts = await self.get_category_with_posts(category_slug)
        return posts

    async def get_category_with_posts(
        self, category_slug: str
    ) -> tuple[Category, list[Post]]:
        """Resolve a category by slug, then fetch its posts newest first."""
        category = await self.get_category_by_slug(category_slug)
        rows = await self._select(
            POSTS_TABLE,
            {
                "select": POST_SELECT,
                "category_id": f"eq.{category.id}",
                "order": "created_at.desc",
            },
        )
        return category, sort_newest_first(self._parse_posts(rows))

    async def get_post_by_slug(self, slug: str) -> Post:
        rows = await self._select(
            POSTS_TABLE, {"select": POST_SELECT, "slug": f"eq.{slug}", "limit": "1"}
        )
        if not rows:
            raise NotFoundError("post", slug)
        return self._parse_posts(rows[:1])[0]

    async def get_category_by_slug(self, slug: str) -> Category:
        rows = await self._select(
            CATEGORIES_TABLE, {"select": "*", "slug": f"eq.{slug}", "limit": "1"}
        )
        if not rows:
            raise NotFoundError("category", slug)
        try:
            return Category.model_validate(rows[0])
        except ValidationError as exc:
            logger.warning("Malformed category row for %s: %s", slug, exc)
            raise TransportError("malformed category row") from exc
