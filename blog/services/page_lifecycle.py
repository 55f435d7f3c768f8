"""Page lifecycle — one repository fetch per page activation.

A ``PageLifecycleController`` belongs to a single page view. Each call to
``activate`` supersedes whatever request was still in flight: the old
request is left to finish on its own, but its result is dropped instead of
being applied. Only the most recent activation can change ``state``.

States move ``idle -> loading -> success | empty | not_found | error``.
Repository failures never escape the controller; they become states.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol, Union

from blog.models.content import Category, Post
from blog.models.page import (
    Empty,
    Error,
    Idle,
    Loading,
    NotFound,
    PageState,
    Success,
)
from blog.services.content_metrics import WORDS_PER_MINUTE
from blog.services.content_store import EmptyResultSet, NotFoundError, TransportError
from blog.services.localization import DEFAULT_LOCALE
from blog.services.presentation import (
    ViewContext,
    build_category_header,
    build_category_page,
    build_post_detail,
    build_post_list,
)

logger = logging.getLogger(__name__)


class PostSource(Protocol):
    """The repository calls the controller relies on."""

    async def list_posts(self) -> list[Post]: ...

    async def get_category_with_posts(
        self, category_slug: str
    ) -> tuple[Category, list[Post]]: ...

    async def get_post_by_slug(self, slug: str) -> Post: ...


@dataclass(frozen=True)
class AllPostsQuery:
    locale: str


@dataclass(frozen=True)
class CategoryQuery:
    slug: str
    locale: str


@dataclass(frozen=True)
class PostQuery:
    slug: str
    locale: str


PageQuery = Union[AllPostsQuery, CategoryQuery, PostQuery]


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


class PageHandle:
    """Ticket for one activation; invalidated when superseded or torn down."""

    def __init__(self, generation: int, query: PageQuery) -> None:
        self.generation = generation
        self.query = query
        self.task: asyncio.Task[None] | None = None
        self._invalidated = False

    @property
    def invalidated(self) -> bool:
        return self._invalidated

    def invalidate(self) -> None:
        self._invalidated = True

    def done(self) -> bool:
        return self.task is not None and self.task.done()

    def __repr__(self) -> str:
        return f"PageHandle(generation={self.generation}, query={self.query!r})"


class PageLifecycleController:
    """Drives one page view's state through a single fetch per activation."""

    def __init__(
        self,
        repository: PostSource,
        *,
        default_locale: str = DEFAULT_LOCALE,
        words_per_minute: int = WORDS_PER_MINUTE,
    ) -> None:
        self._repository = repository
        self._default_locale = default_locale
        self._words_per_minute = words_per_minute
        self._state: PageState = Idle()
        self._generation = 0
        self._handle: PageHandle | None = None
        # Superseded requests keep running; hold references until they finish
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> PageState:
        return self._state

    @property
    def handle(self) -> PageHandle | None:
        return self._handle

    def activate(self, query: PageQuery) -> PageHandle:
        """Start loading *query*, superseding any in-flight request.

        Must be called from a running event loop.
        """
        if self._handle is not None:
            if not self._handle.done():
                logger.debug("Superseding in-flight request %r", self._handle)
            self._handle.invalidate()

        self._generation += 1
        handle = PageHandle(self._generation, query)
        self._handle = handle
        self._state = Loading()

        task = asyncio.get_running_loop().create_task(self._run(handle))
        handle.task = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return handle

    def teardown(self) -> None:
        """Drop the current request (view unmounted) and return to idle."""
        if self._handle is not None:
            self._handle.invalidate()
            self._handle = None
        self._state = Idle()

    async def wait(self) -> PageState:
        """Wait for the current activation to settle and return the state.

        Follows re-activations that happen while waiting, so the result is
        always the state of the latest request.
        """
        while self._handle is not None and self._handle.task is not None:
            handle = self._handle
            await handle.task
            if self._handle is handle or self._handle is None:
                break
        return self._state

    async def _run(self, handle: PageHandle) -> None:
        state = await self._load(handle.query)
        if handle.invalidated or handle is not self._handle:
            logger.debug("Discarding stale result for %r", handle)
            return
        self._state = state

    def _context(self, query: PageQuery) -> ViewContext:
        return ViewContext(
            locale=query.locale,
            default_locale=self._default_locale,
            words_per_minute=self._words_per_minute,
        )

    async def _load(self, query: PageQuery) -> PageState:
        """Fetch and derive everything for *query*; never raises."""
        ctx = self._context(query)
        try:
            if isinstance(query, PostQuery):
                post = await self._repository.get_post_by_slug(query.slug)
                return Success(data=build_post_detail(post, ctx))

            if isinstance(query, CategoryQuery):
                category, posts = await self._repository.get_category_with_posts(
                    query.slug
                )
                if not posts:
                    raise EmptyResultSet(category)
                return Success(data=build_category_page(category, posts, ctx))

            posts = await self._repository.list_posts()
            if not posts:
                raise EmptyResultSet()
            return Success(data=build_post_list(posts, ctx))

        except EmptyResultSet as exc:
            category = exc.args[0] if exc.args else None
            if category is None:
                return Empty()
            return Empty(
                message_key="ui.no_posts_topic",
                category=build_category_header(category, 0),
                back_url=ctx.blog_url,
            )
        except NotFoundError as exc:
            logger.info("%s not found: %s", exc.kind.capitalize(), exc.slug)
            if exc.kind == "category":
                return NotFound(
                    message_key="ui.topic_not_found",
                    return_url=ctx.blog_url,
                    return_label_key="button.see_all_posts",
                )
            return NotFound(message_key="ui.post_not_found", return_url=ctx.blog_url)
        except TransportError as exc:
            logger.warning("Could not load %r: %s", query, exc)
            return Error(cause=_describe(exc))
        except Exception as exc:
            logger.exception("Unexpected error loading %r", query)
            return Error(cause=_describe(exc))
