"""Turn fetched posts and categories into the view models the pages render."""

from dataclasses import dataclass

from blog.models.content import Category, CategoryRef, Post
from blog.models.page import (
    Breadcrumbs,
    CategoryBadge,
    CategoryHeader,
    CategoryPage,
    PostCard,
    PostDetail,
    PostList,
)
from blog.services.content_metrics import (
    WORDS_PER_MINUTE,
    minutes_label,
    plain_excerpt,
    reading_time,
)
from blog.services.icons import resolve_icon
from blog.services.localization import DEFAULT_LOCALE, format_date, localized_path
from blog.services.rendering import render_markdown

DESCRIPTION_LENGTH = 100


@dataclass(frozen=True)
class ViewContext:
    """Per-request inputs for building links and labels."""

    locale: str
    default_locale: str = DEFAULT_LOCALE
    words_per_minute: int = WORDS_PER_MINUTE

    def path(self, canonical_path: str) -> str:
        return localized_path(canonical_path, self.locale, self.default_locale)

    @property
    def blog_url(self) -> str:
        return self.path("blog")


def category_name_key(slug: str) -> str:
    return f"categories.{slug}"


def build_category_badge(ref: CategoryRef | None, ctx: ViewContext) -> CategoryBadge | None:
    if ref is None:
        return None
    return CategoryBadge(
        slug=ref.slug,
        name_key=category_name_key(ref.slug),
        icon=resolve_icon(ref.icon),
        url=ctx.path(f"blog/topic/{ref.slug}"),
    )


def _card_fields(post: Post, ctx: ViewContext) -> dict:
    minutes = reading_time(post.content, ctx.words_per_minute)
    return {
        "slug": post.slug,
        "title": post.title,
        "url": ctx.path(f"blog/{post.slug}"),
        "cover_image": post.cover_image,
        "category": build_category_badge(post.resolve_category(), ctx),
        "date": format_date(post.created_at, ctx.locale, ctx.default_locale),
        "reading_minutes": minutes,
        "minutes_label": minutes_label(minutes),
        "excerpt": plain_excerpt(post.content),
    }


def build_post_card(post: Post, ctx: ViewContext) -> PostCard:
    return PostCard(**_card_fields(post, ctx))


def build_post_list(posts: list[Post], ctx: ViewContext) -> PostList:
    return PostList(posts=[build_post_card(p, ctx) for p in posts])


def build_post_detail(post: Post, ctx: ViewContext) -> PostDetail:
    """Full single-post view: card fields plus body HTML and breadcrumbs."""
    fields = _card_fields(post, ctx)
    badge: CategoryBadge | None = fields["category"]
    breadcrumbs = Breadcrumbs(
        blog_url=ctx.blog_url,
        category_url=badge.url if badge else "#",
        category_name_key=badge.name_key if badge else None,
    )
    return PostDetail(
        **fields,
        caption=post.caption,
        content_html=render_markdown(post.content),
        description=post.content[:DESCRIPTION_LENGTH],
        breadcrumbs=breadcrumbs,
    )


def build_category_header(category: Category, post_count: int) -> CategoryHeader:
    return CategoryHeader(
        slug=category.slug,
        name_key=category_name_key(category.slug),
        icon=resolve_icon(category.icon),
        post_count=post_count,
        count_label="post" if post_count == 1 else "posts",
    )


def build_category_page(
    category: Category, posts: list[Post], ctx: ViewContext
) -> CategoryPage:
    return CategoryPage(
        category=build_category_header(category, len(posts)),
        back_url=ctx.blog_url,
        posts=[build_post_card(p, ctx) for p in posts],
    )
