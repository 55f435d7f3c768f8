"""Page view models — the state handed to the rendering layer."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class CategoryBadge(BaseModel):
    """Category chip shown on a post card or in breadcrumbs."""

    slug: str
    name_key: str
    icon: str
    url: str


class PostCard(BaseModel):
    """Post summary for the list and category views."""

    slug: str
    title: str
    url: str
    cover_image: str | None = None
    category: CategoryBadge | None = None
    date: str
    reading_minutes: int
    minutes_label: str
    excerpt: str


class Breadcrumbs(BaseModel):
    blog_url: str
    category_url: str = "#"
    category_name_key: str | None = None


class PostDetail(PostCard):
    """Full post for the single-post view."""

    kind: Literal["post"] = "post"
    caption: str | None = None
    content_html: str
    description: str
    breadcrumbs: Breadcrumbs


class CategoryHeader(BaseModel):
    slug: str
    name_key: str
    icon: str
    post_count: int
    count_label: str


class PostList(BaseModel):
    kind: Literal["post_list"] = "post_list"
    title_key: str = "title.blog"
    posts: list[PostCard]


class CategoryPage(BaseModel):
    kind: Literal["category"] = "category"
    category: CategoryHeader
    back_url: str
    posts: list[PostCard]


PageData = Annotated[
    Union[PostList, CategoryPage, PostDetail], Field(discriminator="kind")
]


# Lifecycle states, discriminated on ``status``


class Idle(BaseModel):
    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    status: Literal["loading"] = "loading"
    message_key: str = "ui.loading"


class Success(BaseModel):
    status: Literal["success"] = "success"
    data: PageData


class Empty(BaseModel):
    status: Literal["empty"] = "empty"
    message_key: str = "ui.no_posts_yet"
    # Category views still show their header when the topic has no posts
    category: CategoryHeader | None = None
    back_url: str | None = None


class NotFound(BaseModel):
    status: Literal["not_found"] = "not_found"
    message_key: str
    return_url: str
    return_label_key: str = "button.return"


class Error(BaseModel):
    status: Literal["error"] = "error"
    message_key: str = "ui.load_failed"
    # Kept for logs and callers, never serialized to clients
    cause: str | None = Field(default=None, exclude=True)


PageState = Annotated[
    Union[Idle, Loading, Success, Empty, NotFound, Error],
    Field(discriminator="status"),
]

TERMINAL_STATUSES = frozenset({"success", "empty", "not_found", "error"})


class NavLink(BaseModel):
    label_key: str
    url: str
    active: bool = False


class Navigation(BaseModel):
    locale: str
    home_url: str
    links: list[NavLink]
    alternates: dict[str, str]
