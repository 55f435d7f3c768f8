"""Post and category data models, as returned by the content store."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

SLUG_PATTERN = r"^[A-Za-z0-9_-]+$"


class CategoryRef(BaseModel):
    """Weak reference from a post to its category (joined slug/icon pair)."""

    model_config = ConfigDict(frozen=True)

    slug: str
    icon: str = ""

    @field_validator("icon", mode="before")
    @classmethod
    def _icon_not_null(cls, value: str | None) -> str:
        return value or ""


class Category(BaseModel):
    """A blog category (topic)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    slug: str
    icon: str = ""

    @field_validator("icon", mode="before")
    @classmethod
    def _icon_not_null(cls, value: str | None) -> str:
        return value or ""

    def as_ref(self) -> CategoryRef:
        return CategoryRef(slug=self.slug, icon=self.icon)


class Post(BaseModel):
    """A published blog post.

    The store embeds the joined category under ``categories``; a dangling
    category reference arrives as ``null`` and is kept as ``None``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int
    slug: str
    created_at: datetime
    title: str
    content: str = ""
    cover_image: str | None = None
    image_caption: str | None = None
    category: CategoryRef | None = Field(default=None, alias="categories")

    @field_validator("created_at")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        """Treat naive timestamps as UTC so ordering never mixes naive/aware."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("content", mode="before")
    @classmethod
    def _content_not_null(cls, value: str | None) -> str:
        return value or ""

    @property
    def caption(self) -> str | None:
        """Image caption, only meaningful when there is a cover image."""
        if self.cover_image and self.image_caption:
            return self.image_caption
        return None

    def resolve_category(self) -> CategoryRef | None:
        """Return the category reference, or None when it is missing or dangling."""
        if self.category is None or not self.category.slug:
            return None
        return self.category
