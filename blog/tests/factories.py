"""Builders for store rows and models used across tests."""

from blog.models.content import Category, Post


def make_post_row(
    post_id=1,
    slug="hello-world",
    created_at="2024-03-15T12:00:00+00:00",
    title="Hello world",
    content="# Hello\n\nSome **bold** words.",
    category=None,
    **extra,
):
    """Build a raw posts row as the store returns it (category embedded)."""
    row = {
        "id": post_id,
        "slug": slug,
        "created_at": created_at,
        "title": title,
        "content": content,
        "cover_image": None,
        "image_caption": None,
        "category_id": None,
        "categories": category,
    }
    row.update(extra)
    return row


def make_post(**kwargs) -> Post:
    return Post.model_validate(make_post_row(**kwargs))


def make_category(category_id=7, slug="python", icon="Code") -> Category:
    return Category(id=category_id, slug=slug, icon=icon)
