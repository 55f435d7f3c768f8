"""Markdown to HTML rendering for post bodies."""

from markdown_it import MarkdownIt

# GitHub-flavoured tables and strikethrough; raw HTML from authors is escaped
_md = MarkdownIt("commonmark", {"html": False, "linkify": False}).enable(
    ["table", "strikethrough"]
)


def render_markdown(content: str) -> str:
    return _md.render(content)
