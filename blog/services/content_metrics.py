"""Reading time and plain-text excerpts derived from markdown content."""

import math
import re

from markdown_it import MarkdownIt
from markdown_it.token import Token

WORDS_PER_MINUTE = 200

# Parsed with HTML on so raw tags come back as html_* tokens and can be skipped
_md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])

_TEXT_TOKENS = frozenset({"text", "code_inline"})
_BREAK_TOKENS = frozenset({"softbreak", "hardbreak"})

# Brackets the parser left as literal text, e.g. a link written inside a link
_LEFTOVER_LINK_RE = re.compile(r"\]\([^)\s]*\)?")
# Anything left over that still reads as markup
_CONTROL_CHARS_RE = re.compile(r"[#*`]|~~|\|")
_WHITESPACE_RE = re.compile(r"\s+")


def word_count(content: str) -> int:
    return len(content.split())


def reading_time(content: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimated reading time in whole minutes, never less than one."""
    minutes = math.ceil(word_count(content) / words_per_minute)
    return max(1, minutes)


def minutes_label(minutes: int) -> str:
    return "min" if minutes == 1 else "mins"


def _inline_text(children: list[Token]) -> str:
    parts = []
    for child in children:
        if child.type in _TEXT_TOKENS:
            parts.append(child.content)
        elif child.type in _BREAK_TOKENS:
            parts.append(" ")
        # images, raw HTML and emphasis/link markers carry no prose
    return "".join(parts)


def plain_excerpt(content: str) -> str:
    """Strip markdown syntax from *content*, leaving readable prose.

    Images, raw HTML and fenced or indented code blocks are dropped, links
    and inline code keep their text, and all whitespace (including newlines)
    collapses to single spaces. The full text is returned; truncating it is
    up to the caller.
    """
    blocks = [
        _inline_text(token.children or [])
        for token in _md.parse(content)
        if token.type == "inline"
    ]
    text = " ".join(blocks)
    text = _LEFTOVER_LINK_RE.sub(" ", text)
    text = _CONTROL_CHARS_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
