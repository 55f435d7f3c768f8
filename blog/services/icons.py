"""Category icon lookup — symbolic icon names to glyph identifiers."""

# Authors pick icon names in the CMS as either the component name ("BookOpen")
# or its kebab form ("book-open"); both normalise to the same key.
ICON_GLYPHS: dict[str, str] = {
    "book": "book",
    "bookopen": "book-open",
    "brain": "brain",
    "briefcase": "briefcase",
    "camera": "camera",
    "code": "code",
    "coffee": "coffee",
    "cpu": "cpu",
    "database": "database",
    "globe": "globe",
    "heart": "heart",
    "lightbulb": "lightbulb",
    "music": "music",
    "newspaper": "newspaper",
    "palette": "palette",
    "pencil": "pencil",
    "plane": "plane",
    "rocket": "rocket",
    "server": "server",
    "shield": "shield",
    "terminal": "terminal",
    "wrench": "wrench",
}

FALLBACK_GLYPH = "folder"


def _normalise(name: str) -> str:
    return name.replace("-", "").replace("_", "").replace(" ", "").lower()


def resolve_icon(name: str | None) -> str:
    """Return the glyph for *name*, or the fallback glyph when unknown."""
    if not name:
        return FALLBACK_GLYPH
    return ICON_GLYPHS.get(_normalise(name), FALLBACK_GLYPH)
