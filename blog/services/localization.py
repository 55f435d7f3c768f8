"""Locale-aware link building and date formatting.

Locale is always passed in explicitly; nothing here reads or changes
process-wide locale state.
"""

import logging
from datetime import datetime, timezone

from babel import Locale, UnknownLocaleError
from babel.dates import format_date as babel_format_date

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "pt-BR"


def localized_path(
    canonical_path: str, locale: str, default_locale: str = DEFAULT_LOCALE
) -> str:
    """Build the locale-prefixed URL path for a canonical route.

    ``"blog/my-slug"`` becomes ``/blog/my-slug`` for the default locale and
    ``/en/blog/my-slug`` for ``en``. The root path maps to ``/`` or
    ``/{locale}``. Unknown locale codes are used verbatim as the prefix.
    """
    path = canonical_path.strip("/")
    if locale == default_locale:
        return f"/{path}"
    if not path:
        return f"/{locale}"
    return f"/{locale}/{path}"


def _parse_locale(code: str) -> Locale | None:
    # Babel wants "pt_BR"; the site uses "pt-BR"
    try:
        return Locale.parse(code.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        return None


def _to_utc(timestamp: datetime | str) -> datetime:
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def format_date(
    timestamp: datetime | str,
    locale: str,
    fallback_locale: str = DEFAULT_LOCALE,
) -> str:
    """Format a timestamp as a long, human-readable date in *locale*.

    Unsupported locale codes fall back to *fallback_locale*.
    """
    parsed = _parse_locale(locale)
    if parsed is None:
        logger.debug("Unknown locale %r, formatting date as %s", locale, fallback_locale)
        parsed = _parse_locale(fallback_locale) or Locale("en")
    return babel_format_date(_to_utc(timestamp).date(), format="long", locale=parsed)
