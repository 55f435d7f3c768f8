"""Header navigation — localized menu links and language alternates."""

from fastapi import APIRouter, Depends, Query

from blog.config import get_settings
from blog.models.page import Navigation, NavLink
from blog.routers.blog import resolve_locale
from blog.services.localization import localized_path

router = APIRouter(prefix="/blog", tags=["navigation"])

# (translation key, canonical path)
NAV_LINKS: list[tuple[str, str]] = [
    ("menu.home", "/"),
    ("menu.about", "/about"),
    ("menu.blog", "blog"),
    ("menu.contact", "/contact"),
]


def _is_active(link_path: str, current_path: str) -> bool:
    link = link_path.strip("/")
    current = current_path.strip("/")
    # Home is never highlighted
    if not link:
        return False
    return current == link or current.startswith(f"{link}/")


def build_navigation(current_path: str, locale: str) -> Navigation:
    """Menu links for *locale*, plus the current page in every supported locale."""
    settings = get_settings()
    default = settings.default_locale
    links = [
        NavLink(
            label_key=label,
            url=localized_path(path, locale, default),
            active=_is_active(path, current_path),
        )
        for label, path in NAV_LINKS
    ]
    alternates = {
        alt: localized_path(current_path, alt, default)
        for alt in settings.supported_locales
    }
    return Navigation(
        locale=locale,
        home_url=localized_path("/", locale, default),
        links=links,
        alternates=alternates,
    )


@router.get("/navigation", response_model=Navigation)
async def get_navigation(
    path: str = Query(default="/", max_length=300),
    locale: str = Depends(resolve_locale),
):
    """Navigation for the page at canonical *path*."""
    return build_navigation(path, locale)
