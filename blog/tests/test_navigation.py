"""Tests for header navigation links."""

from httpx import ASGITransport, AsyncClient

from blog.routers.navigation import build_navigation


def test_default_locale_links_have_no_prefix(mock_settings):
    nav = build_navigation("/", "pt-BR")
    urls = {link.label_key: link.url for link in nav.links}
    assert urls == {
        "menu.home": "/",
        "menu.about": "/about",
        "menu.blog": "/blog",
        "menu.contact": "/contact",
    }
    assert nav.home_url == "/"


def test_other_locale_links_are_prefixed(mock_settings):
    nav = build_navigation("/", "en")
    assert [link.url for link in nav.links] == ["/en", "/en/about", "/en/blog", "/en/contact"]
    assert nav.home_url == "/en"


def test_blog_link_active_on_post_pages(mock_settings):
    nav = build_navigation("blog/my-slug", "en")
    active = [link.label_key for link in nav.links if link.active]
    assert active == ["menu.blog"]


def test_home_is_never_active(mock_settings):
    nav = build_navigation("/", "en")
    assert not any(link.active for link in nav.links)


def test_alternates_cover_supported_locales(mock_settings):
    nav = build_navigation("blog/topic/python", "en")
    assert nav.alternates == {
        "pt-BR": "/blog/topic/python",
        "en": "/en/blog/topic/python",
        "es": "/es/blog/topic/python",
    }


async def test_navigation_endpoint(mock_settings):
    from blog.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.get(
            "/api/blog/navigation", params={"path": "blog", "locale": "es"}
        )

    assert response.status_code == 200
    data = response.json()
    assert data["locale"] == "es"
    assert data["home_url"] == "/es"
    assert response.headers["Content-Language"] == "es"
