"""Tests for localized paths and date formatting — pure logic, no mocks needed."""

from datetime import datetime, timedelta, timezone

import pytest

from blog.services.localization import DEFAULT_LOCALE, format_date, localized_path

CANONICAL_PATHS = ["/", "", "blog", "/about", "blog/my-slug", "blog/topic/python"]


class TestLocalizedPath:
    """Tests for localized_path()."""

    @pytest.mark.parametrize("path", CANONICAL_PATHS)
    def test_default_locale_has_no_prefix(self, path):
        result = localized_path(path, DEFAULT_LOCALE)
        assert result.startswith("/")
        assert not result.startswith(f"/{DEFAULT_LOCALE}")

    @pytest.mark.parametrize("path", CANONICAL_PATHS)
    @pytest.mark.parametrize("locale", ["en", "es", "en-US", "fr"])
    def test_other_locales_are_prefixed(self, path, locale):
        assert localized_path(path, locale).startswith(f"/{locale}")

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/", "/en"),
            ("blog", "/en/blog"),
            ("blog/my-slug", "/en/blog/my-slug"),
            ("blog/topic/python", "/en/blog/topic/python"),
            ("/about", "/en/about"),
        ],
    )
    def test_routing_table(self, path, expected):
        assert localized_path(path, "en") == expected

    def test_default_locale_routes(self):
        assert localized_path("/", "pt-BR") == "/"
        assert localized_path("blog", "pt-BR") == "/blog"
        assert localized_path("blog/my-slug", "pt-BR") == "/blog/my-slug"

    def test_explicit_default_locale(self):
        assert localized_path("blog", "en", default_locale="en") == "/blog"
        assert localized_path("blog", "pt-BR", default_locale="en") == "/pt-BR/blog"

    def test_unknown_locale_passes_through(self):
        assert localized_path("blog", "xx-Klingon") == "/xx-Klingon/blog"

    def test_not_idempotent(self):
        once = localized_path("blog", "en")
        assert localized_path(once, "en") == "/en/en/blog"


class TestFormatDate:
    """Tests for format_date()."""

    def test_pt_br_and_en_us_differ(self):
        ts = "2024-03-15T00:00:00Z"
        pt = format_date(ts, "pt-BR")
        en = format_date(ts, "en-US")
        assert pt != en
        assert "março" in pt
        assert "2024" in pt and "15" in pt
        assert "March" in en
        assert "2024" in en and "15" in en

    def test_deterministic(self):
        ts = datetime(2024, 3, 15, tzinfo=timezone.utc)
        assert format_date(ts, "en-US") == format_date(ts, "en-US")

    def test_string_and_datetime_agree(self):
        ts = datetime(2024, 3, 15, tzinfo=timezone.utc)
        assert format_date(ts, "en") == format_date("2024-03-15T00:00:00Z", "en")

    def test_naive_datetime_treated_as_utc(self):
        naive = datetime(2024, 3, 15, 23, 30)
        assert format_date(naive, "en-US") == "March 15, 2024"

    def test_converts_to_utc_before_taking_date(self):
        # 22:00 on the 14th in UTC-3 is already the 15th in UTC
        brt = timezone(timedelta(hours=-3))
        ts = datetime(2024, 3, 14, 22, 0, tzinfo=brt)
        assert format_date(ts, "en-US") == "March 15, 2024"

    @pytest.mark.parametrize("locale", ["xx-YY", "not a locale", "", "zz"])
    def test_unknown_locale_falls_back_to_default(self, locale):
        ts = "2024-03-15T00:00:00Z"
        assert format_date(ts, locale) == format_date(ts, DEFAULT_LOCALE)

    def test_custom_fallback_locale(self):
        ts = "2024-03-15T00:00:00Z"
        assert format_date(ts, "xx-YY", fallback_locale="en-US") == "March 15, 2024"
