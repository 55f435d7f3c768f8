"""Shared fixtures for blog tests."""

import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from blog.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import blog.services.http_client as http_mod

    http_mod._client = None

    # 3. Health check cache
    import blog.main as main_mod

    main_mod._health_cache = None

    # 4. Repository overrides installed by endpoint tests
    main_mod.app.dependency_overrides.clear()


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from blog.config import Settings, get_settings

    test_settings = Settings(
        content_store_url="https://store.test",
        content_store_key="test-anon-key",
        default_locale="pt-BR",
        supported_locales=["pt-BR", "en", "es"],
        words_per_minute=200,
    )

    get_settings.cache_clear()
    monkeypatch.setattr("blog.config.get_settings", lambda: test_settings)

    # Patch get_settings in all modules that import it directly
    # (from blog.config import get_settings creates a local binding that
    # the blog.config monkeypatch above does not affect)
    for mod_path in [
        "blog.services.http_client",
        "blog.routers.blog",
        "blog.routers.navigation",
        "blog.main",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings

