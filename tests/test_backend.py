"""Tests for the backend interface and SimpleBackend."""

from i18n_dimensions.backend import Backend, SimpleBackend


def test_simple_backend_satisfies_protocol() -> None:
    assert isinstance(SimpleBackend(), Backend)


def test_locales_come_from_stored_translations() -> None:
    backend = SimpleBackend()
    assert backend.available_locales() == []

    backend.store_translations("en", {"greeting": {"hello": "Hello"}})
    backend.store_translations("de", {"greeting": {"hello": "Hallo"}})
    assert backend.available_locales() == ["en", "de"]


def test_store_translations_merges() -> None:
    backend = SimpleBackend()
    backend.store_translations("en", {"greeting": {"hello": "Hello"}})
    backend.store_translations("en", {"greeting": {"bye": "Bye"}, "title": "Home"})

    assert backend.translations("en") == {"greeting": {"hello": "Hello", "bye": "Bye"}, "title": "Home"}


def test_translations_returns_copy() -> None:
    backend = SimpleBackend()
    backend.store_translations("en", {"title": "Home"})
    backend.translations("en")["title"] = "changed"
    assert backend.translations("en") == {"title": "Home"}


def test_fixed_dimension_lists() -> None:
    backend = SimpleBackend(countries=["us", "ca"], sites=[1, 2], bus=[3], versions=[1])
    assert backend.available_countries() == ["us", "ca"]
    assert backend.available_sites() == [1, 2]
    assert backend.available_bus() == [3]
    assert backend.available_versions() == [1]


def test_reload_discards_translations() -> None:
    backend = SimpleBackend(countries=["us"])
    backend.store_translations("en", {"title": "Home"})
    backend.reload()
    assert backend.available_locales() == []
    assert backend.available_countries() == ["us"]
