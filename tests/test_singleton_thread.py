"""Thread-safety tests for the `I18nRegistry` singleton."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterator, List

import pytest

from i18n_dimensions import I18nRegistry, get_registry
from i18n_dimensions.config_paths import ENV_SETTINGS_PATH


@pytest.fixture(autouse=True)
def isolated_singleton(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point the settings lookup at an empty directory and reset the singleton."""
    monkeypatch.delenv(ENV_SETTINGS_PATH, raising=False)
    monkeypatch.setattr("i18n_dimensions.config_paths.get_user_config_dir", lambda: tmp_path)
    I18nRegistry.cleanup()
    yield
    I18nRegistry.cleanup()


def test_singleton_thread_safety() -> None:  # noqa: D401
    """Ensure multiple threads receive the exact same registry instance."""
    instance_ids: List[int] = []

    def _get_instance() -> None:  # noqa: WPS430
        instance_ids.append(id(get_registry()))

    threads = [threading.Thread(target=_get_instance) for _ in range(50)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    # All retrieved ids must be identical.
    assert len(set(instance_ids)) == 1, "I18nRegistry is not thread-safe singleton"


def test_cleanup_drops_instance() -> None:
    first = get_registry()
    I18nRegistry.cleanup()
    assert get_registry() is not first
    assert I18nRegistry.get_default() is I18nRegistry.get_instance()


def test_default_instance_reads_settings_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    settings_file = tmp_path / "custom.yml"
    settings_file.write_text(
        "separator: ':'\n"
        "dimensions:\n"
        "  locale:\n"
        "    default: de\n"
        "    available: [en, de]\n"
    )
    monkeypatch.setenv(ENV_SETTINGS_PATH, str(settings_file))

    registry = get_registry()
    assert registry.default_locale == "de"
    assert registry.available_locales == ["en", "de"]
    assert registry.default_separator == ":"


def test_default_instance_ignores_broken_settings(tmp_path: Path) -> None:
    (tmp_path / "dimensions.yml").write_text("dimensions: [unclosed\n")

    registry = get_registry()
    assert registry.default_locale == "en"
    assert registry.default_separator == "."


@pytest.mark.parametrize(
    "content",
    [
        "dimensions:\n  locale:\n    default: jp\n    available: [en, de]\n",
        "dimensions:\n  site:\n    default: 9\n    available: [1, two]\n",
    ],
)
def test_default_instance_ignores_rejected_settings_values(tmp_path: Path, content: str) -> None:
    """Settings that parse but hold rejected values fall back to built-in defaults."""
    (tmp_path / "dimensions.yml").write_text(content)

    registry = get_registry()
    assert registry.default_locale == "en"
    assert registry.default_site == 1
    assert registry.available_locales == []
    assert get_registry() is registry
