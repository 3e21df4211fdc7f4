"""Tests for settings loading."""

from pathlib import Path

import pytest

from i18n_dimensions.config_paths import ENV_SETTINGS_PATH
from i18n_dimensions.errors import ConfigFileNotFoundError, InvalidConfigFormatError
from i18n_dimensions.settings import DimensionSettings, I18nSettings, load_settings


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Write a complete settings file and return its path."""
    path = tmp_path / "dimensions.yml"
    path.write_text(
        "separator: '/'\n"
        "dimensions:\n"
        "  locale:\n"
        "    default: de\n"
        "    available: [en, de]\n"
        "  site:\n"
        "    available: [1, 2]\n"
        "    enforce: false\n"
    )
    return path


def test_from_file(settings_file: Path) -> None:
    settings = I18nSettings.from_file(str(settings_file))
    assert settings.separator == "/"
    assert settings.dimensions["locale"] == DimensionSettings(default="de", available=["en", "de"])
    assert settings.dimensions["site"] == DimensionSettings(available=[1, 2], enforce=False)


def test_empty_file_gives_empty_settings(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert I18nSettings.from_file(str(path)) == I18nSettings()


def test_missing_file() -> None:
    with pytest.raises(ConfigFileNotFoundError) as exc_info:
        I18nSettings.from_file("/nonexistent/dimensions.yml")
    assert exc_info.value.path == "/nonexistent/dimensions.yml"


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yml"
    path.write_text("dimensions: [unclosed\n")
    with pytest.raises(InvalidConfigFormatError) as exc_info:
        I18nSettings.from_file(str(path))
    assert exc_info.value.path == str(path)


@pytest.mark.parametrize(
    "data, expected_type",
    [
        (["not", "a", "mapping"], "dict"),
        ({"separator": 3}, "str"),
        ({"dimensions": ["locale"]}, "dict"),
        ({"dimensions": {"currency": {}}}, "dict"),
        ({"dimensions": {"locale": "en"}}, "dict"),
        ({"dimensions": {"locale": {"fallback": "en"}}}, "dict"),
        ({"dimensions": {"locale": {"available": "en"}}}, "list"),
        ({"dimensions": {"site": {"enforce": "yes"}}}, "bool"),
    ],
)
def test_invalid_shapes(data: object, expected_type: str) -> None:
    with pytest.raises(InvalidConfigFormatError) as exc_info:
        I18nSettings.from_dict(data)
    assert exc_info.value.expected_type == expected_type


def test_dimension_without_section() -> None:
    settings = I18nSettings.from_dict({"dimensions": {"bu": None}})
    assert settings.dimensions["bu"] == DimensionSettings()


class TestLoadSettings:
    """Tests for the non-raising loader."""

    def test_explicit_path(self, settings_file: Path) -> None:
        result = load_settings(str(settings_file))
        assert result.success
        assert result.path == str(settings_file)
        assert result.settings is not None
        assert result.settings.separator == "/"

    def test_env_var(self, settings_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_SETTINGS_PATH, str(settings_file))
        result = load_settings()
        assert result.success
        assert result.path == str(settings_file)

    def test_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_SETTINGS_PATH, raising=False)
        monkeypatch.setattr("i18n_dimensions.config_paths.get_user_config_dir", lambda: tmp_path)
        result = load_settings()
        assert result.success
        assert result.path is None
        assert result.settings == I18nSettings()

    def test_failure_is_reported(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yml"
        path.write_text("- just\n- a list\n")
        result = load_settings(str(path))
        assert not result.success
        assert result.settings is None
        assert isinstance(result.exception, InvalidConfigFormatError)
        assert "expected dictionary" in (result.error or "")

    def test_missing_explicit_path(self) -> None:
        result = load_settings("/nonexistent/dimensions.yml")
        assert not result.success
        assert isinstance(result.exception, ConfigFileNotFoundError)
