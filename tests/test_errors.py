"""Tests for error classes."""

from i18n_dimensions.errors import (
    ConfigFileNotFoundError,
    ConfigurationError,
    I18nError,
    InvalidConfigFormatError,
    InvalidValue,
    MissingInterpolationArgument,
    UnknownDimensionError,
)


class TestErrorClasses:
    """Tests for all error classes."""

    def test_i18n_error(self) -> None:
        error = I18nError("Base error message")
        assert str(error) == "Base error message"
        assert error.message == "Base error message"

    def test_invalid_value(self) -> None:
        error = InvalidValue("'jp' is not a valid locale", dimension="locale", value="jp", available=("en", "de"))
        assert str(error) == "'jp' is not a valid locale"
        assert error.dimension == "locale"
        assert error.value == "jp"
        assert error.available == ["en", "de"]
        assert isinstance(error, I18nError)

        assert InvalidValue("bad", dimension="site", value=9).available is None

    def test_missing_interpolation_argument(self) -> None:
        values = {"count": 2}
        error = MissingInterpolationArgument("name", values, "Hello %{name}")
        assert error.key == "name"
        assert error.values == {"count": 2}
        assert error.values is not values
        assert error.string == "Hello %{name}"
        assert "'name'" in str(error)

    def test_unknown_dimension(self) -> None:
        error = UnknownDimensionError("Unknown dimension 'currency'", name="currency")
        assert str(error) == "Unknown dimension 'currency'"
        assert isinstance(error, KeyError)
        assert isinstance(error, I18nError)

    def test_configuration_errors(self) -> None:
        error = InvalidConfigFormatError("bad", path="/x.yml", expected_type="list")
        assert error.path == "/x.yml"
        assert error.expected_type == "list"
        assert isinstance(error, ConfigurationError)
        assert isinstance(ConfigFileNotFoundError("missing", path="/y.yml"), ConfigurationError)
