"""Error types for the i18n dimension registry.

This module defines the error types raised by the registry when a value
fails validation, when configuration cannot be loaded, and the typed error
used by the default missing-interpolation-argument handler.
"""

from typing import Any, Iterable, List, Mapping, Optional


class I18nError(Exception):
    """Base class for all registry-related errors.

    This is the parent class for all registry-specific exceptions.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidValue(I18nError):
    """Raised when a value is not available for a dimension.

    Only raised while enforcement is enabled for the dimension, or when the
    value cannot be normalised at all.

    Examples:
        >>> try:
        ...     registry.dimension("locale").set_current("jp")
        ... except InvalidValue as e:
        ...     print(f"{e.value!r} is not a valid {e.dimension}")
    """

    def __init__(
        self,
        message: str,
        dimension: str,
        value: Any,
        available: Optional[Iterable[Any]] = None,
    ) -> None:
        """Initialize invalid value error.

        Args:
            message: Error message
            dimension: Name of the dimension that rejected the value
            value: The rejected value, as given by the caller
            available: Values that would have been accepted (optional)
        """
        super().__init__(message)
        self.dimension = dimension
        self.value = value
        self.available: Optional[List[Any]] = list(available) if available is not None else None

    def __str__(self) -> str:
        return self.message


class MissingInterpolationArgument(I18nError):
    """Raised when a translation references an argument that was not provided.

    Examples:
        >>> handler = registry.missing_interpolation_argument_handler
        >>> handler("name", {"count": 1}, "Hello %{name}")
        Traceback (most recent call last):
        ...
        MissingInterpolationArgument: missing interpolation argument 'name' ...
    """

    def __init__(self, key: str, values: Mapping[str, Any], string: str) -> None:
        """Initialize missing interpolation argument error.

        Args:
            key: The missing argument name
            values: The arguments that were provided
            string: The template string being interpolated
        """
        super().__init__(f"missing interpolation argument {key!r} in {string!r} ({dict(values)!r} given)")
        self.key = key
        self.values = dict(values)
        self.string = string


class UnknownDimensionError(I18nError, KeyError):
    """Raised when a dimension name is not one of the registry's dimensions."""

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name

    def __str__(self) -> str:
        return self.message


class ConfigurationError(I18nError):
    """Base class for configuration-related errors.

    This is raised for errors related to settings loading, parsing,
    or validation.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            path: Optional path to the settings file that caused the error
        """
        super().__init__(message)
        self.path = path


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when a settings file is not found.

    Examples:
        >>> try:
        ...     I18nSettings.from_file("missing.yml")
        ... except ConfigFileNotFoundError as e:
        ...     print(f"Settings file not found: {e.path}")
    """

    pass


class InvalidConfigFormatError(ConfigurationError):
    """Raised when a settings file has an invalid format."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected_type: str = "dict",
    ) -> None:
        """Initialize invalid format error.

        Args:
            message: Error message
            path: Optional path to the settings file
            expected_type: Expected type of the offending section
        """
        super().__init__(message, path)
        self.expected_type = expected_type
