"""Registry for the current localization dimensions.

This package holds, per execution context, the current locale, country,
site, business unit and version, together with their process-wide defaults,
available values and enforcement switches. Translation storage and lookup
are delegated to a pluggable backend.
"""

# Version of the package
try:
    from importlib.metadata import version as _version

    __version__ = _version("i18n-dimensions")
except ImportError:
    raise ImportError(
        "Failed to determine package version. This package requires Python 3.8+ "
        "where importlib.metadata is available, or must be installed as a package."
    )

# Import main components for easier access
from .backend import Backend, SimpleBackend
from .dimension import DIMENSION_NAMES, Dimension, normalize_integer, normalize_symbol
from .errors import (
    ConfigFileNotFoundError,
    ConfigurationError,
    I18nError,
    InvalidConfigFormatError,
    InvalidValue,
    MissingInterpolationArgument,
    UnknownDimensionError,
)
from .handlers import ExceptionHandler, MissingInterpolationArgumentHandler
from .registry import I18nRegistry, get_registry
from .settings import DimensionSettings, I18nSettings, load_settings

# Define public API
__all__ = [
    # Core registry
    "I18nRegistry",
    "get_registry",
    "Dimension",
    "DIMENSION_NAMES",
    "normalize_symbol",
    "normalize_integer",
    # Collaborators
    "Backend",
    "SimpleBackend",
    "ExceptionHandler",
    "MissingInterpolationArgumentHandler",
    # Settings
    "I18nSettings",
    "DimensionSettings",
    "load_settings",
    # Errors
    "I18nError",
    "InvalidValue",
    "MissingInterpolationArgument",
    "UnknownDimensionError",
    "ConfigurationError",
    "ConfigFileNotFoundError",
    "InvalidConfigFormatError",
]
