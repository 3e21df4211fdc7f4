"""Settings file support for the dimension registry.

A settings file is YAML of the form::

    separator: "."
    dimensions:
      locale:
        default: en
        available: [en, de, fr]
        enforce: true
      site:
        available: [1, 2]

Every key is optional. Dimensions that are not mentioned keep their
built-in defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .config_paths import get_settings_path
from .config_result import ConfigResult
from .dimension import DIMENSION_NAMES
from .errors import ConfigFileNotFoundError, ConfigurationError, InvalidConfigFormatError
from .logging import LogEvent, log_debug, log_error, log_info


@dataclass
class DimensionSettings:
    """Configured state of a single dimension."""

    default: Any = None
    available: Optional[List[Any]] = None
    enforce: Optional[bool] = None

    @classmethod
    def from_dict(cls, name: str, data: Any, path: Optional[str] = None) -> "DimensionSettings":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise InvalidConfigFormatError(
                f"Settings for dimension '{name}' must be a mapping, got {type(data).__name__}",
                path=path,
            )
        unknown = set(data) - {"default", "available", "enforce"}
        if unknown:
            raise InvalidConfigFormatError(
                f"Unknown keys for dimension '{name}': {', '.join(sorted(map(str, unknown)))}",
                path=path,
            )

        available = data.get("available")
        if available is not None and not isinstance(available, list):
            raise InvalidConfigFormatError(
                f"'available' for dimension '{name}' must be a list",
                path=path,
                expected_type="list",
            )
        enforce = data.get("enforce")
        if enforce is not None and not isinstance(enforce, bool):
            raise InvalidConfigFormatError(
                f"'enforce' for dimension '{name}' must be a boolean",
                path=path,
                expected_type="bool",
            )
        return cls(default=data.get("default"), available=available, enforce=enforce)


@dataclass
class I18nSettings:
    """Settings applied to a registry at startup or on reconfiguration."""

    separator: Optional[str] = None
    dimensions: Dict[str, DimensionSettings] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any, path: Optional[str] = None) -> "I18nSettings":
        """Build settings from parsed YAML data.

        Args:
            data: Parsed document (``None`` for an empty file)
            path: Source path, used in error messages

        Raises:
            InvalidConfigFormatError: If the document does not have the expected shape
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise InvalidConfigFormatError(
                f"Invalid settings format: expected dictionary, got {type(data).__name__}",
                path=path,
            )

        separator = data.get("separator")
        if separator is not None and not isinstance(separator, str):
            raise InvalidConfigFormatError("'separator' must be a string", path=path, expected_type="str")

        raw_dimensions = data.get("dimensions") or {}
        if not isinstance(raw_dimensions, dict):
            raise InvalidConfigFormatError("'dimensions' must be a mapping", path=path)

        dimensions: Dict[str, DimensionSettings] = {}
        for name, section in raw_dimensions.items():
            if name not in DIMENSION_NAMES:
                raise InvalidConfigFormatError(
                    f"Unknown dimension '{name}'. Known dimensions: {', '.join(DIMENSION_NAMES)}",
                    path=path,
                )
            dimensions[name] = DimensionSettings.from_dict(name, section, path=path)
        return cls(separator=separator, dimensions=dimensions)

    @classmethod
    def from_file(cls, path: str) -> "I18nSettings":
        """Load settings from a YAML file.

        Raises:
            ConfigFileNotFoundError: If the file does not exist
            InvalidConfigFormatError: If the file is not valid settings YAML
        """
        settings_file = Path(path)
        if not settings_file.is_file():
            raise ConfigFileNotFoundError(f"Settings file not found: {path}", path=str(path))
        try:
            data = yaml.safe_load(settings_file.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise InvalidConfigFormatError(f"YAML parsing error in {path}: {e}", path=str(path)) from e
        return cls.from_dict(data, path=str(path))


def load_settings(path: Optional[str] = None) -> ConfigResult:
    """Load settings without raising.

    Args:
        path: Explicit settings file. If None, the XDG lookup is used and a
              missing file yields empty settings.

    Returns:
        ConfigResult: Result of the settings loading operation
    """
    resolved = path or get_settings_path()
    if resolved is None:
        log_debug(LogEvent.SETTINGS, "No settings file found, using built-in defaults")
        return ConfigResult(success=True, settings=I18nSettings())

    try:
        settings = I18nSettings.from_file(resolved)
    except ConfigurationError as e:
        log_error(LogEvent.SETTINGS, e.message, path=resolved)
        return ConfigResult(success=False, error=e.message, exception=e, path=resolved)
    except OSError as e:
        error_msg = f"Error reading settings file {resolved}: {e}"
        log_error(LogEvent.SETTINGS, error_msg, path=resolved)
        return ConfigResult(success=False, error=error_msg, exception=e, path=resolved)

    log_info(LogEvent.SETTINGS, f"Loaded settings from {resolved}", path=resolved)
    return ConfigResult(success=True, settings=settings, path=resolved)
