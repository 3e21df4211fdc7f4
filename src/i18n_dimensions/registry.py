"""Core registry holding the current localization dimensions.

This module provides the I18nRegistry class, which owns the five
classification dimensions (locale, country, site, business unit, version),
the translation backend handle and the pluggable failure handlers.

Typical usage:

    from i18n_dimensions import get_registry  # singleton helper

    registry = get_registry()
    registry.available_locales = ["en", "de"]
    registry.locale = "de"

    # or, for an injected instance with its own settings
    from i18n_dimensions import I18nRegistry, I18nSettings

    registry = I18nRegistry.from_settings(I18nSettings.from_file("dimensions.yml"))

Current values are scoped to the calling thread or asyncio task; every other
piece of state is shared by all users of the same registry instance.
"""

import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional

from .backend import Backend, SimpleBackend
from .dimension import DIMENSION_NAMES, Dimension, normalize_integer, normalize_symbol
from .errors import I18nError, UnknownDimensionError
from .handlers import (
    ExceptionHandler,
    ExceptionHandlerCallable,
    MissingArgumentHandlerCallable,
    MissingInterpolationArgumentHandler,
)
from .logging import LogEvent, log_info, log_warning
from .settings import I18nSettings, load_settings

DEFAULT_SEPARATOR = "."

# name -> (plural label, built-in default, normalizer)
_DIMENSION_SPECS = {
    "locale": ("locales", "en", normalize_symbol),
    "country": ("countries", "us", normalize_symbol),
    "site": ("sites", 1, normalize_integer),
    "bu": ("bus", 1, normalize_integer),
    "version": ("versions", 1, normalize_integer),
}


def _current_property(name: str) -> property:
    def fget(self: "I18nRegistry") -> Any:
        return self._dimensions[name].get_current()

    def fset(self: "I18nRegistry", value: Any) -> None:
        self._dimensions[name].set_current(value)

    return property(fget, fset, doc=f"Current {name} of the calling context.")


def _default_property(name: str) -> property:
    def fget(self: "I18nRegistry") -> Any:
        return self._dimensions[name].get_default()

    def fset(self: "I18nRegistry", value: Any) -> None:
        self._dimensions[name].set_default(value)

    return property(fget, fset, doc=f"Process-wide default {name}.")


def _available_property(name: str) -> property:
    def fget(self: "I18nRegistry") -> List[Any]:
        return self._dimensions[name].get_available()

    def fset(self: "I18nRegistry", values: Any) -> None:
        self._dimensions[name].set_available(values)

    return property(fget, fset, doc=f"Available values for {name}, delegated to the backend when unset.")


def _available_set_property(name: str) -> property:
    def fget(self: "I18nRegistry") -> FrozenSet[Any]:
        return self._dimensions[name].get_available_set()

    return property(fget, doc=f"Cached membership set of available {name} values.")


def _enforce_property(name: str) -> property:
    def fget(self: "I18nRegistry") -> bool:
        return self._dimensions[name].get_enforcement()

    def fset(self: "I18nRegistry", enforce: bool) -> None:
        self._dimensions[name].set_enforcement(enforce)

    return property(fget, fset, doc=f"Whether {name} assignments are validated.")


def _clear_method(name: str) -> Callable[["I18nRegistry"], None]:
    def clear(self: "I18nRegistry") -> None:
        self._dimensions[name].clear_available_set()

    clear.__doc__ = f"Clear the available {name} set so it is rebuilt on next read."
    return clear


class I18nRegistry:
    """Registry for the current locale, country, site, business unit and version."""

    _default_instance: Optional["I18nRegistry"] = None
    _instance_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "I18nRegistry":
        """Get the default registry instance.

        Alias of :py:meth:`get_default`.
        """
        return cls.get_default()

    @classmethod
    def get_default(cls) -> "I18nRegistry":
        """Get the default registry instance, configured from the settings file.

        A settings file that cannot be loaded, or whose values are rejected,
        is logged and ignored; the registry then starts with built-in defaults.

        Returns:
            The default I18nRegistry instance
        """
        with cls._instance_lock:
            if cls._default_instance is None:
                result = load_settings()
                if result.success and result.settings is not None:
                    try:
                        cls._default_instance = cls.from_settings(result.settings)
                    except I18nError as e:
                        log_warning(
                            LogEvent.DIMENSION_REGISTRY,
                            f"Ignoring settings with invalid values: {e}",
                            path=result.path,
                        )
                        cls._default_instance = cls()
                else:
                    log_warning(
                        LogEvent.DIMENSION_REGISTRY,
                        f"Ignoring settings: {result.error}",
                        path=result.path,
                    )
                    cls._default_instance = cls()
            return cls._default_instance

    @staticmethod
    def cleanup() -> None:
        """Drop the default registry instance."""
        with I18nRegistry._instance_lock:
            I18nRegistry._default_instance = None

    @classmethod
    def from_settings(cls, settings: I18nSettings, backend: Optional[Backend] = None) -> "I18nRegistry":
        """Create a registry and apply ``settings`` to it."""
        registry = cls(backend=backend)
        registry.apply_settings(settings)
        return registry

    def __init__(
        self,
        backend: Optional[Backend] = None,
        exception_handler: Optional[ExceptionHandlerCallable] = None,
        missing_interpolation_argument_handler: Optional[MissingArgumentHandlerCallable] = None,
        default_separator: Optional[str] = None,
    ):
        """Initialize a new registry instance.

        Args:
            backend: Translation backend. If None, a SimpleBackend is created
                     on first use.
            exception_handler: Callable receiving validation failures. If None,
                               failures are raised.
            missing_interpolation_argument_handler: Callable receiving
                (missing key, provided values, template string).
            default_separator: Scope separator for translation keys.
        """
        self._backend = backend
        self._exception_handler = exception_handler
        self._missing_interpolation_argument_handler = missing_interpolation_argument_handler
        self._default_separator = default_separator
        self._load_path: Optional[List[Any]] = None
        self._lock = threading.RLock()

        dimensions: Dict[str, Dimension] = {}
        for name in DIMENSION_NAMES:
            plural, default_value, normalizer = _DIMENSION_SPECS[name]
            dimensions[name] = Dimension(
                name=name,
                plural=plural,
                default_value=default_value,
                normalizer=normalizer,
                source=self._backend_source(plural),
                on_error=self._handle_exception,
            )
        self._dimensions = dimensions

    def __repr__(self) -> str:
        current = ", ".join(f"{name}={dim.get_current()!r}" for name, dim in self._dimensions.items())
        return f"I18nRegistry({current})"

    # Dimensions

    @property
    def dimensions(self) -> Mapping[str, Dimension]:
        """Read-only view of the dimensions by name."""
        return MappingProxyType(self._dimensions)

    def dimension(self, name: str) -> Dimension:
        """Get a dimension by name.

        Raises:
            UnknownDimensionError: If ``name`` is not a registry dimension
        """
        try:
            return self._dimensions[name]
        except KeyError:
            raise UnknownDimensionError(
                f"Unknown dimension '{name}'. Known dimensions: {', '.join(DIMENSION_NAMES)}",
                name=name,
            ) from None

    locale = _current_property("locale")
    default_locale = _default_property("locale")
    available_locales = _available_property("locale")
    available_locales_set = _available_set_property("locale")
    enforce_available_locales = _enforce_property("locale")
    clear_available_locales_set = _clear_method("locale")

    country = _current_property("country")
    default_country = _default_property("country")
    available_countries = _available_property("country")
    available_countries_set = _available_set_property("country")
    enforce_available_countries = _enforce_property("country")
    clear_available_countries_set = _clear_method("country")

    site = _current_property("site")
    default_site = _default_property("site")
    available_sites = _available_property("site")
    available_sites_set = _available_set_property("site")
    enforce_available_sites = _enforce_property("site")
    clear_available_sites_set = _clear_method("site")

    bu = _current_property("bu")
    default_bu = _default_property("bu")
    available_bus = _available_property("bu")
    available_bus_set = _available_set_property("bu")
    enforce_available_bus = _enforce_property("bu")
    clear_available_bus_set = _clear_method("bu")

    version = _current_property("version")
    default_version = _default_property("version")
    available_versions = _available_property("version")
    available_versions_set = _available_set_property("version")
    enforce_available_versions = _enforce_property("version")
    clear_available_versions_set = _clear_method("version")

    # Collaborators

    @property
    def backend(self) -> Backend:
        """Translation backend; a SimpleBackend unless one was set."""
        with self._lock:
            if self._backend is None:
                self._backend = SimpleBackend()
            return self._backend

    @backend.setter
    def backend(self, backend: Optional[Backend]) -> None:
        with self._lock:
            self._backend = backend
        # Backend-delegated sets were built from the previous backend.
        self.clear_available_sets()

    @property
    def exception_handler(self) -> ExceptionHandlerCallable:
        with self._lock:
            if self._exception_handler is None:
                self._exception_handler = ExceptionHandler()
            return self._exception_handler

    @exception_handler.setter
    def exception_handler(self, handler: Optional[ExceptionHandlerCallable]) -> None:
        self._exception_handler = handler

    @property
    def missing_interpolation_argument_handler(self) -> MissingArgumentHandlerCallable:
        """Handler called as ``handler(missing_key, values, string)``.

        Raises MissingInterpolationArgument by default. Replace it to return
        a placeholder instead, e.g. ``lambda key, values, string: f"{key} is missing"``.
        """
        with self._lock:
            if self._missing_interpolation_argument_handler is None:
                self._missing_interpolation_argument_handler = MissingInterpolationArgumentHandler()
            return self._missing_interpolation_argument_handler

    @missing_interpolation_argument_handler.setter
    def missing_interpolation_argument_handler(self, handler: Optional[MissingArgumentHandlerCallable]) -> None:
        self._missing_interpolation_argument_handler = handler

    @property
    def default_separator(self) -> str:
        """Scope separator used by the translation layer. Defaults to '.'."""
        with self._lock:
            if self._default_separator is None:
                self._default_separator = DEFAULT_SEPARATOR
            return self._default_separator

    @default_separator.setter
    def default_separator(self, separator: Optional[str]) -> None:
        self._default_separator = separator

    @property
    def load_path(self) -> List[Any]:
        """Translation sources registered for the backend (mutable list)."""
        with self._lock:
            if self._load_path is None:
                self._load_path = []
            return self._load_path

    @load_path.setter
    def load_path(self, load_path: Optional[List[Any]]) -> None:
        self._load_path = load_path

    # Lifecycle

    def clear_available_sets(self) -> None:
        """Clear the available-set cache of every dimension."""
        for dimension in self._dimensions.values():
            dimension.clear_available_set()

    def reload(self) -> None:
        """Reload the backend and drop every cached available set.

        Calls the backend's ``reload()`` when it has one. Must be used after
        anything changes what the backend considers available.
        """
        backend = self.backend
        backend_reload = getattr(backend, "reload", None)
        if callable(backend_reload):
            backend_reload()
        self.clear_available_sets()
        log_info(
            LogEvent.DIMENSION_REGISTRY,
            "Registry reloaded",
            backend=type(backend).__name__,
        )

    def reset(self) -> None:
        """Return every process-wide setting to its initial state.

        The backend and handlers are dropped and recreated lazily. Current
        values held by running contexts are left alone.
        """
        with self._lock:
            self._backend = None
            self._exception_handler = None
            self._missing_interpolation_argument_handler = None
            self._default_separator = None
            self._load_path = None
        for dimension in self._dimensions.values():
            dimension.reset()

    def apply_settings(self, settings: I18nSettings) -> None:
        """Apply loaded settings to this registry.

        Available lists and enforcement flags are applied before defaults, so
        defaults are validated against the configured lists.

        Raises:
            InvalidValue: If a configured default is not available
        """
        if settings.separator is not None:
            self.default_separator = settings.separator
        for name, section in settings.dimensions.items():
            dimension = self.dimension(name)
            if section.available is not None:
                dimension.set_available(section.available)
            if section.enforce is not None:
                dimension.set_enforcement(section.enforce)
            if section.default is not None:
                dimension.set_default(section.default)
        log_info(
            LogEvent.DIMENSION_REGISTRY,
            "Applied settings",
            dimensions=sorted(settings.dimensions),
        )

    # Internals

    def _backend_source(self, plural: str) -> Callable[[], Any]:
        accessor = f"available_{plural}"

        def source() -> Any:
            return getattr(self.backend, accessor)()

        return source

    def _handle_exception(self, error: I18nError) -> Any:
        return self.exception_handler(error)


def get_registry() -> I18nRegistry:
    """Get the registry singleton instance.

    This is a convenience function for getting the registry instance.

    Returns:
        I18nRegistry: The singleton registry instance
    """
    return I18nRegistry.get_instance()
