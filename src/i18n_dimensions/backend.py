"""Backend collaborator interface and the default in-memory backend.

The registry only asks a backend which values it considers available for
each dimension. Everything else a backend does (loading translation files,
looking up and interpolating strings) stays behind this interface.
"""

import copy
import threading
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from .logging import LogEvent, log_debug, log_info


@runtime_checkable
class Backend(Protocol):
    """Accessors the registry needs from a translation backend."""

    def available_locales(self) -> Sequence[Any]: ...

    def available_countries(self) -> Sequence[Any]: ...

    def available_sites(self) -> Sequence[Any]: ...

    def available_bus(self) -> Sequence[Any]: ...

    def available_versions(self) -> Sequence[Any]: ...


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = copy.deepcopy(value)


class SimpleBackend:
    """In-memory backend used when no other backend was configured.

    Locales are reported from the translations stored so far; the remaining
    dimensions are fixed lists given at construction time.
    """

    def __init__(
        self,
        countries: Optional[Iterable[Any]] = None,
        sites: Optional[Iterable[Any]] = None,
        bus: Optional[Iterable[Any]] = None,
        versions: Optional[Iterable[Any]] = None,
    ):
        self._translations: Dict[str, Dict[str, Any]] = {}
        self._countries: List[Any] = list(countries or [])
        self._sites: List[Any] = list(sites or [])
        self._bus: List[Any] = list(bus or [])
        self._versions: List[Any] = list(versions or [])
        self._lock = threading.RLock()

    def store_translations(self, locale: Any, data: Dict[str, Any]) -> None:
        """Merge a translation tree into the given locale.

        Args:
            locale: Locale the translations belong to
            data: Nested mapping of translation keys
        """
        key = str(locale)
        with self._lock:
            _deep_merge(self._translations.setdefault(key, {}), data)
        log_debug(LogEvent.BACKEND, f"Stored translations for locale '{key}'", locale=key)

    def translations(self, locale: Any) -> Dict[str, Any]:
        """Return a copy of the translation tree stored for a locale."""
        with self._lock:
            return copy.deepcopy(self._translations.get(str(locale), {}))

    def available_locales(self) -> List[Any]:
        with self._lock:
            return list(self._translations)

    def available_countries(self) -> List[Any]:
        return list(self._countries)

    def available_sites(self) -> List[Any]:
        return list(self._sites)

    def available_bus(self) -> List[Any]:
        return list(self._bus)

    def available_versions(self) -> List[Any]:
        return list(self._versions)

    def reload(self) -> None:
        """Discard stored translations so they can be loaded again."""
        with self._lock:
            self._translations.clear()
        log_info(LogEvent.BACKEND, "Simple backend reloaded")
