"""Generic classification dimension used by the registry.

A dimension (locale, country, site, business unit, version) holds four
pieces of state:

- a *current* value, scoped to the calling execution context through a
  :class:`contextvars.ContextVar`, so each thread and each asyncio task
  sees only its own selection;
- a process-wide *default*, lazily initialised to a hard-coded constant;
- a process-wide *available* list, falling back to the backend when unset;
- a process-wide *enforcement* flag gating validation of assignments.

The available set is a derived membership cache with two states, Empty and
Cached. Reading it in the Empty state builds it from :meth:`Dimension.get_available`;
reassigning the available list or calling :meth:`Dimension.clear_available_set`
moves it back to Empty. Both transitions happen under the dimension lock, so
a reader never observes a set built from a superseded list.
"""

import contextlib
import math
import re
import threading
from contextvars import ContextVar
from enum import Enum
from typing import Any, Callable, FrozenSet, Iterable, Iterator, List, Optional, Sequence

from .errors import I18nError, InvalidValue
from .logging import LogEvent, log_debug, log_warning

Normalizer = Callable[[Any], Any]
AvailableSource = Callable[[], Optional[Iterable[Any]]]
ErrorHandler = Callable[[I18nError], Any]

DIMENSION_NAMES = ("locale", "country", "site", "bu", "version")

# Returned by validation when the exception handler swallowed a failure.
_REJECTED = object()

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def normalize_symbol(value: Any) -> str:
    """Normalise a locale or country to its canonical string token."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def normalize_integer(value: Any) -> int:
    """Normalise a site, business unit or version to an integer.

    Strings convert through their leading integer, ignoring whatever follows;
    a string without one converts to 0. Floats are truncated.

    Raises:
        TypeError: If the value is a bool or of an unsupported type
        ValueError: If a float is not finite
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        raise TypeError("booleans are not valid integer identifiers")
    if isinstance(value, int):
        return value
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        return int(match.group(1)) if match else 0
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value!r} is not a finite number")
        return int(value)
    raise TypeError(f"cannot use {type(value).__name__} as an integer identifier")


class Dimension:
    """One independently configurable classification axis."""

    def __init__(
        self,
        name: str,
        plural: str,
        default_value: Any,
        normalizer: Normalizer,
        source: AvailableSource,
        on_error: Optional[ErrorHandler] = None,
    ):
        """Initialize a dimension.

        Args:
            name: Singular dimension name (``"locale"``), used in errors
            plural: Plural label (``"locales"``), used in messages
            default_value: Constant the default lazily initialises to
            normalizer: Function returning the canonical form of a value
            source: Callable returning the backend's available values, used
                while no explicit list is configured
            on_error: Callable receiving validation failures. If it returns
                instead of raising, the triggering mutation is skipped.
                Defaults to raising the failure.
        """
        self.name = name
        self.plural = plural
        self._initial_default = normalizer(default_value)
        self._normalizer = normalizer
        self._source = source
        self._on_error = on_error
        self._current: ContextVar[Optional[Any]] = ContextVar(f"i18n_dimensions.{name}", default=None)
        self._lock = threading.RLock()
        self._default: Optional[Any] = None
        self._available: Optional[List[Any]] = None
        self._available_set: Optional[FrozenSet[Any]] = None
        self._enforce = True

    def __repr__(self) -> str:
        return f"Dimension(name={self.name!r}, current={self.get_current()!r}, enforce={self._enforce!r})"

    def normalize(self, value: Any) -> Any:
        """Return the canonical form of ``value`` for this dimension.

        Raises:
            TypeError, ValueError: If the value has no canonical form
        """
        return self._normalizer(value)

    # Current value (context scope)

    def get_current(self) -> Any:
        """Return the current value of this context, or the default."""
        current = self._current.get()
        if current is None:
            return self.get_default()
        return current

    def set_current(self, value: Any) -> None:
        """Set the current value for the calling context only.

        ``None`` clears the override so the context follows the default again.

        Raises:
            InvalidValue: If enforcement is on and the value is not available
        """
        if value is None:
            self._current.set(None)
            return
        normalized = self._validated(value)
        if normalized is not _REJECTED:
            self._current.set(normalized)

    @contextlib.contextmanager
    def override(self, value: Any) -> Iterator[Any]:
        """Temporarily set the current value inside a ``with`` block.

        The previous override of the calling context is restored on exit,
        including when the block raises.
        """
        if value is None:
            normalized = None
        else:
            normalized = self._validated(value)
            if normalized is _REJECTED:
                yield self.get_current()
                return
        token = self._current.set(normalized)
        try:
            yield self.get_current()
        finally:
            self._current.reset(token)

    # Default value (process scope)

    def get_default(self) -> Any:
        """Return the process-wide default, initialising it on first read."""
        with self._lock:
            if self._default is None:
                self._default = self._initial_default
            return self._default

    def set_default(self, value: Any) -> None:
        """Set the process-wide default.

        ``None`` drops the configured default; the next read falls back to the
        built-in constant. Context overrides are not affected.

        Raises:
            InvalidValue: If enforcement is on and the value is not available
        """
        if value is None:
            with self._lock:
                self._default = None
            return
        normalized = self._validated(value)
        if normalized is _REJECTED:
            return
        with self._lock:
            self._default = normalized

    # Available list and its membership cache

    def get_available(self) -> List[Any]:
        """Return the configured list, or the backend's list when none was set."""
        with self._lock:
            if self._available is not None:
                return list(self._available)
        return list(self._source() or [])

    def set_available(self, values: Optional[Iterable[Any]]) -> None:
        """Replace the available list wholesale.

        Every element is normalised; an empty result is stored as unset so
        the backend becomes the source again. The available set is always
        invalidated.

        Raises:
            InvalidValue: If an element has no canonical form
        """
        if values is None:
            items: Sequence[Any] = []
        elif isinstance(values, (str, bytes, Enum)):
            items = [values]
        else:
            try:
                items = list(values)
            except TypeError:
                items = [values]

        normalized: List[Any] = []
        for item in items:
            try:
                normalized.append(self.normalize(item))
            except (TypeError, ValueError) as e:
                self._fail(
                    InvalidValue(
                        f"{item!r} is not a valid {self.name}: {e}",
                        dimension=self.name,
                        value=item,
                    )
                )
                return

        with self._lock:
            self._available = normalized or None
            self._available_set = None
        log_debug(
            LogEvent.AVAILABLE_CACHE,
            f"Available {self.plural} replaced, cache invalidated",
            dimension=self.name,
            available=normalized,
        )

    def get_available_set(self) -> FrozenSet[Any]:
        """Return the membership cache, building it from the available list if Empty.

        Each available value is inserted both in canonical form and as a
        string, so callers may validate either representation directly.
        """
        with self._lock:
            if self._available_set is not None:
                return self._available_set
            members = set()
            for item in self.get_available():
                try:
                    normalized = self.normalize(item)
                except (TypeError, ValueError):
                    log_warning(
                        LogEvent.AVAILABLE_CACHE,
                        f"Ignoring available {self.name} {item!r} that has no canonical form",
                        dimension=self.name,
                        value=repr(item),
                    )
                    continue
                members.add(normalized)
                members.add(str(normalized))
            self._available_set = frozenset(members)
            log_debug(
                LogEvent.AVAILABLE_CACHE,
                f"Built available {self.plural} set",
                dimension=self.name,
                size=len(self._available_set),
            )
            return self._available_set

    def clear_available_set(self) -> None:
        """Drop the membership cache; the next read rebuilds it."""
        with self._lock:
            self._available_set = None
        log_debug(LogEvent.AVAILABLE_CACHE, f"Available {self.plural} set cleared", dimension=self.name)

    def is_available(self, value: Any) -> bool:
        """Check membership of ``value`` in the available set, in either form."""
        try:
            normalized = self.normalize(value)
        except (TypeError, ValueError):
            return False
        available = self.get_available_set()
        return normalized in available or str(normalized) in available

    # Enforcement

    def get_enforcement(self) -> bool:
        return self._enforce

    def set_enforcement(self, enforce: bool) -> None:
        """Switch validation on or off.

        Raises:
            TypeError: If ``enforce`` is not a bool
        """
        if not isinstance(enforce, bool):
            raise TypeError(f"enforcement flag must be a bool, got {type(enforce).__name__}")
        self._enforce = enforce

    @property
    def enforce(self) -> bool:
        """Whether assignments are validated against the available set."""
        return self._enforce

    @enforce.setter
    def enforce(self, enforce: bool) -> None:
        self.set_enforcement(enforce)

    def enforce_available(self, value: Any) -> None:
        """Validate ``value`` without assigning it.

        Raises:
            InvalidValue: If enforcement is on and the value is not available
        """
        if value is not None:
            self._validated(value)

    def reset(self) -> None:
        """Return all process-wide state to its initial values."""
        with self._lock:
            self._default = None
            self._available = None
            self._available_set = None
            self._enforce = True

    # Validation

    def _validated(self, value: Any) -> Any:
        try:
            normalized = self.normalize(value)
        except (TypeError, ValueError) as e:
            self._fail(
                InvalidValue(
                    f"{value!r} is not a valid {self.name}: {e}",
                    dimension=self.name,
                    value=value,
                )
            )
            return _REJECTED

        if self._enforce and not self.is_available(normalized):
            self._fail(
                InvalidValue(
                    f"{value!r} is not a valid {self.name}",
                    dimension=self.name,
                    value=value,
                    available=self.get_available(),
                )
            )
            return _REJECTED
        return normalized

    def _fail(self, error: InvalidValue) -> None:
        log_warning(
            LogEvent.DIMENSION_VALIDATION,
            error.message,
            dimension=error.dimension,
            value=repr(error.value),
        )
        if self._on_error is None:
            raise error
        self._on_error(error)
