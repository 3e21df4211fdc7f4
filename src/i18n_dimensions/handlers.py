"""Pluggable failure handlers owned by the registry.

Both handler slots accept any callable with the matching signature; the
classes here are the defaults installed when nothing else was configured.
"""

from typing import Any, Callable, Mapping

from .errors import I18nError, MissingInterpolationArgument

ExceptionHandlerCallable = Callable[..., Any]
MissingArgumentHandlerCallable = Callable[[str, Mapping[str, Any], str], Any]


class ExceptionHandler:
    """Default exception handler: propagate the failure to the caller.

    Subclasses (or plain callables) may return instead of raising, in which
    case the registry drops the mutation that triggered the failure.
    """

    def __call__(self, exception: I18nError, **context: Any) -> Any:
        raise exception


class MissingInterpolationArgumentHandler:
    """Default handler for interpolation arguments that were not provided.

    Example of a replacement that returns a placeholder instead of raising:

        registry.missing_interpolation_argument_handler = (
            lambda key, values, string: f"{key} is missing"
        )
    """

    def __call__(self, missing_key: str, values: Mapping[str, Any], string: str) -> Any:
        raise MissingInterpolationArgument(missing_key, values, string)
