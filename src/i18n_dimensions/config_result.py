"""Configuration loading result object.

This module defines a standard result object for settings loading operations.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .settings import I18nSettings


@dataclass
class ConfigResult:
    """Result of a settings loading operation.

    Attributes:
        success: Whether the operation was successful
        settings: Parsed settings (if successful)
        error: Error message (if unsuccessful)
        exception: Original exception (if an error occurred)
        path: Path to the settings file (if applicable)
    """

    success: bool
    settings: Optional["I18nSettings"] = None
    error: Optional[str] = None
    exception: Optional[Exception] = None
    path: Optional[str] = None
