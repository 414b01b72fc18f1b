"""Custom exceptions and error handling utilities for the media optimizer."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, List, TypeVar

from .logging_config import get_logger


class MediaOptimizerError(Exception):
    """Base exception for all media optimizer errors."""


class ConfigurationError(MediaOptimizerError):
    """Error raised for an invalid or rejected configuration."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")


class NotConfiguredError(MediaOptimizerError):
    """Error raised when a resolution is attempted before configuration."""

    def __init__(
        self,
        message: str = "Media optimizer not configured. "
        "Call initialize_configuration() at startup.",
    ):
        super().__init__(message)


class InvalidPathError(MediaOptimizerError):
    """Error raised when a media path fails sanitization."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'Invalid path "{path}": {reason}')


class InvalidOptionsError(MediaOptimizerError):
    """Error raised when transform options fail validation.

    Carries every violation found, not only the first one.
    """

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__(f"Validation error: {', '.join(self.violations)}")


F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(func: F) -> F:
    """Wrap a function with standardized error handling.

    Library errors pass through untouched; anything else is logged and
    re-raised as a MediaOptimizerError.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:  # type: ignore[override]
        logger = get_logger("media-optimizer.errors")
        try:
            return func(*args, **kwargs)
        except MediaOptimizerError as exc:
            logger.debug(f"{func.__name__} rejected input: {exc}")
            raise
        except Exception as exc:  # noqa: BLE001
            logger.error(f"Unhandled error in {func.__name__}: {exc}", exc_info=True)
            raise MediaOptimizerError(str(exc)) from exc

    return wrapper  # type: ignore[return-value]
