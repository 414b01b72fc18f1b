"""Protocol definitions for dependency injection and testability."""

from typing import Any, Protocol

from .models import ActiveProvider, TransformOptions


class MediaProviderProtocol(Protocol):
    """Capability shared by every CDN provider variant."""

    kind: ActiveProvider

    def build_url(self, path: str, options: TransformOptions) -> str:
        """Build the provider URL for a sanitized path."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging operations."""

    def debug(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log error message."""
        ...
