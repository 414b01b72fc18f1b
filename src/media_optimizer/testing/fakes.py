"""Fake implementations for testing purposes."""

import time
from typing import Any, Dict, List, Optional

from ..core.models import ActiveProvider, MediaConfig, TransformOptions


class FakeLogger:
    """Fake logger for testing with support for LogContext."""

    def __init__(self, name: str = "test_logger"):
        self.name = name
        self.logs: List[Dict[str, Any]] = []

    def _log(
        self, level: str, message: str, context: Any = None, **kwargs: Any
    ) -> None:
        log_entry = {
            "level": level,
            "message": message,
            "timestamp": time.time(),
            **kwargs,
        }

        if context is not None:
            if hasattr(context, "correlation_id"):
                log_entry["correlation_id"] = context.correlation_id
            if hasattr(context, "operation"):
                log_entry["operation"] = context.operation
            if hasattr(context, "component"):
                log_entry["component"] = context.component
            if hasattr(context, "metadata"):
                log_entry.update(context.metadata)

        self.logs.append(log_entry)

    def debug(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log debug message."""
        self._log("DEBUG", message, context, **kwargs)

    def info(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log info message."""
        self._log("INFO", message, context, **kwargs)

    def warning(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log warning message."""
        self._log("WARNING", message, context, **kwargs)

    def error(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log error message."""
        self._log("ERROR", message, context, **kwargs)

    def get_logs(self, level: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get logged messages, optionally filtered by level."""
        if level:
            return [log for log in self.logs if log["level"] == level]
        return self.logs.copy()

    def clear_logs(self) -> None:
        """Clear all logged messages."""
        self.logs.clear()


class RecordingProvider:
    """Provider double that records every call and returns a fixed URL."""

    def __init__(self, kind: ActiveProvider, url: str = "https://cdn.test/image"):
        self.kind = kind
        self.url = url
        self.calls: List[Dict[str, Any]] = []

    def build_url(self, path: str, options: TransformOptions) -> str:
        self.calls.append({"path": path, "options": options})
        return f"{self.url}/{path}"


def create_test_config(**overrides: Any) -> MediaConfig:
    """Create a valid MediaConfig, overriding any field."""
    values: Dict[str, Any] = {
        "image_kit_id": "demo",
        "supabase_url": "https://xyz.supabase.co",
        "bucket_name": "uploads",
    }
    values.update(overrides)
    return MediaConfig(**values)
