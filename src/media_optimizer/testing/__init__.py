"""Testing utilities and fakes for the media optimizer."""

from .fakes import (
    FakeLogger,
    RecordingProvider,
    create_test_config,
)

__all__ = [
    "FakeLogger",
    "RecordingProvider",
    "create_test_config",
]
