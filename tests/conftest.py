"""Shared fixtures for the media optimizer tests."""

import pytest

from media_optimizer.api import default_store
from media_optimizer.core.services import MediaResolver
from media_optimizer.testing.fakes import FakeLogger, create_test_config


@pytest.fixture(autouse=True)
def reset_default_store():
    """Leave the process-wide store unconfigured around every test."""
    default_store.reset()
    yield
    default_store.reset()


@pytest.fixture
def config():
    return create_test_config()


@pytest.fixture
def fake_logger():
    return FakeLogger()


@pytest.fixture
def resolver(config, fake_logger):
    return MediaResolver(config, logger=fake_logger)
