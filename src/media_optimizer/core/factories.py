"""Factory classes for creating configured service instances."""

from typing import Optional

from .config import ConfigInput, ConfigurationStore, load_config
from .models import ActiveProvider
from .observability import StructuredLogger
from .protocols import LoggerProtocol
from .providers import create_provider
from .services import MediaResolver


class LoggerFactory:
    """Factory for creating logger instances."""

    @staticmethod
    def create_logger(name: str, level: Optional[str] = None) -> LoggerProtocol:
        """Create a configured structured logger."""
        return StructuredLogger(name, level)


class MediaResolverFactory:
    """Factory for creating resolvers wired to both providers."""

    @staticmethod
    def create_resolver(
        config: Optional[ConfigInput] = None,
        logger: Optional[LoggerProtocol] = None,
    ) -> MediaResolver:
        """Create a resolver from an explicit configuration.

        A missing configuration yields a resolver that raises
        NotConfiguredError on use.
        """
        if logger is None:
            logger = LoggerFactory.create_logger("media-optimizer.resolver")

        if config is None:
            return MediaResolver(None, logger=logger)

        media_config = load_config(config)
        return MediaResolver(
            media_config,
            primary=create_provider(ActiveProvider.PRIMARY, media_config),
            backup=create_provider(ActiveProvider.BACKUP, media_config),
            logger=logger,
        )

    @staticmethod
    def from_store(
        store: ConfigurationStore, logger: Optional[LoggerProtocol] = None
    ) -> MediaResolver:
        """Create a resolver from whatever the store currently holds."""
        return MediaResolverFactory.create_resolver(store.get(), logger=logger)
