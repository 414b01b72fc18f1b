"""Set-once configuration store.

The store provides no locking. It is meant to be initialized once during
startup, before any resolution runs; concurrent initialization from several
threads is undefined behaviour.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from .exceptions import ConfigurationError, NotConfiguredError
from .logging_config import get_logger, mask_secret
from .models import MediaConfig

ConfigInput = Union[MediaConfig, Mapping[str, Any]]


def load_config(config: ConfigInput) -> MediaConfig:
    """
    Validate raw configuration into a MediaConfig.

    Raises:
        ConfigurationError: Listing every schema violation
    """
    if isinstance(config, MediaConfig):
        return config
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Expected a mapping or MediaConfig, received {type(config).__name__}"
        )
    try:
        return MediaConfig(**config)
    except ValidationError as exc:
        errors = ", ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(errors) from exc


def describe_config(config: MediaConfig) -> dict:
    """Return a loggable view of the configuration with the ID masked."""
    return {
        "image_kit_id": mask_secret(config.image_kit_id),
        "supabase_url": config.supabase_url,
        "bucket_name": config.bucket_name,
        "force_backup_mode": config.force_backup_mode,
    }


class ConfigurationStore:
    """Holds a single MediaConfig, written once and read many times."""

    def __init__(self) -> None:
        self._config: Optional[MediaConfig] = None
        self._logger = get_logger("media-optimizer.config")

    @property
    def is_configured(self) -> bool:
        return self._config is not None

    def initialize(self, config: ConfigInput) -> MediaConfig:
        """Validate and store the configuration; a second call is rejected."""
        if self._config is not None:
            raise ConfigurationError(
                "Media optimizer is already configured; reconfiguration is not supported"
            )
        validated = load_config(config)
        self._config = validated

        if validated.debug:
            self._logger.info(f"Configured with: {describe_config(validated)}")
        return validated.model_copy()

    def get(self) -> Optional[MediaConfig]:
        """Return a copy of the stored configuration, or None."""
        if self._config is None:
            return None
        return self._config.model_copy()

    def require(self) -> MediaConfig:
        if self._config is None:
            raise NotConfiguredError()
        return self._config

    def reset(self) -> None:
        """Forget the stored configuration. Intended for tests."""
        self._config = None
