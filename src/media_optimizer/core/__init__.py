"""Core engine: sanitization, validation, providers and resolution."""

from .config import ConfigurationStore, describe_config, load_config
from .exceptions import (
    ConfigurationError,
    InvalidOptionsError,
    InvalidPathError,
    MediaOptimizerError,
    NotConfiguredError,
    with_error_handling,
)
from .factories import LoggerFactory, MediaResolverFactory
from .logging_config import get_logger, mask_secret, setup_logger
from .models import ActiveProvider, MediaConfig, OptimizedMedia, TransformOptions
from .providers import ImageKitProvider, SupabaseProvider, create_provider
from .sanitizer import MAX_PATH_LENGTH, sanitize_path
from .services import RESPONSIVE_WIDTHS, MediaResolver, SrcSetBuilder
from .validator import DEFAULTS, LIMITS, validate_options

__all__ = [
    "ActiveProvider",
    "ConfigurationError",
    "ConfigurationStore",
    "DEFAULTS",
    "ImageKitProvider",
    "InvalidOptionsError",
    "InvalidPathError",
    "LIMITS",
    "LoggerFactory",
    "MAX_PATH_LENGTH",
    "MediaConfig",
    "MediaOptimizerError",
    "MediaResolver",
    "MediaResolverFactory",
    "NotConfiguredError",
    "OptimizedMedia",
    "RESPONSIVE_WIDTHS",
    "SrcSetBuilder",
    "SupabaseProvider",
    "TransformOptions",
    "create_provider",
    "describe_config",
    "get_logger",
    "load_config",
    "mask_secret",
    "sanitize_path",
    "setup_logger",
    "validate_options",
    "with_error_handling",
]
