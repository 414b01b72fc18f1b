"""Optimized image URLs for an ImageKit primary and a Supabase backup CDN."""

__version__ = "2.0.0"

from .api import (
    build_src_set,
    get_configuration,
    initialize_configuration,
    resolve_media,
    resolve_optimized_media,
)
from .core import (
    RESPONSIVE_WIDTHS,
    ActiveProvider,
    ConfigurationError,
    ConfigurationStore,
    InvalidOptionsError,
    InvalidPathError,
    MediaConfig,
    MediaOptimizerError,
    MediaResolver,
    NotConfiguredError,
    OptimizedMedia,
    TransformOptions,
    sanitize_path,
    load_config,
    validate_options,
)
from .gateway import GatewayResult, MediaGateway

__all__ = [
    "__version__",
    "ActiveProvider",
    "ConfigurationError",
    "ConfigurationStore",
    "GatewayResult",
    "InvalidOptionsError",
    "InvalidPathError",
    "MediaConfig",
    "MediaGateway",
    "MediaOptimizerError",
    "MediaResolver",
    "NotConfiguredError",
    "OptimizedMedia",
    "RESPONSIVE_WIDTHS",
    "TransformOptions",
    "build_src_set",
    "get_configuration",
    "initialize_configuration",
    "load_config",
    "resolve_media",
    "resolve_optimized_media",
    "sanitize_path",
    "validate_options",
]
