"""Process-wide convenience API backed by a default configuration store.

Prefer constructing a ``MediaResolver`` with an explicit ``MediaConfig`` when
more than one configuration is needed in the same process.
"""

from typing import Any, Optional, Sequence

from .core.config import ConfigInput, ConfigurationStore
from .core.factories import MediaResolverFactory
from .core.models import MediaConfig, OptimizedMedia
from .core.services import MediaResolver
from .core.validator import OptionsInput

default_store = ConfigurationStore()


def _resolver() -> MediaResolver:
    return MediaResolverFactory.from_store(default_store)


def initialize_configuration(config: ConfigInput) -> MediaConfig:
    """Configure the media optimizer. Call once at startup."""
    return default_store.initialize(config)


def get_configuration() -> Optional[MediaConfig]:
    """Return a copy of the current configuration, or None."""
    return default_store.get()


def resolve_media(path: Any, options: OptionsInput = None) -> OptimizedMedia:
    """Resolve primary and backup URLs for ``path``."""
    return _resolver().resolve(path, options)


def build_src_set(
    path: Any,
    options: OptionsInput = None,
    widths: Optional[Sequence[int]] = None,
) -> str:
    """Build a responsive srcset string for ``path``."""
    return _resolver().build_src_set(path, options, widths)


def resolve_optimized_media(path: Any, options: OptionsInput = None) -> OptimizedMedia:
    """Resolve ``path`` with the srcset populated."""
    return _resolver().resolve_optimized_media(path, options)
