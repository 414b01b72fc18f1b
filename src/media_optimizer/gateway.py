"""Rendering-side adapter that never raises.

This is the only place where library errors are converted into values: a
failed resolution yields empty URLs and the error, so a page can still render.
"""

import json
from collections import OrderedDict
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .api import default_store
from .core.factories import LoggerFactory, MediaResolverFactory
from .core.models import ActiveProvider
from .core.services import MediaResolver
from .core.validator import OptionsInput, as_option_mapping


class GatewayResult(BaseModel):
    """Outcome of a render call: URLs on success, ``error`` on failure."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    src: str = ""
    fallback_src: str = ""
    src_set: str = ""
    provider: ActiveProvider = ActiveProvider.PRIMARY
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MediaGateway:
    """Memoizing, non-raising front for ``resolve_optimized_media``.

    Without an explicit resolver the process-wide default store is used.
    At most ``max_entries`` successful results are kept.
    """

    def __init__(
        self, resolver: Optional[MediaResolver] = None, max_entries: int = 128
    ):
        self._resolver = resolver
        self._max_entries = max(1, max_entries)
        self._cache: "OrderedDict[Tuple[str, str], GatewayResult]" = OrderedDict()
        self._logger = LoggerFactory.create_logger("media-optimizer.gateway")

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def _current_resolver(self) -> MediaResolver:
        if self._resolver is not None:
            return self._resolver
        return MediaResolverFactory.from_store(default_store)

    @staticmethod
    def _cache_key(path: Any, options: OptionsInput) -> Tuple[str, str]:
        mapping = as_option_mapping(options)
        return repr(path), json.dumps(dict(mapping), sort_keys=True, default=repr)

    def render(self, path: Any, options: OptionsInput = None) -> GatewayResult:
        """Resolve ``path``; failures come back in ``GatewayResult.error``."""
        try:
            key = self._cache_key(path, options)
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                return cached

            media = self._current_resolver().resolve_optimized_media(path, options)
        except Exception as exc:  # noqa: BLE001
            self._logger.warning(f"Media resolution failed: {exc}")
            return GatewayResult(error=exc)

        result = GatewayResult(
            src=media.primary_url,
            fallback_src=media.backup_url,
            src_set=media.src_set or "",
            provider=media.provider,
        )
        self._cache[key] = result
        # least recently used entries are evicted first
        while len(self._cache) > self._max_entries:
            self._cache.popitem(last=False)
        return result

    def clear(self) -> None:
        """Drop memoized results."""
        self._cache.clear()
