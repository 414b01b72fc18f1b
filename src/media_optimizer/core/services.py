"""Pure services resolving media paths into provider URLs."""

from typing import Any, Dict, Optional, Sequence

from .exceptions import InvalidOptionsError, NotConfiguredError, with_error_handling
from .models import ActiveProvider, MediaConfig, OptimizedMedia
from .observability import LogContext, StructuredLogger
from .protocols import LoggerProtocol, MediaProviderProtocol
from .providers import create_provider
from .sanitizer import sanitize_path
from .validator import OptionsInput, as_option_mapping, validate_options

RESPONSIVE_WIDTHS = (320, 640, 768, 1024, 1280, 1536, 1920)


class MediaResolver:
    """Resolves a media path into primary and backup CDN URLs.

    Both provider URLs are always built so the backup stays available for
    client-side failover without a second call.
    """

    def __init__(
        self,
        config: Optional[MediaConfig],
        primary: Optional[MediaProviderProtocol] = None,
        backup: Optional[MediaProviderProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        self._config = config
        self._logger = logger or StructuredLogger("media-optimizer.resolver")
        self._primary = primary
        self._backup = backup
        if config is not None:
            self._primary = primary or create_provider(ActiveProvider.PRIMARY, config)
            self._backup = backup or create_provider(ActiveProvider.BACKUP, config)

    @property
    def config(self) -> Optional[MediaConfig]:
        return self._config

    def require_config(self) -> MediaConfig:
        if self._config is None:
            raise NotConfiguredError()
        return self._config

    @with_error_handling
    def resolve(self, path: Any, options: OptionsInput = None) -> OptimizedMedia:
        """
        Resolve a media path into an OptimizedMedia result.

        Raises:
            NotConfiguredError: If no configuration was supplied
            InvalidPathError: If the path fails sanitization
            InvalidOptionsError: If any option is invalid
        """
        config = self.require_config()
        safe_path = sanitize_path(path)
        opts = validate_options(options)

        primary_url = self._primary.build_url(safe_path, opts)
        backup_url = self._backup.build_url(safe_path, opts)

        if config.force_backup_mode:
            result = OptimizedMedia(
                primary_url=backup_url,
                backup_url=backup_url,
                provider=ActiveProvider.BACKUP,
            )
        else:
            result = OptimizedMedia(
                primary_url=primary_url,
                backup_url=backup_url,
                provider=ActiveProvider.PRIMARY,
            )

        if config.debug:
            context = (
                LogContext(component="media_resolver")
                .with_operation("resolve")
                .with_metadata(path=safe_path, provider=result.provider.value)
            )
            self._logger.debug("Resolved media", context)

        return result

    def build_src_set(
        self,
        path: Any,
        options: OptionsInput = None,
        widths: Optional[Sequence[int]] = None,
    ) -> str:
        """Build a responsive srcset string; see SrcSetBuilder.build."""
        return SrcSetBuilder(self).build(path, options, widths)

    def resolve_optimized_media(
        self, path: Any, options: OptionsInput = None
    ) -> OptimizedMedia:
        """Resolve a path and attach the default responsive srcset."""
        result = self.resolve(path, options)
        src_set = self.build_src_set(path, options)
        return result.model_copy(update={"src_set": src_set})


class SrcSetBuilder:
    """Builds ``srcset`` descriptors by resolving one URL per width."""

    def __init__(self, resolver: MediaResolver):
        self._resolver = resolver

    @staticmethod
    def _check_widths(widths: Sequence[int]) -> None:
        if not widths:
            raise InvalidOptionsError(["widths: At least one width is required"])
        errors = [
            f"widths: Expected positive integer, received {width!r}"
            for width in widths
            if isinstance(width, bool) or not isinstance(width, int) or width < 1
        ]
        if errors:
            raise InvalidOptionsError(errors)

    def build(
        self,
        path: Any,
        options: OptionsInput = None,
        widths: Optional[Sequence[int]] = None,
    ) -> str:
        """
        Build a srcset string such as ``"<url> 320w, <url> 640w"``.

        Any ``width`` in ``options`` is replaced per entry. A failure for a
        single width aborts the whole build.
        """
        self._resolver.require_config()
        safe_path = sanitize_path(path)
        widths = RESPONSIVE_WIDTHS if widths is None else widths
        self._check_widths(widths)

        base: Dict[str, Any] = dict(as_option_mapping(options))

        entries = []
        for width in widths:
            media = self._resolver.resolve(safe_path, {**base, "width": width})
            entries.append(f"{media.primary_url} {width}w")
        return ", ".join(entries)
