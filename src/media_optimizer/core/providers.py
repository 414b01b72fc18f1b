"""URL builders for the primary (ImageKit) and backup (Supabase) CDNs."""

from typing import Dict, List, Union
from urllib.parse import urlencode

from .models import ActiveProvider, MediaConfig, TransformOptions
from .protocols import MediaProviderProtocol

IMAGEKIT_HOST = "ik.imagekit.io"
SUPABASE_RENDER_PATH = "storage/v1/render/image/public"

FIT_TRANSFORMS: Dict[str, str] = {
    "cover": "c-maintain_ratio",
    "contain": "c-at_max",
    "fill": "c-force",
}

FOCAL_TRANSFORMS: Dict[str, str] = {
    "auto": "fo-auto",
    "face": "fo-face",
    "center": "fo-center",
    "top": "fo-top",
    "bottom": "fo-bottom",
    "left": "fo-left",
    "right": "fo-right",
}


def _format_number(value: Union[int, float]) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class ImageKitProvider:
    """Primary provider: transforms embedded as a ``tr:`` path segment.

    Assumes an ImageKit Web Proxy origin pointing at the storage bucket.
    """

    kind = ActiveProvider.PRIMARY

    def __init__(self, image_kit_id: str):
        self._image_kit_id = image_kit_id

    def transform_segment(self, options: TransformOptions) -> str:
        """Return the ``tr:`` segment, or an empty string when nothing is set."""
        transforms: List[str] = []

        if options.width is not None:
            transforms.append(f"w-{options.width}")
        if options.height is not None:
            transforms.append(f"h-{options.height}")
        if options.quality is not None:
            transforms.append(f"q-{options.quality}")
        if options.fit is not None:
            transforms.append(FIT_TRANSFORMS[options.fit])
        if options.focal is not None:
            transforms.append(FOCAL_TRANSFORMS[options.focal])
        # ImageKit negotiates the format itself when left on auto
        if options.format is not None and options.format != "auto":
            transforms.append(f"f-{options.format}")
        if options.dpr is not None and options.dpr > 1:
            transforms.append(f"dpr-{_format_number(options.dpr)}")
        if options.blur is not None:
            transforms.append(f"bl-{options.blur}")
        if options.sharpen:
            transforms.append("e-sharpen")

        return f"tr:{','.join(transforms)}" if transforms else ""

    def build_url(self, path: str, options: TransformOptions) -> str:
        clean_path = path if path.startswith("/") else f"/{path}"
        segment = self.transform_segment(options)
        return f"https://{IMAGEKIT_HOST}/{self._image_kit_id}/{segment}{clean_path}"


class SupabaseProvider:
    """Backup provider: Supabase Storage render API with query parameters."""

    kind = ActiveProvider.BACKUP

    def __init__(self, supabase_url: str, bucket_name: str):
        self._supabase_url = supabase_url.rstrip("/")
        self._bucket_name = bucket_name

    def query_params(self, options: TransformOptions) -> Dict[str, str]:
        params: Dict[str, str] = {}

        if options.width is not None:
            params["width"] = str(options.width)
        if options.height is not None:
            params["height"] = str(options.height)
        if options.quality is not None:
            params["quality"] = str(options.quality)
        if options.format is not None and options.format != "auto":
            params["format"] = options.format
        # fit is forwarded untranslated
        if options.fit is not None:
            params["resize"] = options.fit

        return params

    def build_url(self, path: str, options: TransformOptions) -> str:
        clean_path = path[1:] if path.startswith("/") else path
        base_url = (
            f"{self._supabase_url}/{SUPABASE_RENDER_PATH}/"
            f"{self._bucket_name}/{clean_path}"
        )

        query_string = urlencode(self.query_params(options))
        return f"{base_url}?{query_string}" if query_string else base_url


def create_provider(kind: ActiveProvider, config: MediaConfig) -> MediaProviderProtocol:
    """Create the provider variant for ``kind`` from a configuration."""
    if kind is ActiveProvider.PRIMARY:
        return ImageKitProvider(config.image_kit_id)
    if kind is ActiveProvider.BACKUP:
        return SupabaseProvider(config.supabase_url, config.bucket_name)
    raise ValueError(f"Unknown provider: {kind!r}")
