"""Shared data models for the media optimizer."""

import os
import re
from enum import Enum
from typing import Any, Dict, Literal, Mapping, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, field_validator


ImageFormat = Literal["auto", "webp", "avif", "jpg", "png"]
FitMode = Literal["cover", "contain", "fill"]
FocalPoint = Literal["auto", "face", "center", "top", "bottom", "left", "right"]

LOCAL_DEV_HOSTS = frozenset({"localhost", "127.0.0.1", "0.0.0.0", "::1"})
_BUCKET_NAME_RE = re.compile(r"^[A-Za-z0-9._-]+$")
_TRUTHY = {"1", "true", "yes", "on"}


class ActiveProvider(str, Enum):
    """Provider whose URL occupies the primary slot of a result."""

    PRIMARY = "imagekit"
    BACKUP = "supabase"


class MediaConfig(BaseModel):
    """
    Provider credentials and identifiers, immutable once built.

    Constructing the model directly raises pydantic's ``ValidationError``.
    Build it through ``load_config`` (also used by ``ConfigurationStore``
    and ``MediaResolverFactory``) to get a ``ConfigurationError`` instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    image_kit_id: str
    supabase_url: str
    bucket_name: str
    force_backup_mode: bool = False
    debug: bool = False

    @field_validator("image_kit_id")
    @classmethod
    def _check_image_kit_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("ImageKit ID is required")
        return value

    @field_validator("supabase_url")
    @classmethod
    def _check_supabase_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        parsed = urlparse(value)
        if not parsed.netloc or not parsed.hostname:
            raise ValueError("Invalid Supabase URL")
        if parsed.scheme == "https":
            return value
        if parsed.scheme == "http" and parsed.hostname in LOCAL_DEV_HOSTS:
            return value
        raise ValueError("Supabase URL must use https outside local development")

    @field_validator("bucket_name")
    @classmethod
    def _check_bucket_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Bucket name is required")
        if value in (".", "..") or not _BUCKET_NAME_RE.match(value):
            raise ValueError("Bucket name must only contain letters, digits, '.', '_' or '-'")
        return value

    @staticmethod
    def env_values(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Read raw configuration values from MEDIA_* environment variables."""
        env = os.environ if environ is None else environ
        return {
            "image_kit_id": env.get("MEDIA_IMAGEKIT_ID", ""),
            "supabase_url": env.get("MEDIA_SUPABASE_URL", ""),
            "bucket_name": env.get("MEDIA_SUPABASE_BUCKET", "public"),
            "force_backup_mode": env.get("MEDIA_FORCE_BACKUP", "").lower() in _TRUTHY,
            "debug": env.get("MEDIA_DEBUG", "").lower() in _TRUTHY,
        }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MediaConfig":
        """Build a configuration from MEDIA_* environment variables."""
        return cls(**cls.env_values(environ))


class TransformOptions(BaseModel):
    """Image transformation options.

    Instances are produced by ``validate_options``; range checks live there
    so every violation can be reported at once.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: Optional[int] = None
    height: Optional[int] = None
    quality: Optional[int] = None
    format: Optional[ImageFormat] = None
    fit: Optional[FitMode] = None
    focal: Optional[FocalPoint] = None
    dpr: Optional[float] = None
    blur: Optional[int] = None
    sharpen: Optional[bool] = None


class OptimizedMedia(BaseModel):
    """Result of resolving a media path against both providers."""

    model_config = ConfigDict(frozen=True)

    primary_url: str
    backup_url: str
    provider: ActiveProvider
    src_set: Optional[str] = None
