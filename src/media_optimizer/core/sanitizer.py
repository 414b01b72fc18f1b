"""Path sanitization for media paths inside the storage bucket."""

import re
from typing import Any, Tuple

from .exceptions import InvalidPathError

MAX_PATH_LENGTH = 500

# Patterns that indicate directory traversal or injection attempts.
FORBIDDEN_PATTERNS: Tuple["re.Pattern[str]", ...] = (
    re.compile(r"\.\."),
    re.compile(r"\.\\"),
    # any pairing of literal and encoded dots: "%2e%2e", ".%2e", "%2e."
    re.compile(r"(?:\.|%2e)(?:\.|%2e)", re.IGNORECASE),
    re.compile(r"%252e", re.IGNORECASE),
    re.compile(r"\x00"),
    re.compile(r"[<>]"),
    re.compile(r'[:"|?*]'),
    # would start a URL fragment in both provider URLs
    re.compile(r"#"),
)

_BACKSLASHES = re.compile(r"\\")
_REPEATED_SLASHES = re.compile(r"/+")
_LEADING_SLASHES = re.compile(r"^[\s/]+")


def sanitize_path(raw_path: Any) -> str:
    """
    Validate and normalize a media path.

    Args:
        raw_path: Path relative to the storage bucket

    Returns:
        The normalized path: forward slashes only, no repeated or
        leading slashes

    Raises:
        InvalidPathError: If the path is empty, too long or contains
            a forbidden pattern
    """
    if not isinstance(raw_path, str) or not raw_path:
        raise InvalidPathError(raw_path, "Path must be a non-empty string")

    if len(raw_path) > MAX_PATH_LENGTH:
        raise InvalidPathError(
            raw_path, f"Path exceeds maximum length of {MAX_PATH_LENGTH}"
        )

    for pattern in FORBIDDEN_PATTERNS:
        if pattern.search(raw_path):
            raise InvalidPathError(
                raw_path, "Path contains forbidden characters or patterns"
            )

    clean_path = _BACKSLASHES.sub("/", raw_path)
    clean_path = _REPEATED_SLASHES.sub("/", clean_path)
    clean_path = _LEADING_SLASHES.sub("", clean_path).rstrip()

    if not clean_path:
        raise InvalidPathError(raw_path, "Path is empty after sanitization")

    return clean_path
