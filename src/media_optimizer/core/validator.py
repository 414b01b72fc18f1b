"""Field-by-field validation of transform options."""

import math
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .exceptions import InvalidOptionsError
from .models import TransformOptions

DEFAULTS: Dict[str, Any] = {
    "quality": 80,
    "fit": "cover",
    "format": "auto",
    "dpr": 1,
}

LIMITS: Dict[str, Tuple[int, int]] = {
    "width": (1, 4000),
    "height": (1, 4000),
    "quality": (1, 100),
    "blur": (1, 100),
    "dpr": (1, 3),
}

INTEGER_FIELDS = ("width", "height", "quality", "blur")

ENUM_FIELDS: Dict[str, Tuple[str, ...]] = {
    "format": ("auto", "webp", "avif", "jpg", "png"),
    "fit": ("cover", "contain", "fill"),
    "focal": ("auto", "face", "center", "top", "bottom", "left", "right"),
}

KNOWN_FIELDS = frozenset(TransformOptions.model_fields)

OptionsInput = Union[TransformOptions, Mapping[str, Any], None]


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid dimension
    return isinstance(value, Real) and not isinstance(value, bool)


def _check_integer(name: str, value: Any, errors: List[str]) -> Optional[int]:
    low, high = LIMITS[name]
    if not _is_number(value):
        errors.append(f"{name}: Expected integer, received {value!r}")
        return None
    # isfinite would coerce huge ints to float and overflow
    if isinstance(value, float) and (not math.isfinite(value) or not value.is_integer()):
        errors.append(f"{name}: Expected integer, received {value!r}")
        return None
    if not isinstance(value, (int, float)) and value != int(value):
        errors.append(f"{name}: Expected integer, received {value!r}")
        return None
    if not low <= value <= high:
        errors.append(f"{name}: Must be between {low} and {high}, received {value!r}")
        return None
    return int(value)


def _check_dpr(value: Any, errors: List[str]) -> Optional[float]:
    low, high = LIMITS["dpr"]
    if not _is_number(value):
        errors.append(f"dpr: Expected number, received {value!r}")
        return None
    if not low <= value <= high:
        errors.append(f"dpr: Must be between {low} and {high}, received {value!r}")
        return None
    return float(value)


def _check_enum(name: str, value: Any, errors: List[str]) -> Optional[str]:
    allowed = ENUM_FIELDS[name]
    if not isinstance(value, str) or value not in allowed:
        errors.append(
            f"{name}: Expected one of {', '.join(repr(a) for a in allowed)}, "
            f"received {value!r}"
        )
        return None
    return value


def as_option_mapping(options: OptionsInput) -> Mapping[str, Any]:
    if options is None:
        return {}
    if isinstance(options, TransformOptions):
        return options.model_dump(exclude_none=True)
    if isinstance(options, Mapping):
        return options
    raise InvalidOptionsError(
        [f"options: Expected a mapping, received {type(options).__name__}"]
    )


def validate_options(options: OptionsInput = None) -> TransformOptions:
    """
    Validate transform options and apply defaults.

    Args:
        options: Raw options as a mapping, an existing TransformOptions
            or None

    Returns:
        TransformOptions with quality, fit, format and dpr defaulted

    Raises:
        InvalidOptionsError: Listing every unknown, mistyped or
            out-of-range field
    """
    raw = as_option_mapping(options)
    errors: List[str] = []
    cleaned: Dict[str, Any] = {}

    for name in sorted(set(raw) - KNOWN_FIELDS, key=str):
        errors.append(f"{name}: Unrecognized option")

    for name in TransformOptions.model_fields:
        value = raw.get(name)
        if value is None:
            continue

        if name in INTEGER_FIELDS:
            checked = _check_integer(name, value, errors)
        elif name == "dpr":
            checked = _check_dpr(value, errors)
        elif name in ENUM_FIELDS:
            checked = _check_enum(name, value, errors)
        elif isinstance(value, bool):
            checked = value
        else:
            errors.append(f"{name}: Expected boolean, received {value!r}")
            checked = None

        if checked is not None:
            cleaned[name] = checked

    if errors:
        raise InvalidOptionsError(errors)

    merged = {**DEFAULTS, **cleaned}
    return TransformOptions(**merged)
