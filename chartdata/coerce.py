"""Best-effort coercion helpers shared by normalization and sanitization."""

from __future__ import annotations

import math
import random
import re
import string
import time

from .dto import CHART_TYPES, DEFAULT_CHART_TYPE

_LEADING_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_ID_ALPHABET = string.digits + string.ascii_lowercase


def coerce_number(value: object) -> float:
    """Coerce an arbitrary value to a finite number.

    Finite ints and floats pass through. Strings are parsed from their leading
    numeric prefix (`"12.5kg"` -> 12.5). Anything else, including booleans,
    NaN, infinities and ints too large for a float, becomes 0.
    """

    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        try:
            as_float = float(value)
        except OverflowError:
            return 0
        return value if math.isfinite(as_float) else 0
    if isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value)
        if match is None:
            return 0
        parsed = float(match.group(0))
        return parsed if math.isfinite(parsed) else 0
    return 0


def coerce_chart_type(value: object) -> str:
    """Return `value` when it names a supported chart kind, else the default."""

    if isinstance(value, str) and value in CHART_TYPES:
        return value
    return DEFAULT_CHART_TYPE


def clean_label(value: object, fallback: str) -> str:
    """Stringify and trim a display label, using `fallback` when blank."""

    if value is None:
        return fallback
    text = str(value).strip()
    return text or fallback


def category_label(index: int) -> str:
    """Return the positional default for the category at `index`."""

    return f"Category {index + 1}"


def series_label(index: int) -> str:
    """Return the positional default for the series at `index`."""

    return f"Series {index + 1}"


def fit_length(values: list, length: int, pad) -> list:
    """Return a copy of `values` padded with `pad(i)` or truncated to `length`."""

    fitted = list(values[:length])
    while len(fitted) < length:
        fitted.append(pad(len(fitted)))
    return fitted


def create_series_id() -> str:
    """Generate an opaque series id (`series-<millis>-<6 base36 chars>`)."""

    suffix = "".join(random.choice(_ID_ALPHABET) for _ in range(6))
    return f"series-{int(time.time() * 1000)}-{suffix}"
