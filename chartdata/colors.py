"""Hex color canonicalization and palette helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .dto import DEFAULT_COLOR

_HEX6_RE = re.compile(r"^#[0-9a-fA-F]{6}$")
_HEX3_RE = re.compile(r"^#[0-9a-fA-F]{3}$")


def normalize_hex_color(value: object, fallback: str = "#000000") -> str:
    """Return `value` as an uppercase `#RRGGBB` string.

    Args:
        value: Candidate color, with or without a leading `#`. Three-digit
            forms are expanded (`#abc` -> `#AABBCC`).
        fallback: Returned unchanged when `value` is not a valid hex color.

    Returns:
        The canonical color, or `fallback`.
    """

    if not value or not isinstance(value, str):
        return fallback
    prefixed = value if value.startswith("#") else f"#{value}"
    if _HEX6_RE.match(prefixed):
        return prefixed.upper()
    if _HEX3_RE.match(prefixed):
        return "#" + "".join(char * 2 for char in prefixed[1:]).upper()
    return fallback


def is_hex_color(value: object) -> bool:
    """Return True when `value` canonicalizes without falling back."""

    return normalize_hex_color(value, "") != ""


def resolve_palette(palette: Iterable[object] | None) -> tuple[str, ...]:
    """Canonicalize a palette, dropping invalid entries.

    Args:
        palette: Ordered colors supplied by the theme (may be empty or None).

    Returns:
        A non-empty tuple of canonical colors. When no usable entry remains,
        the single built-in default color is used.
    """

    if palette is None or isinstance(palette, str):
        return (DEFAULT_COLOR,)
    colors = tuple(color for color in (normalize_hex_color(entry, "") for entry in palette) if color)
    return colors or (DEFAULT_COLOR,)


def palette_color(palette: tuple[str, ...], index: int) -> str:
    """Return the palette entry for `index`, wrapping around."""

    return palette[index % len(palette)]
