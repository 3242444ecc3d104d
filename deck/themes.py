"""Theme catalog loading and chart palette resolution.

Themes are declared in a YAML file (`settings.SLIDEDECK_THEMES_PATH`) so new
presets can be added without touching code.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from django.conf import settings

from chartdata.colors import normalize_hex_color, resolve_palette


@dataclass(frozen=True, slots=True)
class Theme:
    """A named visual preset for presentations.

    Attributes:
        id: Stable theme key stored on `Presentation.theme`.
        name: Display name.
        background: Slide background color.
        text_color: Default text color.
        accent_color: Accent color, also the first chart color by default.
        chart_palette: Resolved chart palette (never empty).
    """

    id: str
    name: str
    background: str
    text_color: str
    accent_color: str
    chart_palette: tuple[str, ...]


@lru_cache(maxsize=4)
def load_themes(path: str) -> dict[str, Theme]:
    """Load the theme catalog from a YAML file.

    Args:
        path: Filesystem path of the catalog.

    Returns:
        Mapping of theme id to Theme, in file order. A missing file yields an
        empty catalog.
    """

    catalog = Path(path)
    if not catalog.exists():
        return {}
    payload = yaml.safe_load(catalog.read_text(encoding="utf-8")) or {}
    themes: dict[str, Theme] = {}
    for raw in payload.get("themes") or []:
        theme = _theme_from_payload(raw)
        if theme is not None:
            themes[theme.id] = theme
    return themes


def get_theme(theme_id: str | None) -> Theme:
    """Return the theme for `theme_id`, falling back to the default theme."""

    themes = load_themes(str(settings.SLIDEDECK_THEMES_PATH))
    if theme_id and theme_id in themes:
        return themes[theme_id]
    if settings.SLIDEDECK_DEFAULT_THEME in themes:
        return themes[settings.SLIDEDECK_DEFAULT_THEME]
    return Theme(
        id="default",
        name="Default",
        background="#FFFFFF",
        text_color="#1F2937",
        accent_color=resolve_palette(settings.SLIDEDECK_CHART_PALETTE)[0],
        chart_palette=resolve_palette(settings.SLIDEDECK_CHART_PALETTE),
    )


def _theme_from_payload(raw: Any) -> Theme | None:
    if not isinstance(raw, dict) or not raw.get("id"):
        return None
    accent = normalize_hex_color(raw.get("accent_color"), "")
    declared = raw.get("chart_palette")
    if isinstance(declared, list) and declared:
        palette = resolve_palette(declared)
    else:
        palette = resolve_palette(
            [accent, *(color for color in settings.SLIDEDECK_CHART_PALETTE if normalize_hex_color(color, "") != accent)]
        )
    return Theme(
        id=str(raw["id"]),
        name=str(raw.get("name") or raw["id"]),
        background=normalize_hex_color(raw.get("background"), "#FFFFFF"),
        text_color=normalize_hex_color(raw.get("text_color"), "#1F2937"),
        accent_color=accent or palette[0],
        chart_palette=palette,
    )
