"""Database models for presentations and their slide elements."""

from __future__ import annotations

from collections.abc import Mapping

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from chartdata.colors import is_hex_color
from chartdata.dto import CHART_TYPES

ELEMENT_TYPE_CHOICES: tuple[tuple[str, str], ...] = (
    ("text", "Text"),
    ("shape", "Shape"),
    ("image", "Image"),
    ("chart", "Chart"),
)


def _default_theme() -> str:
    """Return the configured default theme id."""

    return settings.SLIDEDECK_DEFAULT_THEME


class Presentation(models.Model):
    """A slide deck owned by a single user."""

    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="presentations")
    title = models.CharField(max_length=200, default="Untitled presentation")
    theme = models.CharField(max_length=40, default=_default_theme)
    chart_palette = models.JSONField(
        default=list,
        blank=True,
        help_text="Optional list of hex colors overriding the theme's chart palette.",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        """Return the presentation title for display contexts."""

        return self.title

    def clean(self) -> None:
        """Reject chart palettes that are not lists of hex colors."""

        if not isinstance(self.chart_palette, list):
            raise ValidationError({"chart_palette": "Chart palette must be a list of hex colors."})
        invalid = [color for color in self.chart_palette if not is_hex_color(color)]
        if invalid:
            raise ValidationError({"chart_palette": f"Invalid chart palette colors: {invalid!r}."})


class SlideElement(models.Model):
    """A visual element placed on a slide.

    Element-specific state lives in `settings`. Chart elements keep their
    canonical chart data under `settings["chartData"]` and the chart kind
    under `settings["chartType"]`.
    """

    presentation = models.ForeignKey(Presentation, on_delete=models.CASCADE, related_name="elements")
    slide_index = models.PositiveIntegerField(default=0)
    element_type = models.CharField(max_length=16, choices=ELEMENT_TYPE_CHOICES)
    settings = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("presentation", "slide_index", "id")
        indexes = [models.Index(fields=["presentation", "slide_index"], name="deck_element_slide_idx")]

    def __str__(self) -> str:
        """Return a concise display string for admin/debug usage."""

        return f"SlideElement({self.element_type}, presentation={self.presentation_id}, slide={self.slide_index})"

    @property
    def is_chart(self) -> bool:
        """Return True for chart elements."""

        return self.element_type == "chart"

    @property
    def chart_data(self) -> object:
        """Return the raw stored chart data (may be partial or missing)."""

        return (self.settings or {}).get("chartData")

    def clean(self) -> None:
        """Validate the shape of stored chart settings."""

        if not isinstance(self.settings, Mapping):
            raise ValidationError({"settings": "Element settings must be a JSON object."})
        if not self.is_chart:
            return
        chart_type = self.settings.get("chartType")
        if chart_type is not None and chart_type not in CHART_TYPES:
            raise ValidationError({"settings": f"Unsupported chart type: {chart_type!r}."})
        chart_data = self.settings.get("chartData")
        if chart_data is not None and not isinstance(chart_data, Mapping):
            raise ValidationError({"settings": "chartData must be a JSON object."})
