"""Record types for editable chart data.

A chart element stores one `ChartRecord`: shared category labels plus one or
more `ChartSeries`. Records are deliberately mutable so edit producers can
change a scratch copy in place (see `chartdata.clone`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ChartType = Literal["bar", "line", "area", "pie", "columnLine"]
SeriesVariant = Literal["bar", "line", "area", "pie"]

CHART_TYPES: tuple[str, ...] = ("bar", "line", "area", "pie", "columnLine")
DEFAULT_CHART_TYPE: ChartType = "bar"

DEFAULT_COLOR = "#2563EB"
DEFAULT_CHART_PALETTE: tuple[str, ...] = (
    "#2563EB",
    "#F97316",
    "#34D399",
    "#FBBF24",
    "#C084FC",
    "#F472B6",
)


@dataclass(slots=True)
class ChartSeries:
    """One named sequence of values, one value per category.

    Args:
        id: Opaque identifier, generated once when the series is created.
        label: Display label (legend entry).
        color: Canonical `#RRGGBB` color.
        variant: Rendering treatment for this series.
        data: Numeric values, aligned with the record's labels.
        segment_colors: Per-slice colors, only present for pie series.
    """

    id: str
    label: str
    color: str
    variant: str
    data: list[float] = field(default_factory=list)
    segment_colors: list[str] | None = None


@dataclass(slots=True)
class ChartRecord:
    """Canonical chart data owned by a chart element.

    Args:
        type: Chart kind (one of `CHART_TYPES`).
        title: Free-text title, may be empty.
        labels: Category labels shared by every series.
        datasets: Series in display order.
    """

    type: str = DEFAULT_CHART_TYPE
    title: str = ""
    labels: list[str] = field(default_factory=list)
    datasets: list[ChartSeries] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class VariantOption:
    """A user-selectable series variant for a chart type."""

    value: str
    label: str

    def as_json(self) -> dict[str, str]:
        """Return a JSON-serializable representation."""

        return {"value": self.value, "label": self.label}
