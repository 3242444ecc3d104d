"""Edit producers and guard predicates for interactive chart editing.

Each factory returns a producer: a callable that performs exactly one edit on
a scratch ChartRecord in place and returns it. Producers never validate the
whole record; `sanitize_chart_data` runs after every producer. Out-of-range
indexes turn a producer into a no-op.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .coerce import category_label, coerce_number
from .colors import normalize_hex_color, palette_color, resolve_palette
from .dto import ChartRecord
from .normalizer import new_series
from .variants import resolve_variant

Producer = Callable[[ChartRecord], ChartRecord | None]


def can_add_series(record: ChartRecord | None) -> bool:
    """Return True when a series may be appended (never for pie charts)."""

    return record is not None and record.type != "pie"


def can_remove_series(record: ChartRecord | None) -> bool:
    """Return True when removing a series would leave at least one."""

    return record is not None and len(record.datasets) > 1


def can_remove_category(record: ChartRecord | None) -> bool:
    """Return True when removing a category would leave at least one."""

    return record is not None and len(record.labels) > 1


def set_title(title: str) -> Producer:
    """Set the chart title."""

    def produce(draft: ChartRecord) -> ChartRecord:
        draft.title = title
        return draft

    return produce


def set_chart_type(chart_type: str) -> Producer:
    """Switch the chart kind and reset every series to the kind's default variant.

    Sanitization then adapts the rest (pie collapse, slice colors).
    """

    def produce(draft: ChartRecord) -> ChartRecord:
        if chart_type == draft.type:
            return draft
        draft.type = chart_type
        for index, series in enumerate(draft.datasets):
            series.variant = resolve_variant(chart_type, index)
        return draft

    return produce


def rename_category(index: int, label: str) -> Producer:
    """Replace the category label at `index`."""

    def produce(draft: ChartRecord) -> ChartRecord:
        if 0 <= index < len(draft.labels):
            draft.labels[index] = label
        return draft

    return produce


def remove_category(index: int) -> Producer:
    """Remove the category at `index` and its value from every series.

    Pie series also lose the matching slice color. The last remaining
    category is never removed.
    """

    def produce(draft: ChartRecord) -> ChartRecord:
        if len(draft.labels) <= 1 or not 0 <= index < len(draft.labels):
            return draft
        del draft.labels[index]
        for series in draft.datasets:
            if index < len(series.data):
                del series.data[index]
            if draft.type == "pie" and series.segment_colors is not None and index < len(series.segment_colors):
                del series.segment_colors[index]
        return draft

    return produce


def add_category(palette: Iterable[object] | None = None) -> Producer:
    """Append a `Category <n>` label with a zero value in every series.

    Pie series also receive a palette-derived slice color.
    """

    colors = resolve_palette(palette)

    def produce(draft: ChartRecord) -> ChartRecord:
        draft.labels.append(category_label(len(draft.labels)))
        for series in draft.datasets:
            series.data.append(0)
            if draft.type == "pie":
                segment_colors = list(series.segment_colors or ())
                while len(segment_colors) < len(draft.labels):
                    segment_colors.append(palette_color(colors, len(segment_colors)))
                series.segment_colors = segment_colors
        return draft

    return produce


def rename_series(index: int, label: str) -> Producer:
    """Replace the label of the series at `index`."""

    def produce(draft: ChartRecord) -> ChartRecord:
        if 0 <= index < len(draft.datasets):
            draft.datasets[index].label = label
        return draft

    return produce


def recolor_series(index: int, color: str, palette: Iterable[object] | None = None) -> Producer:
    """Set the color of the series at `index`.

    An invalid color keeps the current one (or the palette default when the
    current color is missing).
    """

    colors = resolve_palette(palette)

    def produce(draft: ChartRecord) -> ChartRecord:
        if 0 <= index < len(draft.datasets):
            series = draft.datasets[index]
            series.color = normalize_hex_color(color, series.color or palette_color(colors, index))
        return draft

    return produce


def set_series_variant(index: int, variant: str) -> Producer:
    """Set the variant of the series at `index`.

    Only chart kinds with a free variant choice (`columnLine`) keep the
    value after sanitization.
    """

    def produce(draft: ChartRecord) -> ChartRecord:
        if 0 <= index < len(draft.datasets):
            draft.datasets[index].variant = variant
        return draft

    return produce


def set_data_value(series_index: int, category_index: int, value: object) -> Producer:
    """Set one value, coercing it to a finite number (0 when not numeric)."""

    def produce(draft: ChartRecord) -> ChartRecord:
        if not 0 <= series_index < len(draft.datasets):
            return draft
        series = draft.datasets[series_index]
        if 0 <= category_index < len(series.data):
            series.data[category_index] = coerce_number(value)
        return draft

    return produce


def recolor_slice(
    series_index: int,
    category_index: int,
    color: str,
    palette: Iterable[object] | None = None,
) -> Producer:
    """Set one pie slice color. A no-op for non-pie charts."""

    colors = resolve_palette(palette)

    def produce(draft: ChartRecord) -> ChartRecord:
        if draft.type != "pie" or not 0 <= series_index < len(draft.datasets):
            return draft
        if not 0 <= category_index < len(draft.labels):
            return draft
        series = draft.datasets[series_index]
        segment_colors = list(series.segment_colors or ())
        while len(segment_colors) < len(draft.labels):
            segment_colors.append(palette_color(colors, len(segment_colors)))
        segment_colors[category_index] = normalize_hex_color(
            color, segment_colors[category_index] or palette_color(colors, category_index)
        )
        series.segment_colors = segment_colors
        return draft

    return produce


def add_series(palette: Iterable[object] | None = None) -> Producer:
    """Append a zero-filled series with a fresh id (not allowed for pie)."""

    colors = resolve_palette(palette)

    def produce(draft: ChartRecord) -> ChartRecord:
        if draft.type == "pie":
            return draft
        draft.datasets.append(
            new_series(len(draft.datasets), chart_type=draft.type, count=len(draft.labels), palette=colors)
        )
        return draft

    return produce


def remove_series(index: int) -> Producer:
    """Remove the series at `index`, never the last remaining one."""

    def produce(draft: ChartRecord) -> ChartRecord:
        if len(draft.datasets) <= 1 or not 0 <= index < len(draft.datasets):
            return draft
        del draft.datasets[index]
        return draft

    return produce
