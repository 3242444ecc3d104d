"""Re-enforce chart data invariants on an interactively edited draft.

Producers edit a scratch copy of the draft in place and may leave it
transiently inconsistent (a cleared label, a typed-over number, a removed
series). `sanitize_chart_data` rebuilds a canonical record from that draft
before it is persisted. Unlike normalization, structurally valid values that
are already present in the draft are trusted.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .codec import decode_chart_record
from .coerce import (
    category_label,
    clean_label,
    coerce_chart_type,
    coerce_number,
    create_series_id,
    fit_length,
    series_label,
)
from .colors import normalize_hex_color, palette_color, resolve_palette
from .dto import ChartRecord, ChartSeries
from .normalizer import new_series, normalize_chart_data
from .variants import effective_variant


def sanitize_chart_data(
    draft: ChartRecord | Mapping[str, Any] | None,
    palette: Iterable[object] | None = None,
) -> ChartRecord:
    """Return a canonical copy of an edited chart draft.

    Args:
        draft: Record produced by a prior normalize/sanitize plus in-place
            edits. Stored mappings are decoded first; None normalizes to the
            minimal record.
        palette: Fallback colors supplied by the theme.

    Returns:
        A new ChartRecord satisfying every chart data invariant. The draft is
        not modified. Sanitizing a sanitized record returns an equal record.
    """

    if draft is None:
        return normalize_chart_data(None, palette)
    if isinstance(draft, Mapping):
        draft = decode_chart_record(draft)

    colors = resolve_palette(palette)
    chart_type = coerce_chart_type(draft.type)

    labels = [clean_label(label, category_label(index)) for index, label in enumerate(draft.labels or ())]
    if not labels:
        labels = [category_label(0)]
    count = len(labels)

    source_series = list(draft.datasets or ())
    if chart_type == "pie":
        source_series = source_series[:1]

    datasets = [
        _sanitize_series(series, index, chart_type=chart_type, count=count, palette=colors)
        for index, series in enumerate(source_series)
    ]
    if not datasets:
        datasets = [new_series(0, chart_type=chart_type, count=count, palette=colors)]

    return ChartRecord(
        type=chart_type,
        title="" if draft.title is None else str(draft.title),
        labels=labels,
        datasets=datasets,
    )


def _sanitize_series(
    series: ChartSeries,
    index: int,
    *,
    chart_type: str,
    count: int,
    palette: tuple[str, ...],
) -> ChartSeries:
    variant = effective_variant(chart_type, index, series.variant)

    segment_colors = None
    if variant == "pie":
        existing = list(series.segment_colors or ())
        segment_colors = [
            normalize_hex_color(existing[j] if j < len(existing) else None, palette_color(palette, j))
            for j in range(count)
        ]

    return ChartSeries(
        id=str(series.id) if series.id else create_series_id(),
        label=clean_label(series.label, series_label(index)),
        color=normalize_hex_color(series.color, palette_color(palette, index)),
        variant=variant,
        data=fit_length([coerce_number(value) for value in (series.data or ())], count, lambda _: 0),
        segment_colors=segment_colors,
    )
