"""Normalize arbitrary or partial chart input into a canonical `ChartRecord`.

Input comes from places we do not control: hand-authored element settings,
records written by older clients, or nothing at all. Normalization never
raises; every missing or malformed field is replaced with a positional or
palette-derived default.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .codec import encode_chart_record
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
from .variants import effective_variant, resolve_variant

logger = logging.getLogger(__name__)


def normalize_chart_data(
    data: Mapping[str, Any] | ChartRecord | None,
    palette: Iterable[object] | None = None,
    *,
    keep_variant_choices: bool = False,
) -> ChartRecord:
    """Build a canonical ChartRecord from partial input.

    Args:
        data: Partial chart data (mapping, ChartRecord, or None).
        palette: Fallback colors supplied by the theme.
        keep_variant_choices: Keep an explicit series variant when the chart
            kind lets users choose one (`columnLine`). By default every
            variant comes from the resolver table.

    Returns:
        A record satisfying every chart data invariant.
    """

    colors = resolve_palette(palette)
    source = _as_mapping(data)

    raw_type = source.get("type")
    chart_type = coerce_chart_type(raw_type)
    if raw_type not in (None, "", chart_type):
        logger.debug("Unsupported chart type %r replaced with %r", raw_type, chart_type)

    labels = _normalize_labels(source.get("labels"))
    count = len(labels)

    raw_datasets = source.get("datasets")
    if _is_sequence(raw_datasets) and raw_datasets:
        datasets = [
            _normalize_series(
                entry,
                index,
                chart_type=chart_type,
                count=count,
                palette=colors,
                keep_variant_choices=keep_variant_choices,
            )
            for index, entry in enumerate(raw_datasets)
        ]
    else:
        datasets = [new_series(0, chart_type=chart_type, count=count, palette=colors)]

    if chart_type == "pie" and len(datasets) > 1:
        logger.debug("Pie chart keeps the first of %d datasets", len(datasets))
        first = datasets[0]
        first.variant = "pie"
        first.segment_colors = fit_length(
            first.segment_colors or [], count, lambda j: palette_color(colors, j)
        )
        datasets = [first]

    for index, series in enumerate(datasets):
        series.data = fit_length(series.data, count, lambda _: 0)
        if series.variant == "pie":
            series.segment_colors = fit_length(
                series.segment_colors or [], count, lambda j, i=index: palette_color(colors, i + j)
            )
        else:
            series.segment_colors = None

    title = source.get("title")
    return ChartRecord(
        type=chart_type,
        title="" if title is None else str(title),
        labels=labels,
        datasets=datasets,
    )


def new_series(index: int, *, chart_type: str, count: int, palette: tuple[str, ...]) -> ChartSeries:
    """Create a fresh zero-filled series for position `index`.

    Args:
        index: Zero-based position the series will occupy.
        chart_type: Chart kind, used to resolve the variant.
        count: Number of categories (length of `data`).
        palette: Resolved palette.

    Returns:
        A new ChartSeries with a generated id and positional defaults.
    """

    variant = resolve_variant(chart_type, index)
    return ChartSeries(
        id=create_series_id(),
        label=series_label(index),
        color=palette_color(palette, index),
        variant=variant,
        data=[0] * count,
        segment_colors=[palette_color(palette, index + j) for j in range(count)] if variant == "pie" else None,
    )


def _normalize_series(
    entry: object,
    index: int,
    *,
    chart_type: str,
    count: int,
    palette: tuple[str, ...],
    keep_variant_choices: bool,
) -> ChartSeries:
    source = _as_mapping(entry)
    if keep_variant_choices:
        variant = effective_variant(chart_type, index, source.get("variant"))
    else:
        variant = resolve_variant(chart_type, index)

    raw_data = source.get("data")
    values = list(raw_data) if _is_sequence(raw_data) else []
    data = [coerce_number(values[j]) if j < len(values) else 0 for j in range(count)]

    segment_colors = None
    if variant == "pie":
        raw_colors = source.get("segmentColors", source.get("segment_colors"))
        supplied = list(raw_colors) if _is_sequence(raw_colors) else []
        segment_colors = [
            normalize_hex_color(supplied[j] if j < len(supplied) else None, palette_color(palette, index + j))
            for j in range(count)
        ]

    raw_id = source.get("id")
    return ChartSeries(
        id=str(raw_id) if raw_id else create_series_id(),
        label=clean_label(source.get("label"), series_label(index)),
        color=normalize_hex_color(source.get("color"), palette_color(palette, index)),
        variant=variant,
        data=data,
        segment_colors=segment_colors,
    )


def _normalize_labels(raw: object) -> list[str]:
    if not _is_sequence(raw) or not raw:
        return [category_label(0)]
    return [clean_label(label, category_label(index)) for index, label in enumerate(raw)]


def _as_mapping(value: object) -> Mapping[str, Any]:
    if isinstance(value, ChartRecord):
        return encode_chart_record(value)
    if isinstance(value, Mapping):
        return value
    return {}


def _is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))
