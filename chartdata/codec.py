"""Encoding/decoding helpers for storing ChartRecord values as JSON."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .dto import DEFAULT_CHART_TYPE, ChartRecord, ChartSeries


def encode_chart_record(record: ChartRecord) -> dict[str, Any]:
    """Encode a ChartRecord into a JSON-serializable dictionary.

    Args:
        record: ChartRecord to encode.

    Returns:
        Dict payload safe for JSONField storage. `segmentColors` is only
        present on series that carry slice colors.
    """

    datasets: list[dict[str, Any]] = []
    for series in record.datasets:
        payload: dict[str, Any] = {
            "id": series.id,
            "label": series.label,
            "color": series.color,
            "variant": series.variant,
            "data": list(series.data),
        }
        if series.segment_colors is not None:
            payload["segmentColors"] = list(series.segment_colors)
        datasets.append(payload)
    return {
        "type": record.type,
        "title": record.title,
        "labels": list(record.labels),
        "datasets": datasets,
    }


def decode_chart_record(payload: Mapping[str, Any]) -> ChartRecord:
    """Decode a ChartRecord from a stored payload dictionary.

    Decoding is structural only: values are copied into a ChartRecord without
    enforcing chart invariants. Pass the result through
    `sanitize_chart_data` before trusting it.

    Args:
        payload: JSONField payload previously produced by `encode_chart_record`.

    Returns:
        ChartRecord instance.

    Raises:
        ValueError: When `payload` is not a mapping.
    """

    if not isinstance(payload, Mapping):
        raise ValueError(f"Chart data payload must be a mapping, got {type(payload).__name__}.")

    datasets = []
    for entry in _as_list(payload.get("datasets")):
        if not isinstance(entry, Mapping):
            continue
        segment_colors = entry.get("segmentColors")
        datasets.append(
            ChartSeries(
                id=str(entry.get("id") or ""),
                label=_as_text(entry.get("label")),
                color=_as_text(entry.get("color")),
                variant=_as_text(entry.get("variant")),
                data=_as_list(entry.get("data")),
                segment_colors=list(segment_colors) if isinstance(segment_colors, (list, tuple)) else None,
            )
        )
    return ChartRecord(
        type=str(payload.get("type") or DEFAULT_CHART_TYPE),
        title=_as_text(payload.get("title")),
        labels=[_as_text(label) for label in _as_list(payload.get("labels"))],
        datasets=datasets,
    )


def _as_list(value: object) -> list:
    """Copy list-like values, treating anything else as empty."""

    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _as_text(value: object) -> str:
    """Stringify a stored value, mapping None to an empty string."""

    if value is None:
        return ""
    return str(value)
