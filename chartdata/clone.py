"""Copy chart records so edits never alias the committed draft."""

from __future__ import annotations

from .dto import ChartRecord, ChartSeries


def clone_chart_data(record: ChartRecord | None) -> ChartRecord | None:
    """Return an independent copy of `record`.

    The copy has its own `labels` and `datasets` lists, and every series has
    its own `data` and `segment_colors` lists, so a producer may edit it in
    place without touching the original. Returns None for None.
    """

    if record is None:
        return None
    return ChartRecord(
        type=record.type,
        title=record.title,
        labels=list(record.labels or ()),
        datasets=[
            ChartSeries(
                id=series.id,
                label=series.label,
                color=series.color,
                variant=series.variant,
                data=list(series.data or ()),
                segment_colors=list(series.segment_colors) if series.segment_colors is not None else None,
            )
            for series in (record.datasets or ())
        ],
    )
