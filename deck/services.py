"""Service-layer functions for the deck app.

Services coordinate Django persistence (ORM, transactions) with the pure
`chartdata` engine. The engine never touches the database; these helpers
load an element's stored chart data into a `ChartEditor` and write every
sanitized record back to the element's settings.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from django.db import transaction

from chartdata import mutations
from chartdata.codec import encode_chart_record
from chartdata.colors import resolve_palette
from chartdata.dto import ChartRecord
from chartdata.editor import ChartEditor
from chartdata.normalizer import normalize_chart_data
from chartdata.variants import variant_options
from deck.chart_ops import apply_chart_operation
from deck.models import Presentation, SlideElement
from deck.themes import get_theme

logger = logging.getLogger(__name__)


def chart_palette_for(presentation: Presentation) -> tuple[str, ...]:
    """Return the chart palette for a presentation.

    An explicit `Presentation.chart_palette` wins over the theme palette.
    """

    if presentation.chart_palette:
        return resolve_palette(presentation.chart_palette)
    return get_theme(presentation.theme).chart_palette


def load_chart_record(element: SlideElement, *, palette: tuple[str, ...] | None = None) -> ChartRecord:
    """Normalize an element's stored chart data into a canonical record.

    Stored records were written by this engine, so permitted per-series
    variant choices are kept.
    """

    if palette is None:
        palette = chart_palette_for(element.presentation)
    return normalize_chart_data(element.chart_data, palette, keep_variant_choices=True)


def store_chart_record(element: SlideElement, record: ChartRecord) -> None:
    """Write a sanitized record into the element's settings.

    Writing the same record twice leaves the element unchanged.
    """

    settings = dict(element.settings or {})
    settings["chartData"] = encode_chart_record(record)
    settings["chartType"] = record.type
    element.settings = settings
    element.save(update_fields=["settings", "updated_at"])
    logger.info(
        "Stored chart data for element %s (type=%s, categories=%d, series=%d)",
        element.pk,
        record.type,
        len(record.labels),
        len(record.datasets),
    )


def chart_payload(record: ChartRecord) -> dict[str, Any]:
    """Build the JSON payload describing a chart draft and its edit affordances."""

    return {
        "chartData": encode_chart_record(record),
        "chartType": record.type,
        "variantOptions": [option.as_json() for option in variant_options(record.type)],
        "guards": {
            "canAddSeries": mutations.can_add_series(record),
            "canRemoveSeries": mutations.can_remove_series(record),
            "canRemoveCategory": mutations.can_remove_category(record),
        },
    }


class ChartEditSession:
    """A ChartEditor bound to one persisted chart element.

    Every sanitized record the editor emits is stored on the element.

    Args:
        element: Chart element whose settings own the chart data.
    """

    def __init__(self, element: SlideElement) -> None:
        self.element = element
        self.editor = ChartEditor(
            chart_palette_for(element.presentation),
            emit=self._store,
            keep_variant_choices=True,
        )
        self.editor.load(element.pk, element.chart_data)

    @property
    def draft(self) -> ChartRecord | None:
        return self.editor.draft

    def _store(self, record: ChartRecord) -> None:
        store_chart_record(self.element, record)


def edit_chart_element(*, element: SlideElement, operation: Mapping[str, Any]) -> ChartRecord:
    """Apply one JSON edit operation to a chart element and persist the result.

    The element row is locked for the duration of the edit so rapid edits to
    the same element apply one after another.

    Args:
        element: Chart element to edit.
        operation: Decoded request body, e.g. `{"op": "add_series"}`.

    Returns:
        The sanitized record now stored on the element.

    Raises:
        ChartOperationError: When the operation is unknown or malformed.
    """

    with transaction.atomic():
        locked = SlideElement.objects.select_for_update().select_related("presentation").get(pk=element.pk)
        session = ChartEditSession(locked)
        record = apply_chart_operation(session.editor, operation)
    element.settings = locked.settings
    return record
