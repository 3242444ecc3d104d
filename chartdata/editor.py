"""Draft ownership for interactive chart editing.

`ChartEditor` holds the draft for one chart element at a time and applies
each edit as clone -> producer -> sanitize -> store -> emit. Producers only
ever see a clone, so the last committed record is never aliased by an edit in
progress.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from . import mutations
from .clone import clone_chart_data
from .colors import resolve_palette
from .dto import ChartRecord, VariantOption
from .mutations import Producer
from .normalizer import normalize_chart_data
from .sanitizer import sanitize_chart_data
from .variants import variant_options

logger = logging.getLogger(__name__)

Emitter = Callable[[ChartRecord], None]


class ChartEditor:
    """Apply one edit at a time to a chart draft and emit the sanitized result.

    Args:
        palette: Fallback colors supplied by the theme.
        emit: Called with every sanitized record. Emission is fire-and-forget;
            re-emitting the same record must be harmless.
        keep_variant_choices: Passed to the normalizer when loading stored data.
    """

    def __init__(
        self,
        palette: Iterable[object] | None = None,
        emit: Emitter | None = None,
        *,
        keep_variant_choices: bool = False,
    ) -> None:
        self.palette = resolve_palette(palette)
        self._emit = emit
        self._keep_variant_choices = keep_variant_choices
        self._element_key: Hashable | None = None
        self._draft: ChartRecord | None = None

    @property
    def draft(self) -> ChartRecord | None:
        """The last sanitized (or freshly normalized) record."""

        return self._draft

    @property
    def element_key(self) -> Hashable | None:
        """Identity of the element the draft belongs to."""

        return self._element_key

    def load(
        self,
        element_key: Hashable,
        data: Mapping[str, Any] | ChartRecord | None,
        *,
        force: bool = False,
    ) -> ChartRecord:
        """Bind the editor to an element and normalize its stored chart data.

        Switching to a different element always discards the previous draft.
        Reloading the same element keeps the current draft unless `force`.
        """

        if force or self._draft is None or element_key != self._element_key:
            self._element_key = element_key
            self._draft = normalize_chart_data(
                data, self.palette, keep_variant_choices=self._keep_variant_choices
            )
        return self._draft

    def commit(self, producer: Producer) -> ChartRecord | None:
        """Apply `producer` to a clone of the draft, sanitize, store and emit.

        Returns:
            The new draft, or None when nothing has been loaded.
        """

        if self._draft is None:
            return None
        base = clone_chart_data(self._draft)
        produced = producer(base)
        sanitized = sanitize_chart_data(produced if produced is not None else base, self.palette)
        self._draft = sanitized
        if self._emit is not None:
            self._emit(sanitized)
        return sanitized

    @property
    def variant_options(self) -> tuple[VariantOption, ...]:
        if self._draft is None:
            return ()
        return variant_options(self._draft.type)

    @property
    def can_add_series(self) -> bool:
        return mutations.can_add_series(self._draft)

    @property
    def can_remove_series(self) -> bool:
        return mutations.can_remove_series(self._draft)

    @property
    def can_remove_category(self) -> bool:
        return mutations.can_remove_category(self._draft)

    def set_title(self, title: str) -> ChartRecord | None:
        return self.commit(mutations.set_title(title))

    def set_chart_type(self, chart_type: str) -> ChartRecord | None:
        return self.commit(mutations.set_chart_type(chart_type))

    def rename_category(self, index: int, label: str) -> ChartRecord | None:
        return self.commit(mutations.rename_category(index, label))

    def remove_category(self, index: int) -> ChartRecord | None:
        if not self.can_remove_category:
            logger.debug("Ignoring remove_category(%s): last category", index)
            return self._draft
        return self.commit(mutations.remove_category(index))

    def add_category(self) -> ChartRecord | None:
        return self.commit(mutations.add_category(self.palette))

    def rename_series(self, index: int, label: str) -> ChartRecord | None:
        return self.commit(mutations.rename_series(index, label))

    def recolor_series(self, index: int, color: str) -> ChartRecord | None:
        return self.commit(mutations.recolor_series(index, color, self.palette))

    def set_series_variant(self, index: int, variant: str) -> ChartRecord | None:
        return self.commit(mutations.set_series_variant(index, variant))

    def set_data_value(self, series_index: int, category_index: int, value: object) -> ChartRecord | None:
        return self.commit(mutations.set_data_value(series_index, category_index, value))

    def recolor_slice(self, series_index: int, category_index: int, color: str) -> ChartRecord | None:
        return self.commit(mutations.recolor_slice(series_index, category_index, color, self.palette))

    def add_series(self) -> ChartRecord | None:
        if not self.can_add_series:
            logger.debug("Ignoring add_series: not allowed for this chart")
            return self._draft
        return self.commit(mutations.add_series(self.palette))

    def remove_series(self, index: int) -> ChartRecord | None:
        if not self.can_remove_series:
            logger.debug("Ignoring remove_series(%s): last series", index)
            return self._draft
        return self.commit(mutations.remove_series(index))
