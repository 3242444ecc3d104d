"""Chart data consistency engine for slide chart elements.

This package owns the canonical shape of a chart element's data and the
rules that keep it consistent while users edit it. It operates on in-memory
values only: it must not import Django or perform any I/O.
"""

from .clone import clone_chart_data
from .codec import decode_chart_record, encode_chart_record
from .colors import normalize_hex_color, resolve_palette
from .dto import ChartRecord, ChartSeries, VariantOption
from .editor import ChartEditor
from .normalizer import normalize_chart_data
from .sanitizer import sanitize_chart_data
from .variants import resolve_variant, variant_options

__all__ = [
    "ChartEditor",
    "ChartRecord",
    "ChartSeries",
    "VariantOption",
    "clone_chart_data",
    "decode_chart_record",
    "encode_chart_record",
    "normalize_chart_data",
    "normalize_hex_color",
    "resolve_palette",
    "resolve_variant",
    "sanitize_chart_data",
    "variant_options",
]
