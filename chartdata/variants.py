"""Series variant rules per chart type.

Only `columnLine` (a dual-axis column + line combo) lets users pick a variant
per series. Every other chart kind renders all of its series the same way.
"""

from __future__ import annotations

from .dto import VariantOption

_FIXED_VARIANTS: dict[str, str] = {
    "bar": "bar",
    "line": "bar",
    "area": "area",
    "pie": "pie",
}

_VARIANT_OPTIONS: dict[str, tuple[VariantOption, ...]] = {
    "bar": (VariantOption("bar", "Bar"),),
    "line": (VariantOption("bar", "Bar"),),
    "area": (VariantOption("area", "Area"),),
    "pie": (VariantOption("pie", "Slice"),),
    "columnLine": (VariantOption("bar", "Column"), VariantOption("line", "Line")),
}


def resolve_variant(chart_type: str, index: int = 0) -> str:
    """Return the variant a series at `index` must use for `chart_type`.

    Args:
        chart_type: Chart kind.
        index: Zero-based series position.

    Returns:
        The resolved variant. For `columnLine` the second series is a line and
        every other series a column; unknown kinds resolve to `bar`.
    """

    if chart_type == "columnLine":
        return "line" if index == 1 else "bar"
    return _FIXED_VARIANTS.get(chart_type, "bar")


def variant_options(chart_type: str) -> tuple[VariantOption, ...]:
    """Return the variants a user may pick for series of `chart_type`."""

    return _VARIANT_OPTIONS.get(chart_type, ())


def allows_variant_choice(chart_type: str) -> bool:
    """Return True when series of `chart_type` may carry different variants."""

    return len(variant_options(chart_type)) > 1


def effective_variant(chart_type: str, index: int, requested: object = None) -> str:
    """Return `requested` when the chart kind permits it, else the resolved variant."""

    if allows_variant_choice(chart_type) and requested in {option.value for option in variant_options(chart_type)}:
        return str(requested)
    return resolve_variant(chart_type, index)
