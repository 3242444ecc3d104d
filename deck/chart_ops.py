"""Decode JSON chart edit requests into ChartEditor calls.

The browser format panel sends one operation per request, e.g.
`{"op": "set_data_value", "seriesIndex": 0, "categoryIndex": 2, "value": "12"}`.
Argument names follow the client's camelCase JSON.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from chartdata.dto import ChartRecord
from chartdata.editor import ChartEditor


class ChartOperationError(ValueError):
    """Raised when a chart edit request is unknown or malformed."""


def _int_arg(payload: Mapping[str, Any], name: str) -> int:
    value = payload.get(name)
    if isinstance(value, bool):
        raise ChartOperationError(f"Argument {name!r} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ChartOperationError(f"Argument {name!r} must be an integer.") from exc
    raise ChartOperationError(f"Argument {name!r} must be an integer.")


def _str_arg(payload: Mapping[str, Any], name: str) -> str:
    value = payload.get(name)
    if value is None:
        raise ChartOperationError(f"Missing argument {name!r}.")
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise ChartOperationError(f"Argument {name!r} must be a string.")
    return str(value)


def _value_arg(payload: Mapping[str, Any], name: str) -> object:
    if name not in payload:
        raise ChartOperationError(f"Missing argument {name!r}.")
    return payload[name]


_OPERATIONS: dict[str, Callable[[ChartEditor, Mapping[str, Any]], ChartRecord | None]] = {
    "set_title": lambda editor, p: editor.set_title(_str_arg(p, "title")),
    "set_chart_type": lambda editor, p: editor.set_chart_type(_str_arg(p, "type")),
    "rename_category": lambda editor, p: editor.rename_category(_int_arg(p, "index"), _str_arg(p, "label")),
    "remove_category": lambda editor, p: editor.remove_category(_int_arg(p, "index")),
    "add_category": lambda editor, p: editor.add_category(),
    "rename_series": lambda editor, p: editor.rename_series(_int_arg(p, "index"), _str_arg(p, "label")),
    "recolor_series": lambda editor, p: editor.recolor_series(_int_arg(p, "index"), _str_arg(p, "color")),
    "set_series_variant": lambda editor, p: editor.set_series_variant(_int_arg(p, "index"), _str_arg(p, "variant")),
    "set_data_value": lambda editor, p: editor.set_data_value(
        _int_arg(p, "seriesIndex"), _int_arg(p, "categoryIndex"), _value_arg(p, "value")
    ),
    "recolor_slice": lambda editor, p: editor.recolor_slice(
        _int_arg(p, "seriesIndex"), _int_arg(p, "categoryIndex"), _str_arg(p, "color")
    ),
    "add_series": lambda editor, p: editor.add_series(),
    "remove_series": lambda editor, p: editor.remove_series(_int_arg(p, "index")),
}

OPERATION_NAMES: tuple[str, ...] = tuple(_OPERATIONS)


def apply_chart_operation(editor: ChartEditor, payload: Mapping[str, Any]) -> ChartRecord:
    """Apply the operation described by `payload` to a loaded editor.

    Args:
        editor: Editor with a loaded draft.
        payload: Decoded JSON body with an `op` key plus arguments.

    Returns:
        The editor's draft after the operation. Guarded operations that are
        not allowed (e.g. removing the last series) leave it unchanged.

    Raises:
        ChartOperationError: When the operation is unknown, an argument is
            missing or ill-typed, or the editor has no draft.
    """

    if not isinstance(payload, Mapping):
        raise ChartOperationError("Chart operation must be a JSON object.")
    name = payload.get("op")
    handler = _OPERATIONS.get(name) if isinstance(name, str) else None
    if handler is None:
        raise ChartOperationError(
            f"Unknown chart operation: {name!r}. Expected one of: {', '.join(OPERATION_NAMES)}."
        )
    if editor.draft is None:
        raise ChartOperationError("No chart data is loaded.")
    handler(editor, payload)
    return editor.draft
