from __future__ import annotations

from typing import Any, Dict, List, Tuple

from .errors import RecordEditError
from .models import TYPE_OPTIONS

TABLE_HEADERS = ["Line", "Name", "Type", "UUID", "Mandatory"]


def _check_index(records: List[Dict[str, Any]], index: Any) -> int:
    if index is None or isinstance(index, bool):
        raise RecordEditError("Select a row to edit.")
    try:
        idx = int(index)
    except (TypeError, ValueError) as exc:
        raise RecordEditError(f"Invalid row: {index!r}") from exc
    if idx < 0 or idx >= len(records or []):
        raise RecordEditError(f"Row {idx + 1} does not exist.")
    return idx


def _replace_field(records: List[Dict[str, Any]], idx: int, field: str, value: Any) -> List[Dict[str, Any]]:
    updated = list(records)
    updated[idx] = {**records[idx], field: value}
    return updated


def set_record_type(records: List[Dict[str, Any]], index: Any, type_option: str) -> List[Dict[str, Any]]:
    """Return a copy of `records` with the type of one record changed."""
    idx = _check_index(records, index)
    if type_option not in TYPE_OPTIONS:
        raise RecordEditError(f"Unknown type {type_option!r}. Choose one of: {', '.join(TYPE_OPTIONS)}")
    return _replace_field(records, idx, "type", type_option)


def set_record_mandatory(records: List[Dict[str, Any]], index: Any, is_mandatory: bool) -> List[Dict[str, Any]]:
    """Return a copy of `records` with the mandatory flag of one record changed."""
    idx = _check_index(records, index)
    return _replace_field(records, idx, "is_mandatory", bool(is_mandatory))


def records_to_table(records: List[Dict[str, Any]]) -> List[List[Any]]:
    if not records:
        return []
    return [
        [r["line"], r["name"], r["type"], r["uuid"], bool(r["is_mandatory"])]
        for r in records
    ]


def row_choices(records: List[Dict[str, Any]]) -> List[Tuple[str, int]]:
    """Dropdown `(label, index)` pairs, one per record."""
    return [(f"{i + 1}. {r['line']} - {r['name']}", i) for i, r in enumerate(records or [])]
