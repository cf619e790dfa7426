from __future__ import annotations

import json
import os
import tempfile
from typing import Any, Dict, List

from pydantic import ValidationError

from .errors import InputFormatError
from .models import InputRecord

DEFAULT_EXPORT_NAME = "formatted_output.json"


def _reject_constant(token: str):
    raise ValueError(f"Non-standard JSON token: {token}")


def parse_input_text(text: str) -> List[Dict[str, str]]:
    """Parse pasted text into a list of `{line, name}` dicts.

    Blank text yields an empty list. Anything else must be a JSON array whose
    elements are objects carrying both a `line` and a `name` key.
    """
    if text is None or not text.strip():
        return []

    try:
        # Numbers keep their literal text; NaN and Infinity are not JSON.
        parsed = json.loads(text, parse_int=str, parse_float=str, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InputFormatError("Invalid JSON format. Please check your input.") from exc

    if not isinstance(parsed, list):
        raise InputFormatError("Input must be an array of objects")

    if not all(isinstance(item, dict) and "line" in item and "name" in item for item in parsed):
        raise InputFormatError('Each item must have "line" and "name" properties')

    records: List[Dict[str, str]] = []
    for idx, item in enumerate(parsed):
        try:
            record = InputRecord.model_validate(item)
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
            raise InputFormatError(
                f"Item {idx + 1}: {fields or 'fields'} must be a string or number"
            ) from exc
        records.append(record.model_dump())
    return records


def serialize_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_export_file(text: str, file_name: str | None = None) -> str:
    """Write exported JSON text to the temp directory and return the path."""
    name = (file_name or "").strip() or DEFAULT_EXPORT_NAME
    # Keep the file inside the temp directory
    name = os.path.basename(name) or DEFAULT_EXPORT_NAME
    if not name.lower().endswith(".json"):
        name += ".json"

    path = os.path.join(tempfile.gettempdir(), name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path
