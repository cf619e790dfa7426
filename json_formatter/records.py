from __future__ import annotations

from typing import Any, Dict, List

from .errors import GenerationError
from .identifiers import new_uuid
from .models import DEFAULT_TYPE, OutputRecord


def make_title(name: str) -> str:
    """Title markup the downstream system renders for an item."""
    return f"<p>{name}</p>"


def build_output_record(
    item: Dict[str, Any],
    default_type: str = DEFAULT_TYPE,
    default_is_mandatory: bool = False,
) -> Dict[str, Any]:
    record = OutputRecord(
        line=item["line"],
        uuid=new_uuid(),
        name=item["name"],
        title=make_title(item["name"]),
        type=default_type,
        expanded=True,
        is_mandatory=default_is_mandatory,
        children=[],
    )
    return record.model_dump()


def format_records(
    input_records: List[Dict[str, Any]],
    document_title: str,
    section_title: str,
    default_type: str = DEFAULT_TYPE,
    default_is_mandatory: bool = False,
) -> List[Dict[str, Any]]:
    """Turn parsed input records into output records, one per input, in order."""
    if not input_records:
        raise GenerationError("Please paste valid JSON input first")
    if not (document_title or "").strip():
        raise GenerationError("Please enter a document title")
    if not (section_title or "").strip():
        raise GenerationError("Please enter a section title")

    return [build_output_record(item, default_type, default_is_mandatory) for item in input_records]
