from __future__ import annotations

from typing import Any, Dict, List

from .identifiers import new_uuid
from .io_utils import serialize_json
from .models import Document, OutputRecord, Section

NO_DATA_TO_COPY = "No data to copy. Please process some data first."
COPY_SUCCEEDED = "JSON copied to clipboard!"
COPY_FAILED = "Failed to copy to clipboard"


def build_final_document(
    records: List[Dict[str, Any]],
    document_id: str,
    document_title: str,
    section_id: str,
    section_title: str,
) -> List[Dict[str, Any]]:
    """Wrap output records in one section inside one document.

    `id` values are passed in and stay stable for the session; the document
    and section `uuid` values are regenerated on every call.
    """
    section = Section(
        text=section_title or "",
        id=section_id,
        uuid=new_uuid(),
        children=[OutputRecord.model_validate(r) for r in records or []],
    )
    document = Document(
        id=document_id,
        text=document_title or "",
        uuid=new_uuid(),
        children=[section],
    )
    return [document.model_dump()]


def render_final_json(
    records: List[Dict[str, Any]],
    document_id: str,
    document_title: str,
    section_id: str,
    section_title: str,
) -> str:
    return serialize_json(
        build_final_document(records, document_id, document_title, section_id, section_title)
    )


def report_clipboard_copy(text: str, copied: bool) -> str:
    """Status message for a copy attempt made in the browser."""
    if not text or not text.strip():
        return NO_DATA_TO_COPY
    return COPY_SUCCEEDED if copied else COPY_FAILED
