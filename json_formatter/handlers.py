from __future__ import annotations

from typing import Any, Dict, List

import gradio as gr

from .config import get_settings
from .editing import records_to_table, row_choices, set_record_mandatory, set_record_type
from .errors import FormatterError
from .export import render_final_json, report_clipboard_copy
from .identifiers import new_session_ids
from .io_utils import parse_input_text, write_export_file
from .logging_utils import get_logger
from .records import format_records

logger = get_logger(__name__)


def start_session():
    """Assign the document and section ids that stay fixed for this page session."""
    document_id, section_id = new_session_ids(get_settings().section_id_length)
    logger.info("New session: document id %s, section id %s", document_id, section_id)
    return document_id, section_id


def handle_input_change(text: str, current_input: List[Dict[str, Any]]):
    try:
        parsed = parse_input_text(text)
    except FormatterError as exc:
        logger.warning("Rejected pasted input: %s", exc)
        return current_input, str(exc)

    if not parsed:
        return [], ""
    logger.info("Parsed %d input records", len(parsed))
    return parsed, f"Parsed {len(parsed)} records. Click Process Input to generate."


def handle_generate(input_records, document_title, section_title, current_records):
    settings = get_settings()
    try:
        records = format_records(
            input_records,
            document_title,
            section_title,
            default_type=settings.default_type,
            default_is_mandatory=settings.default_is_mandatory,
        )
    except FormatterError as exc:
        logger.warning("Generation refused: %s", exc)
        return current_records, gr.update(), gr.update(), str(exc)

    logger.info("Generated %d output records", len(records))
    choices = row_choices(records)
    return (
        records,
        records_to_table(records),
        gr.update(choices=choices, value=choices[0][1] if choices else None),
        f"Generated {len(records)} records.",
    )


def _select_row(records, index):
    if records is None or index is None:
        return gr.update(), gr.update(), gr.update()
    idx = int(index)
    if idx < 0 or idx >= len(records):
        return gr.update(), gr.update(), gr.update()
    record = records[idx]
    return idx, record["type"], bool(record["is_mandatory"])


def handle_row_select(records, index):
    _, type_value, mandatory_value = _select_row(records, index)
    return type_value, mandatory_value


def handle_table_select(records, evt: gr.SelectData):
    return _select_row(records, evt.index[0] if evt.index is not None else None)


def handle_type_change(records, index, type_option):
    try:
        updated = set_record_type(records, index, type_option)
    except FormatterError as exc:
        return records, gr.update(), str(exc)
    return updated, records_to_table(updated), ""


def handle_mandatory_change(records, index, is_mandatory):
    try:
        updated = set_record_mandatory(records, index, is_mandatory)
    except FormatterError as exc:
        return records, gr.update(), str(exc)
    return updated, records_to_table(updated), ""


def refresh_export_view(records, document_id, document_title, section_id, section_title):
    # Recomputed on every call so edits and titles are always reflected.
    if not records:
        return ""
    return render_final_json(records, document_id, document_title, section_id, section_title)


def handle_copy_result(text, copied):
    return report_clipboard_copy(text, bool(copied))


def handle_download(records, document_id, document_title, section_id, section_title, file_name):
    """Build a fresh export and write it to a file.

    Returns the file path, the exported text for the on-page view, and a status.
    """
    if not records:
        return None, gr.update(), "No data to export. Please process some data first."
    json_text = render_final_json(records, document_id, document_title, section_id, section_title)
    try:
        path = write_export_file(json_text, file_name)
    except OSError as exc:
        logger.exception("Export failed")
        return None, json_text, f"Error during export: {str(exc)}"
    logger.info("Exported JSON to %s", path)
    return path, json_text, f"Export successful! Saved to {path}"
