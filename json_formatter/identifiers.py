from __future__ import annotations

from typing import Tuple
from uuid import uuid4


def new_uuid() -> str:
    return str(uuid4())


def new_section_id(length: int = 10) -> str:
    """Short section id: the leading characters of a fresh uuid4."""
    return new_uuid()[: max(1, int(length))]


def new_session_ids(section_id_length: int = 10) -> Tuple[str, str]:
    """Return `(document_id, section_id)` for a new page session."""
    return new_uuid(), new_section_id(section_id_length)
