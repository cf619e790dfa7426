"""Shapes of the pasted input and of the exported document.

The exported JSON is consumed by another system, so field names and their
order are fixed:

    [ {id, text, uuid, children: [ {text, id, uuid, children: [ record, ... ]} ]} ]

where each record is `{line, uuid, name, title, type, expanded, is_mandatory, children}`.
"""

from __future__ import annotations

from typing import Any, List, Literal, get_args

from pydantic import BaseModel, Field, field_validator

TypeOption = Literal["number_type2", "passfail", "passfail_decline", "text_type2"]
TYPE_OPTIONS = get_args(TypeOption)
DEFAULT_TYPE: TypeOption = "number_type2"


class InputRecord(BaseModel):
    """One pasted `{line, name}` pair. Extra keys are ignored."""

    line: str
    name: str

    @field_validator("line", "name", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Any:
        # JSON numbers are common for line numbers; keep their literal form.
        if isinstance(value, bool):
            raise ValueError("must be a string or number")
        if isinstance(value, (int, float)):
            return str(value)
        return value


class OutputRecord(BaseModel):
    line: str
    uuid: str
    name: str
    title: str
    type: TypeOption = DEFAULT_TYPE
    expanded: Literal[True] = True
    is_mandatory: bool = False
    children: List["OutputRecord"] = Field(default_factory=list)


class Section(BaseModel):
    text: str
    id: str
    uuid: str
    children: List[OutputRecord] = Field(default_factory=list)


class Document(BaseModel):
    id: str
    text: str
    uuid: str
    children: List[Section] = Field(default_factory=list)
