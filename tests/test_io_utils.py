"""Tests for parsing pasted input and writing export files."""

import json
import os

import pytest

from json_formatter.errors import InputFormatError
from json_formatter.io_utils import parse_input_text, write_export_file


def test_parse_valid_array_preserves_order() -> None:
    text = '[{"line": "1", "name": "A"}, {"line": "2", "name": "B"}]'
    assert parse_input_text(text) == [{"line": "1", "name": "A"}, {"line": "2", "name": "B"}]


def test_parse_blank_text_returns_empty_list() -> None:
    assert parse_input_text("") == []
    assert parse_input_text("   \n") == []
    assert parse_input_text(None) == []


def test_parse_empty_array() -> None:
    assert parse_input_text("[]") == []


def test_parse_drops_extra_keys() -> None:
    records = parse_input_text('[{"line": "1", "name": "A", "extra": 5}]')
    assert records == [{"line": "1", "name": "A"}]


def test_parse_numeric_values_keep_literal_text() -> None:
    records = parse_input_text('[{"line": 7, "name": 12.5}, {"line": 1e2, "name": -0.50}]')
    assert records == [{"line": "7", "name": "12.5"}, {"line": "1e2", "name": "-0.50"}]


@pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
def test_non_standard_constants_rejected(token: str) -> None:
    with pytest.raises(InputFormatError, match="Invalid JSON format"):
        parse_input_text('[{"line": 1e2, "name": ' + token + '}]')


def test_malformed_json_rejected() -> None:
    with pytest.raises(InputFormatError, match="Invalid JSON format"):
        parse_input_text("{not valid json")


def test_non_array_rejected() -> None:
    with pytest.raises(InputFormatError, match="must be an array"):
        parse_input_text('{"line": "1", "name": "A"}')


@pytest.mark.parametrize(
    "text",
    [
        '[{"line": "1"}]',
        '[{"name": "A"}]',
        '[{"line": "1", "name": "A"}, "oops"]',
        "[null]",
    ],
)
def test_missing_fields_rejected(text: str) -> None:
    with pytest.raises(InputFormatError, match='"line" and "name"'):
        parse_input_text(text)


def test_unsupported_value_type_names_item() -> None:
    with pytest.raises(InputFormatError, match="Item 2"):
        parse_input_text('[{"line": "1", "name": "A"}, {"line": true, "name": "B"}]')


def test_input_format_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_input_text("[")


def test_write_export_file_appends_extension(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("tempfile.tempdir", str(tmp_path))
    path = write_export_file('[{"id": "x"}]', "checklist")

    assert path == os.path.join(str(tmp_path), "checklist.json")
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == [{"id": "x"}]


def test_write_export_file_default_name(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("tempfile.tempdir", str(tmp_path))
    path = write_export_file("[]", "  ")
    assert os.path.basename(path) == "formatted_output.json"


def test_write_export_file_strips_directories(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("tempfile.tempdir", str(tmp_path))
    path = write_export_file("[]", "../../evil.json")
    assert os.path.dirname(path) == str(tmp_path)
    assert os.path.basename(path) == "evil.json"
