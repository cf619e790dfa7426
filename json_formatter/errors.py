from __future__ import annotations


class FormatterError(ValueError):
    """Base error; the message is shown to the user as-is."""


class InputFormatError(FormatterError):
    """Pasted text is not a JSON array of `{line, name}` objects."""


class GenerationError(FormatterError):
    """Output records cannot be generated from the current form."""


class RecordEditError(FormatterError):
    pass
