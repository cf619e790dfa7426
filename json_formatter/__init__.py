"""Core logic for the JSON Data Formatter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse pasted `{line, name}` records
- generate output records with identifiers and defaults
- edit record type / mandatory flags
- assemble and serialize the document -> section -> items export
"""
