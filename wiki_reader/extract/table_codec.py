"""
Inline table markers embedded in section content strings.

Encoding happens at extraction time: a table becomes
``"<table>" + rows joined by "\\n" (cells joined by "\\t") + "</table>"``.
Decoding happens at render time and splits a content string back into
ordered text and table components.

A cell whose text itself contains "</table>" ends the marker early on decode,
and a row made of one empty cell encodes to a blank line that decoding skips.
"""

from __future__ import annotations

import re

from ..core.types import Component, ParsedTable, TableComponent, TextComponent

TABLE_OPEN = "<table>"
TABLE_CLOSE = "</table>"
CELL_SEPARATOR = "\t"
ROW_SEPARATOR = "\n"

# Applied in order, so "&amp;lt;" ends up as "<"
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)
_TAG_RE = re.compile(r"<[^>]+>")


def encode_table(rows: ParsedTable) -> str:
    body = ROW_SEPARATOR.join(CELL_SEPARATOR.join(row) for row in rows)
    return f"{TABLE_OPEN}{body}{TABLE_CLOSE}"


def decode_table_body(body: str) -> ParsedTable:
    return [line.split(CELL_SEPARATOR) for line in body.splitlines() if line]


def normalize_text(text: str) -> str:
    """Unescape common entities, strip leftover tags and trim whitespace."""
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    return _TAG_RE.sub("", text).strip()


def decode_content(content: str) -> list[Component]:
    """Split a content string into text and table components.

    Scans left to right for ``<table>`` markers. Text between markers is
    normalized and kept when non-empty. An opening marker without a later
    closing marker is not a table: the rest of the string, marker included,
    is treated as text.

    Args:
        content: Section content produced by the extractor

    Returns:
        Components in document order
    """
    components: list[Component] = []
    rest = content
    while rest:
        start = rest.find(TABLE_OPEN)
        if start == -1:
            _append_text(components, rest)
            break
        end = rest.find(TABLE_CLOSE, start + len(TABLE_OPEN))
        if end == -1:
            _append_text(components, rest)
            break
        _append_text(components, rest[:start])
        rows = decode_table_body(rest[start + len(TABLE_OPEN):end])
        if rows:
            components.append(TableComponent(rows=rows))
        rest = rest[end + len(TABLE_CLOSE):]
    return components


def _append_text(components: list[Component], raw: str) -> None:
    text = normalize_text(raw)
    if text:
        components.append(TextComponent(text=text))
