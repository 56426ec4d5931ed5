"""Conversion of one content node into a text fragment."""

from __future__ import annotations

from bs4.element import Tag

from ..core.types import ParsedTable
from .table_codec import encode_table
from .text import element_text, has_class

DATA_TABLE_CLASS = "wikitable"
BULLET = "• "


def format_element(tag: Tag) -> str:
    """Render a non-heading content node as text.

    Lists become one line per item (bullets for ``ul``, 1-based numbers for
    ``ol``), data tables become an inline table marker, and anything else
    is returned as its flattened text. Entity cleanup is left to the
    render-time decode step.
    """
    name = (tag.name or "").lower()
    if name == "ul":
        return "".join(f"{BULLET}{element_text(li)}\n" for li in tag.find_all("li"))
    if name == "ol":
        return "".join(
            f"{index}. {element_text(li)}\n"
            for index, li in enumerate(tag.find_all("li"), start=1)
        )
    if name == "table" and has_class(tag, DATA_TABLE_CLASS):
        rows = parse_table(tag)
        if rows:
            return encode_table(rows)
    return element_text(tag)


def parse_table(table: Tag) -> ParsedTable:
    """Build rows of trimmed cell text from a data table.

    The first row contributes a header row made of its ``th`` cells when at
    least one of them has text. Every later row contributes its ``td`` cells;
    rows without any ``td``, or with a single empty one, are skipped.
    """
    rows: ParsedTable = []
    trs = table.find_all("tr")
    if not trs:
        return rows
    headers = [element_text(th) for th in trs[0].find_all("th")]
    if any(headers):
        rows.append(headers)
    for tr in trs[1:]:
        cells = [element_text(td) for td in tr.find_all("td")]
        # A lone empty cell would encode to a blank line, which decoding drops
        if cells and cells != [""]:
            rows.append(cells)
    return rows
