"""Tests for content node formatting."""

from __future__ import annotations

from wiki_reader.extract.formatter import format_element, parse_table
from wiki_reader.extract.table_codec import decode_content

from conftest import make_tag


def test_unordered_list():
    fragment = format_element(make_tag("<ul><li>A</li><li>B</li></ul>"))

    assert fragment == "• A\n• B\n"


def test_ordered_list():
    fragment = format_element(make_tag("<ol><li>X</li><li>Y</li></ol>"))

    assert fragment == "1. X\n2. Y\n"


def test_list_item_text_is_flattened():
    fragment = format_element(make_tag('<ul><li><a href="/wiki/A">Alpha</a> and <b>beta</b></li></ul>'))

    assert fragment == "• Alpha and beta\n"


def test_data_table_is_encoded_as_marker():
    table = make_tag(
        '<table class="wikitable"><tr><th>Name</th><th>Age</th></tr>'
        "<tr><td>Ann</td><td>30</td></tr></table>"
    )

    assert format_element(table) == "<table>Name\tAge\nAnn\t30</table>"


def test_table_cells_are_trimmed_and_empty_rows_skipped():
    table = make_tag(
        '<table class="wikitable"><tbody>'
        "<tr><th> Year </th><th>\n Event </th></tr>"
        "<tr><th>Subheading only</th></tr>"
        "<tr><td> 1843 </td><td> Notes <sup>[1]</sup></td></tr>"
        "</tbody></table>"
    )

    assert parse_table(table) == [["Year", "Event"], ["1843", "Notes [1]"]]


def test_blank_header_row_is_dropped():
    table = make_tag(
        '<table class="wikitable"><tr><th> </th><th></th></tr><tr><td>x</td><td>y</td></tr></table>'
    )

    assert format_element(table) == "<table>x\ty</table>"


def test_table_without_rows_falls_back_to_text():
    table = make_tag('<table class="wikitable"><caption>Empty</caption></table>')

    assert format_element(table) == "Empty"


def test_non_data_table_is_plain_text():
    table = make_tag("<table><tr><td>a</td><td>b</td></tr></table>")

    assert format_element(table) == "a b"


def test_paragraph_text_keeps_inline_runs_together():
    assert format_element(make_tag("<p>Hello <b>world</b>!</p>")) == "Hello world!"


def test_entities_are_left_for_render_time():
    assert format_element(make_tag("<p>a &amp;lt; b</p>")) == "a &lt; b"


def test_single_empty_cell_rows_are_skipped():
    table = make_tag(
        '<table class="wikitable"><tr><th>Name</th></tr>'
        "<tr><td> </td></tr><tr><td>Ann</td></tr></table>"
    )

    rows = parse_table(table)

    assert rows == [["Name"], ["Ann"]]
    assert decode_content(format_element(table))[0].rows == rows


def test_deeply_nested_text_is_collected():
    depth = 3000
    tag = make_tag("<div>" * depth + "<b>deep</b> text" + "</div>" * depth)

    assert format_element(tag) == "deep text"
