"""Tests for heading detection and the wrapper containment rules."""

from __future__ import annotations

from wiki_reader.extract.headings import HeadingMatch, detect_heading, heading_level

from conftest import make_tag


def test_bare_heading_tag():
    assert detect_heading(make_tag("<h2>History</h2>")) == HeadingMatch(level=2, title="History")
    assert detect_heading(make_tag("<h6>Notes</h6>")) == HeadingMatch(level=6, title="Notes")


def test_heading_title_is_flattened_text():
    match = detect_heading(make_tag("<h2>The <i>Big</i>\n  Idea</h2>"))

    assert match == HeadingMatch(level=2, title="The Big Idea")


def test_heading_container_wrapper():
    node = make_tag('<div class="mw-heading mw-heading3"><h3 id="Family">Family</h3></div>')

    assert detect_heading(node) == HeadingMatch(level=3, title="Family")


def test_plain_wrapper_with_direct_child_heading():
    node = make_tag("<section><h4>Legacy</h4><p>text</p></section>")

    assert detect_heading(node) == HeadingMatch(level=4, title="Legacy")


def test_headline_wrapper_pattern():
    node = make_tag('<div><span class="mw-headline"><h3>Early life</h3></span></div>')

    assert detect_heading(node) == HeadingMatch(level=3, title="Early life")


def test_span_without_headline_class_is_not_primary():
    node = make_tag('<div><span class="other"><h3>Early life</h3></span></div>')

    assert detect_heading(node) is None


def test_heading_nested_in_table_cell_is_not_a_section():
    node = make_tag(
        '<div class="box"><table class="wikitable"><tr><td><h3>Deep</h3></td></tr></table></div>'
    )

    assert detect_heading(node) is None


def test_only_first_descendant_heading_is_considered():
    node = make_tag('<div><div class="inner"><h3>Deep</h3></div><h2>Shallow</h2></div>')

    assert detect_heading(node) is None


def test_non_heading_nodes():
    assert detect_heading(make_tag("<p>Paragraph</p>")) is None
    assert detect_heading(make_tag("<h7>Seven</h7>")) is None
    assert detect_heading(make_tag("<div><h7>Seven</h7></div>")) is None
    assert detect_heading(make_tag("<header>Top</header>")) is None


def test_heading_level():
    assert heading_level(make_tag("<h1>x</h1>")) == 1
    assert heading_level(make_tag("<h0>x</h0>")) == 0
    assert heading_level(make_tag("<hr>")) == 0
