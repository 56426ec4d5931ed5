"""Tests for article assembly and the summary fallback."""

from __future__ import annotations

from datetime import datetime, timezone

from wiki_reader.core.assembler import (
    build_article,
    parse_timestamp,
    reflow_article,
    split_paragraph_sections,
)
from wiki_reader.core.types import Article, ArticleSection, WikiSummary


def _summary(**overrides) -> WikiSummary:
    fields = {
        "id": 974,
        "title": "Ada Lovelace",
        "extract": "Augusta Ada King was an English mathematician.",
        "page_url": "https://en.m.wikipedia.org/wiki/Ada_Lovelace",
        "thumbnail_url": "https://upload.wikimedia.org/ada.jpg",
        "last_modified": "2025-04-30T12:34:56Z",
    }
    fields.update(overrides)
    return WikiSummary(**fields)


def test_build_article_keeps_extracted_sections():
    sections = [
        ArticleSection(title="", level=0, content="Intro"),
        ArticleSection(title="Works", level=2, content="Notes"),
    ]

    article = build_article(_summary(), sections)

    assert article.sections == tuple(sections)
    assert article.id == 974
    assert article.title == "Ada Lovelace"
    assert article.source_url == "https://en.m.wikipedia.org/wiki/Ada_Lovelace"
    assert article.thumbnail_url == "https://upload.wikimedia.org/ada.jpg"
    assert article.last_modified == datetime(2025, 4, 30, 12, 34, 56, tzinfo=timezone.utc)


def test_build_article_falls_back_to_extract():
    article = build_article(_summary(), [])

    assert article.sections == (
        ArticleSection(title="", level=0, content="Augusta Ada King was an English mathematician."),
    )


def test_sentinel_sections_are_not_replaced():
    sentinel = [ArticleSection(title="Error", level=0, content="Could not parse article content.")]

    assert build_article(_summary(), sentinel).sections == tuple(sentinel)


def test_parse_timestamp():
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("not a date") is None
    assert parse_timestamp("2024-01-02T03:04:05+00:00") == datetime(
        2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc
    )


def test_split_paragraph_sections():
    sections = split_paragraph_sections("First para.\n\n  \nSecond para.\nstill second\n\n")

    assert sections == [
        ArticleSection(title="", level=0, content="First para."),
        ArticleSection(title="", level=0, content="Second para.\nstill second"),
    ]


def test_reflow_article_returns_new_instance():
    article = Article(id=1, title="T", extract="A.\n\nB.", source_url="https://example.org")

    reflowed = reflow_article(article)

    assert reflowed is not article
    assert article.sections == ()
    assert [s.content for s in reflowed.sections] == ["A.", "B."]


def test_reflow_article_leaves_sectioned_article_alone():
    article = build_article(_summary(), [])

    assert reflow_article(article) is article
