"""Tests for the fetch, extract and assemble workflow."""

from __future__ import annotations

import httpx
import pytest

from wiki_reader.config import WikipediaConfig
from wiki_reader.core.types import ArticleSection
from wiki_reader.fetch.wikipedia import SummaryFetchError, WikipediaClient
from wiki_reader.service import fetch_article

SUMMARY = {
    "pageid": 42,
    "title": "Tea",
    "extract": "Tea is an aromatic beverage.",
    "content_urls": {"mobile": {"page": "https://en.m.wikipedia.org/wiki/Tea"}},
}
PARSE_HTML = (
    '<div class="mw-parser-output"><p>Tea is a drink.</p>'
    '<div class="mw-heading mw-heading2"><h2>History</h2></div><p>Old.</p></div>'
)


def _client(parse_response) -> WikipediaClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.startswith("/api/rest_v1/"):
            return httpx.Response(200, json=SUMMARY)
        return parse_response(request)

    return WikipediaClient(WikipediaConfig(), transport=httpx.MockTransport(handler))


def test_fetch_article_extracts_sections():
    with _client(lambda request: httpx.Response(200, json={"parse": {"text": {"*": PARSE_HTML}}})) as client:
        article = fetch_article(client, "Tea")

    assert article.title == "Tea"
    assert article.id == 42
    assert article.sections == (
        ArticleSection(title="", level=0, content="Tea is a drink."),
        ArticleSection(title="History", level=2, content="Old."),
    )


def test_parse_failure_falls_back_to_extract():
    with _client(lambda request: httpx.Response(500, text="boom")) as client:
        article = fetch_article(client)

    assert article.sections == (
        ArticleSection(title="", level=0, content="Tea is an aromatic beverage."),
    )


def test_empty_parse_html_falls_back_to_extract():
    with _client(lambda request: httpx.Response(200, json={"parse": {"text": {"*": ""}}})) as client:
        article = fetch_article(client, "Tea")

    assert [s.content for s in article.sections] == ["Tea is an aromatic beverage."]


def test_unstructured_parse_html_keeps_sentinel():
    with _client(lambda request: httpx.Response(200, json={"parse": {"text": {"*": "<p>loose</p>"}}})) as client:
        article = fetch_article(client, "Tea")

    assert article.sections == (
        ArticleSection(title="Error", level=0, content="Could not find main content area."),
    )


def test_summary_failure_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    with WikipediaClient(WikipediaConfig(), transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(SummaryFetchError):
            fetch_article(client)


def test_undecodable_parse_body_falls_back_to_extract():
    with _client(lambda request: httpx.Response(200, content=b'{"parse": "\xff\xfe"}')) as client:
        article = fetch_article(client, "Tea")

    assert article.sections == (
        ArticleSection(title="", level=0, content="Tea is an aromatic beverage."),
    )
