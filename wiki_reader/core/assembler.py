"""Article assembly from summary metadata and extracted sections."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
import re
from typing import Sequence

from .types import Article, ArticleSection, WikiSummary

_BLANK_LINE_RE = re.compile(r"\n\s*\n")


def build_article(summary: WikiSummary, sections: Sequence[ArticleSection]) -> Article:
    """Combine a summary record with extracted sections.

    When no sections were extracted (missing parse HTML, failed fetch),
    the article falls back to a single untitled section holding the
    summary extract.

    Args:
        summary: Decoded summary endpoint record
        sections: Sections produced by the extractor, possibly empty

    Returns:
        A new immutable Article
    """
    final_sections = tuple(sections) if sections else (
        ArticleSection(title="", level=0, content=summary.extract),
    )
    return Article(
        id=summary.id,
        title=summary.title,
        extract=summary.extract,
        source_url=summary.page_url,
        thumbnail_url=summary.thumbnail_url,
        last_modified=parse_timestamp(summary.last_modified),
        sections=final_sections,
    )


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp, returning None when absent or invalid."""
    if not value:
        return None
    try:
        # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def split_paragraph_sections(text: str) -> list[ArticleSection]:
    """Split plain text on blank lines into untitled level-0 sections."""
    sections = []
    for paragraph in _BLANK_LINE_RE.split(text):
        paragraph = paragraph.strip()
        if paragraph:
            sections.append(ArticleSection(title="", level=0, content=paragraph))
    return sections


def reflow_article(article: Article) -> Article:
    """Rebuild paragraph sections from the extract when an article has none.

    Returns the article unchanged when it already has sections or the
    extract yields no paragraphs; otherwise returns a new instance.
    """
    if article.sections:
        return article
    sections = split_paragraph_sections(article.extract)
    if not sections:
        return article
    return replace(article, sections=tuple(sections))
