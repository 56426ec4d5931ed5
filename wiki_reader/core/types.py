"""
Core data types for Wiki Reader.

This module defines the fundamental data structures used throughout the pipeline:
- WikiSummary: Decoded record from the page summary endpoint
- ArticleSection: One titled (or untitled intro) block of article text
- ExtractionResult: Outcome of turning parse HTML into sections
- Article: Final assembled document
- TextComponent / TableComponent: Decoded pieces of a section's content string
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

# Rows of cell strings; the first row is a header only when built from <th> cells.
ParsedTable = list[list[str]]


@dataclass(frozen=True)
class WikiSummary:
    """Summary record returned by the REST summary endpoint.

    Attributes:
        id: Page identifier
        title: Page title, also used to request the full parse HTML
        extract: Plain-text lead extract, used as the fallback section
        page_url: Canonical (mobile) page URL
        thumbnail_url: Optional thumbnail image URL
        last_modified: Optional ISO 8601 timestamp string
    """
    id: int
    title: str
    extract: str
    page_url: str
    thumbnail_url: str | None = None
    last_modified: str | None = None


@dataclass(frozen=True)
class ArticleSection:
    """A section of article text.

    An empty title with level 0 is the introduction (or a headingless
    fallback block). Content may only be empty when the title is not.

    Attributes:
        title: Heading text, empty for the introduction
        level: Heading level 1-6, or 0 for untitled blocks
        content: Plain text, possibly containing table markers
    """
    title: str
    level: int
    content: str


@dataclass
class ExtractionResult:
    """Outcome of extracting sections from parse HTML.

    Attributes:
        sections: Extracted sections (a single sentinel section on structural failure)
        status: "ok", "no_content", "parse_error", "missing_root" or "fetch_failed"
        error: Error message when status is not "ok", None otherwise
    """
    sections: list[ArticleSection] = field(default_factory=list)
    status: str = "ok"
    error: str | None = None


@dataclass(frozen=True)
class Article:
    """Final article assembled from a summary and extracted sections.

    Instances are never modified; use ``dataclasses.replace`` to derive
    an updated copy.
    """
    id: int
    title: str
    extract: str
    source_url: str
    thumbnail_url: str | None = None
    last_modified: datetime | None = None
    sections: tuple[ArticleSection, ...] = ()


@dataclass(frozen=True)
class TextComponent:
    text: str


@dataclass(frozen=True)
class TableComponent:
    rows: ParsedTable


Component = Union[TextComponent, TableComponent]
