"""
Section extraction from MediaWiki parse HTML.

This is the entry point of the extraction core: parse the HTML, strip
boilerplate, locate the content root and segment its children. Structural
failures never raise; they come back as an ExtractionResult carrying a
single sentinel "Error" section.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..core.types import ArticleSection, ExtractionResult
from ..logging_utils import log_event
from .boilerplate import strip_boilerplate
from .segmenter import segment_sections

CONTENT_ROOT_CLASS = "mw-parser-output"
PARSE_ERROR_MESSAGE = "Could not parse article content."
MISSING_ROOT_MESSAGE = "Could not find main content area."

logger = logging.getLogger(__name__)


def extract_sections(html: str | None) -> ExtractionResult:
    """Extract ordered sections from raw parse HTML.

    Args:
        html: The ``parse.text["*"]`` HTML, or None when unavailable

    Returns:
        ExtractionResult with status "ok", "no_content" (no HTML, no
        sections), "missing_root" or "parse_error" (one sentinel section)
    """
    if not html:
        return ExtractionResult(sections=[], status="no_content")

    try:
        soup = BeautifulSoup(html, "html.parser")
        removed = strip_boilerplate(soup)
        root = find_content_root(soup)
        if root is None:
            log_event(logger, "content root not found", status="missing_root")
            return _sentinel("missing_root", MISSING_ROOT_MESSAGE)
        sections = segment_sections(root.find_all(True, recursive=False))
    except Exception as exc:  # noqa: BLE001
        logger.warning("Error parsing HTML: %s: %s", type(exc).__name__, exc)
        return _sentinel("parse_error", PARSE_ERROR_MESSAGE, error=f"{type(exc).__name__}: {exc}")

    log_event(
        logger,
        "sections extracted",
        status="ok",
        sections=len(sections),
        removed=dict(removed),
    )
    return ExtractionResult(sections=sections, status="ok")


def find_content_root(soup: BeautifulSoup) -> Tag | None:
    """Return the parser output container, falling back to ``<body>``."""
    root = soup.find(class_=CONTENT_ROOT_CLASS)
    if root is not None:
        return root
    return soup.body


def _sentinel(status: str, message: str, error: str | None = None) -> ExtractionResult:
    return ExtractionResult(
        sections=[ArticleSection(title="Error", level=0, content=message)],
        status=status,
        error=error or message,
    )
