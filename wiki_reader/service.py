"""
Article fetch orchestration.

This module coordinates the workflow for one article:
1. Fetch the summary record (the only step allowed to fail the whole fetch)
2. Fetch the full parse HTML (failures degrade to an empty section list)
3. Extract sections from the HTML
4. Assemble the final Article, falling back to the summary extract

Step 2 and 3 always complete before the fallback decision in step 4.
"""

from __future__ import annotations

import logging

from .core.assembler import build_article
from .core.types import Article, ExtractionResult, WikiSummary
from .extract.extractor import extract_sections
from .fetch.wikipedia import WikipediaClient
from .logging_utils import log_event, truncate_text

logger = logging.getLogger(__name__)


def fetch_article(client: WikipediaClient, title: str | None = None) -> Article:
    """Fetch and assemble one article.

    Args:
        client: Wikipedia client to use
        title: Page title, or None for a random article

    Returns:
        The assembled Article

    Raises:
        SummaryFetchError: If the summary endpoint fails
    """
    summary = client.fetch_summary(title) if title else client.fetch_random_summary()
    log_event(logger, "summary fetched", title=summary.title, page_id=summary.id)
    extraction = fetch_sections(client, summary)
    return assemble(summary, extraction)


def fetch_sections(client: WikipediaClient, summary: WikiSummary) -> ExtractionResult:
    """Fetch parse HTML for a summary's page and extract its sections."""
    result = client.fetch_parse_html(summary.title)
    if result.error:
        logger.warning(
            "Error fetching full article content for %r: %s. Falling back to summary.",
            summary.title,
            truncate_text(result.error),
        )
        return ExtractionResult(sections=[], status="fetch_failed", error=result.error)
    return extract_sections(result.text)


def assemble(summary: WikiSummary, extraction: ExtractionResult) -> Article:
    article = build_article(summary, extraction.sections)
    log_event(
        logger,
        "article assembled",
        title=article.title,
        extraction_status=extraction.status,
        section_count=len(article.sections),
        summary_only=not extraction.sections,
    )
    return article
