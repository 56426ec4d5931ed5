"""
Wikipedia fetching.

This package handles HTTP access to the summary and parse endpoints.
"""

from .wikipedia import (
    FetchResult,
    SummaryFetchError,
    WikipediaClient,
    html_from_parse_payload,
    summary_from_payload,
)

__all__ = [
    "FetchResult",
    "SummaryFetchError",
    "WikipediaClient",
    "html_from_parse_payload",
    "summary_from_payload",
]
