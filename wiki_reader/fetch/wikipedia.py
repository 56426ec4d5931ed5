"""
Wikipedia HTTP access using httpx.

Two endpoints are used:
1. REST summary (``/api/rest_v1/page/summary/{title}`` or ``.../random/summary``):
   required; any failure raises SummaryFetchError.
2. Action API parse (``/w/api.php?action=parse``): optional; failures are
   returned as a FetchResult with ``error`` set so the caller can fall back
   to the summary extract.

Each request is a single attempt bounded by the configured timeout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from ..config import WikipediaConfig
from ..core.types import WikiSummary

RANDOM_SUMMARY_PATH = "/api/rest_v1/page/random/summary"
SUMMARY_PATH = "/api/rest_v1/page/summary/{title}"
PARSE_PATH = "/w/api.php"


class SummaryFetchError(Exception):
    """The summary endpoint could not be reached or decoded."""


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either text will be populated (success) or error will be populated (failure),
    but never both. status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        text: The extracted payload text, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    text: str | None
    error: str | None


def summary_from_payload(data: Any) -> WikiSummary:
    """Decode a REST summary payload.

    Raises:
        SummaryFetchError: If required fields are missing or malformed
    """
    try:
        thumbnail = data.get("thumbnail") or {}
        return WikiSummary(
            id=int(data.get("pageid") or 0),
            title=str(data["title"]),
            extract=str(data.get("extract") or ""),
            page_url=str(data["content_urls"]["mobile"]["page"]),
            thumbnail_url=thumbnail.get("source"),
            last_modified=data.get("timestamp") or data.get("lastmodified"),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise SummaryFetchError(f"Malformed summary response: {type(exc).__name__}: {exc}") from exc


def html_from_parse_payload(data: Any) -> str | None:
    """Return ``parse.text["*"]`` from a parse API payload, or None if absent."""
    if not isinstance(data, dict):
        return None
    parse = data.get("parse")
    if not isinstance(parse, dict):
        return None
    text = parse.get("text")
    if not isinstance(text, dict):
        return None
    html = text.get("*")
    return html if isinstance(html, str) else None


class WikipediaClient:
    """Synchronous Wikipedia client.

    Args:
        cfg: Endpoint and HTTP settings
        transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)
    """

    def __init__(self, cfg: WikipediaConfig, transport: httpx.BaseTransport | None = None):
        self.cfg = cfg
        self._client = httpx.Client(
            base_url=cfg.base_url,
            timeout=cfg.timeout_seconds,
            headers={"User-Agent": cfg.user_agent, "Accept": "application/json"},
            follow_redirects=True,
            trust_env=cfg.trust_env,
            transport=transport,
        )

    def __enter__(self) -> "WikipediaClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_random_summary(self) -> WikiSummary:
        return self._fetch_summary(RANDOM_SUMMARY_PATH)

    def fetch_summary(self, title: str) -> WikiSummary:
        path = SUMMARY_PATH.format(title=quote(title.replace(" ", "_"), safe=""))
        return self._fetch_summary(path)

    def _fetch_summary(self, path: str) -> WikiSummary:
        try:
            resp = self._client.get(path)
        except httpx.HTTPError as exc:
            raise SummaryFetchError(f"{type(exc).__name__}: {exc}") from exc
        if resp.status_code != 200:
            raise SummaryFetchError(f"Summary HTTP Error: {resp.status_code} for {resp.url}")
        try:
            data = resp.json()
        except ValueError as exc:
            # JSONDecodeError, or UnicodeDecodeError for a body that is not UTF-8
            raise SummaryFetchError(f"{type(exc).__name__}: {exc}") from exc
        return summary_from_payload(data)

    def fetch_parse_html(self, title: str) -> FetchResult:
        """Fetch the rendered HTML of a page from the parse API.

        Never raises; transport errors, non-200 responses, undecodable JSON
        and payloads without ``parse.text`` all come back as an error result.
        """
        params = {
            "action": "parse",
            "page": title,
            "prop": "text",
            "format": "json",
            "origin": "*",
        }
        url = f"{self.cfg.base_url}{PARSE_PATH}"
        try:
            resp = self._client.get(PARSE_PATH, params=params)
        except httpx.HTTPError as exc:
            return FetchResult(url=url, status_code=None, text=None, error=f"{type(exc).__name__}: {exc}")

        url = str(resp.url)
        if resp.status_code != 200:
            return FetchResult(
                url=url,
                status_code=resp.status_code,
                text=None,
                error=f"Parse HTTP Error: {resp.status_code}",
            )
        try:
            data = resp.json()
        except ValueError as exc:
            return FetchResult(
                url=url,
                status_code=resp.status_code,
                text=None,
                error=f"{type(exc).__name__}: {exc}",
            )

        html = html_from_parse_payload(data)
        if html is None:
            return FetchResult(
                url=url,
                status_code=resp.status_code,
                text=None,
                error="Malformed parse response: missing parse.text",
            )
        return FetchResult(url=url, status_code=resp.status_code, text=html, error=None)
