"""
Command-line interface for Wiki Reader.

Uses Typer to provide commands for reading a random article, a named
article, or a locally saved parse API response / HTML file. Supports
loading .env files for configuration overrides.
"""

from __future__ import annotations

import json
from pathlib import Path
from urllib.parse import quote

import typer
from rich.console import Console

from .config import AppConfig, load_config
from .core.types import Article, WikiSummary
from .extract.extractor import extract_sections
from .fetch.wikipedia import SummaryFetchError, WikipediaClient, html_from_parse_payload
from .logging_utils import setup_logging
from .output.renderer import render, write_article
from .service import assemble, fetch_article

try:
    from dotenv import load_dotenv
except Exception:  # noqa: BLE001
    load_dotenv = None

app = typer.Typer(add_completion=False)
console = Console(stderr=True)

ConfigOption = typer.Option(None, "--config", "-c", exists=True, help="YAML config file.")
FormatOption = typer.Option(None, "--format", "-f", help="Output format: markdown, html or json.")
OutputOption = typer.Option(
    None, "--output", "-o", help="Output file or directory (prints to stdout when omitted)."
)
LogLevelOption = typer.Option(None, "--log-level", help="Logging level.")
LanguageOption = typer.Option(None, "--language", "-l", help="Wikipedia language code.")


@app.command()
def random(
    config: Path | None = ConfigOption,
    fmt: str | None = FormatOption,
    output: Path | None = OutputOption,
    log_level: str | None = LogLevelOption,
    language: str | None = LanguageOption,
):
    """Fetch a random article."""
    cfg = _prepare(config, fmt, log_level, language)
    _emit(_fetch(cfg, None), cfg, output)


@app.command()
def article(
    title: str = typer.Argument(..., help="Page title, e.g. 'Ada Lovelace'."),
    config: Path | None = ConfigOption,
    fmt: str | None = FormatOption,
    output: Path | None = OutputOption,
    log_level: str | None = LogLevelOption,
    language: str | None = LanguageOption,
):
    """Fetch an article by title."""
    cfg = _prepare(config, fmt, log_level, language)
    _emit(_fetch(cfg, title), cfg, output)


@app.command()
def parse(
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    title: str | None = typer.Option(None, "--title", "-t", help="Article title (defaults to file name)."),
    extract: str = typer.Option(
        "", "--extract", help="Fallback text used when the file yields no sections."
    ),
    config: Path | None = ConfigOption,
    fmt: str | None = FormatOption,
    output: Path | None = OutputOption,
    log_level: str | None = LogLevelOption,
):
    """Extract sections from a saved parse API JSON response or raw HTML file.

    Args:
        path: File ending in .json (parse API payload) or containing raw HTML
        title: Title for the rendered article
        extract: Plain-text fallback content
    """
    cfg = _prepare(config, fmt, log_level, None)
    raw = path.read_text(encoding="utf-8")
    html = raw
    if path.suffix == ".json":
        try:
            html = html_from_parse_payload(json.loads(raw))
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"invalid JSON in {path.name}: {exc}", param_hint="PATH") from exc
    page_title = title or path.stem
    summary = WikiSummary(
        id=0,
        title=page_title,
        extract=extract,
        page_url=f"{cfg.wikipedia.base_url}/wiki/{quote(page_title.replace(' ', '_'))}",
    )
    _emit(assemble(summary, extract_sections(html)), cfg, output)


def _prepare(
    config: Path | None, fmt: str | None, log_level: str | None, language: str | None
) -> AppConfig:
    # Load environment variables from .env if available
    if load_dotenv is not None:
        load_dotenv()

    cfg = load_config(str(config) if config else None)
    if fmt:
        cfg.output.format = fmt
    if log_level:
        cfg.logging.level = log_level
    if language:
        cfg.wikipedia.language = language
    if cfg.output.format not in ("markdown", "html", "json"):
        raise typer.BadParameter(f"unsupported format {cfg.output.format!r}", param_hint="--format")
    setup_logging(cfg.logging, Path.cwd())
    return cfg


def _fetch(cfg: AppConfig, title: str | None) -> Article:
    try:
        with WikipediaClient(cfg.wikipedia) as client:
            return fetch_article(client, title)
    except SummaryFetchError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _emit(article: Article, cfg: AppConfig, output: Path | None) -> None:
    if output is None:
        typer.echo(render(article, cfg.output.format))
        return
    written = write_article(article, cfg.output.format, output)
    console.print(f"Article written: {written}")


if __name__ == "__main__":
    app()
