"""
Article rendering for Markdown, HTML and JSON output.

Every renderer runs the table marker decode step on section content, so
plain text is entity-normalized and tables come out as real tables.
HTML uses a Jinja2 template; Markdown and JSON are formatted directly.
"""

from __future__ import annotations

from dataclasses import asdict
import json
from pathlib import Path
import re

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.assembler import reflow_article
from ..core.types import Article, ArticleSection, TableComponent
from ..extract.table_codec import decode_content

_EXTENSIONS = {"markdown": "md", "html": "html", "json": "json"}


def slugify(text: str) -> str:
    """Convert text to a filesystem-safe slug limited to 50 characters."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return (slug or "untitled")[:50]


def output_filename(article: Article, fmt: str) -> str:
    """Return the default file name for an article, e.g. ``ada-lovelace.md``."""
    try:
        extension = _EXTENSIONS[fmt]
    except KeyError:
        raise ValueError(f"Unsupported output format: {fmt}") from None
    return f"{slugify(article.title)}.{extension}"


def render(article: Article, fmt: str) -> str:
    """Render an article in the given format.

    An article without sections is first reflowed from its extract.
    """
    article = reflow_article(article)
    if fmt == "markdown":
        return render_markdown(article)
    if fmt == "html":
        return render_html(article)
    if fmt == "json":
        return render_json(article)
    raise ValueError(f"Unsupported output format: {fmt}")


def write_article(article: Article, fmt: str, output_path: Path) -> Path:
    """Render an article and write it to ``output_path``.

    A directory path receives a file named by ``output_filename``.
    """
    if output_path.is_dir():
        output_path = output_path / output_filename(article, fmt)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render(article, fmt), encoding="utf-8")
    return output_path


def render_markdown(article: Article) -> str:
    """Render an article as Markdown.

    Section levels 1-6 become headings of the same depth; an untitled
    section is plain paragraphs and a titled level-0 section gets a bold
    title line.
    """
    lines = [f"# {article.title}", ""]
    for section in article.sections:
        heading = _markdown_heading(section)
        if heading:
            lines.append(heading)
            lines.append("")
        for component in decode_content(section.content):
            if isinstance(component, TableComponent):
                lines.extend(_markdown_table(component.rows))
            else:
                lines.append(component.text)
            lines.append("")
    lines.append(f"[View on Wikipedia]({article.source_url})")
    return "\n".join(lines) + "\n"


def _markdown_heading(section: ArticleSection) -> str:
    if not section.title:
        return ""
    if 1 <= section.level <= 6:
        return f"{'#' * section.level} {section.title}"
    return f"**{section.title}**"


def _markdown_table(rows: list[list[str]]) -> list[str]:
    width = max(len(row) for row in rows)
    padded = [row + [""] * (width - len(row)) for row in rows]

    def _cell(value: str) -> str:
        return value.replace("|", "\\|")

    lines = ["| " + " | ".join(_cell(c) for c in padded[0]) + " |"]
    lines.append("| " + " | ".join("---" for _ in range(width)) + " |")
    for row in padded[1:]:
        lines.append("| " + " | ".join(_cell(c) for c in row) + " |")
    return lines


def render_html(article: Article) -> str:
    """Render an article as a standalone HTML page via the Jinja2 template."""
    env = Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )
    template = env.get_template("article.html")
    sections = [
        {
            "title": section.title,
            "level": section.level,
            "components": [
                {"kind": "table", "rows": c.rows}
                if isinstance(c, TableComponent)
                else {"kind": "text", "text": c.text}
                for c in decode_content(section.content)
            ],
        }
        for section in article.sections
    ]
    return template.render(
        article=article,
        last_modified=article.last_modified.strftime("%Y-%m-%d %H:%M")
        if article.last_modified
        else None,
        sections=sections,
    )


def render_json(article: Article) -> str:
    """Render an article as JSON, with decoded components next to raw content."""
    payload = asdict(article)
    payload["last_modified"] = article.last_modified.isoformat() if article.last_modified else None
    for section_payload, section in zip(payload["sections"], article.sections):
        section_payload["components"] = [
            {"type": "table", "rows": c.rows}
            if isinstance(c, TableComponent)
            else {"type": "text", "text": c.text}
            for c in decode_content(section.content)
        ]
    return json.dumps(payload, ensure_ascii=False, indent=2)
