"""
Article output rendering.
"""

from .renderer import (
    output_filename,
    render,
    render_html,
    render_json,
    render_markdown,
    slugify,
    write_article,
)

__all__ = [
    "output_filename",
    "render",
    "render_html",
    "render_json",
    "render_markdown",
    "slugify",
    "write_article",
]
