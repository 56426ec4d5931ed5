"""
Wiki Reader - readable sections from MediaWiki article HTML.

This package fetches Wikipedia articles, strips boilerplate from the parse
API HTML, segments it into titled sections with normalized lists and
tables, and renders the result as Markdown, HTML or JSON.

Main entry point is the CLI via the `wiki-reader` command.

Example:
    $ wiki-reader article "Ada Lovelace" -o out/
"""

__all__ = ["__version__", "Article", "ArticleSection", "extract_sections", "decode_content"]
__version__ = "0.1.0"

from .core.types import Article, ArticleSection
from .extract.extractor import extract_sections
from .extract.table_codec import decode_content
