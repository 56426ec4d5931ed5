"""
Core domain models and article assembly.

This package contains data types and business logic that is
independent of any specific pipeline stage.
"""

from .types import (
    Article,
    ArticleSection,
    ExtractionResult,
    ParsedTable,
    TableComponent,
    TextComponent,
    WikiSummary,
)
from .assembler import build_article, reflow_article, split_paragraph_sections

__all__ = [
    "Article",
    "ArticleSection",
    "ExtractionResult",
    "ParsedTable",
    "TableComponent",
    "TextComponent",
    "WikiSummary",
    "build_article",
    "reflow_article",
    "split_paragraph_sections",
]
