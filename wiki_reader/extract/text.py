"""Flattened visible text and class helpers for BeautifulSoup tags."""

from __future__ import annotations

from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

# Block-level tags separate their text from neighbouring text with a space
_BLOCK_TAGS = {
    "address", "article", "aside", "blockquote", "br", "caption", "dd", "div",
    "dl", "dt", "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5",
    "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section",
    "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
}
_SKIP_TAGS = {"script", "style", "template"}
_NON_TEXT = (Comment, Declaration, Doctype, ProcessingInstruction)
# Marks the end of a block tag on the walk stack
_BLOCK_END = object()


def element_text(tag: Tag) -> str:
    """Return the visible text of a tag with whitespace collapsed.

    Inline markup is joined without separators ("<b>Hel</b>lo" -> "Hello")
    while block-level boundaries become single spaces ("<li>A</li><li>B</li>"
    -> "A B").
    """
    parts: list[str] = []
    stack: list = list(reversed(tag.contents))
    while stack:
        node = stack.pop()
        if node is _BLOCK_END:
            parts.append(" ")
        elif isinstance(node, Tag):
            if node.name in _SKIP_TAGS:
                continue
            if node.name in _BLOCK_TAGS:
                parts.append(" ")
                stack.append(_BLOCK_END)
            stack.extend(reversed(node.contents))
        elif isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT):
            parts.append(str(node))
    return " ".join("".join(parts).split())


def tag_classes(tag: Tag) -> list[str]:
    cls = tag.get("class") or []
    return cls if isinstance(cls, list) else str(cls).split()


def has_class(tag: Tag, name: str) -> bool:
    return name in tag_classes(tag)


def class_string(tag: Tag) -> str:
    """Return the raw class attribute as one space-joined string."""
    return " ".join(tag_classes(tag))
