"""
Section heading detection.

MediaWiki encodes headings two ways: a bare ``<h2>`` among the content
children, or a wrapper such as ``<div class="mw-heading mw-heading2">`` that
holds the heading tag. A wrapper only counts when its heading is "primary",
judged by an ordered list of containment rules. Headings buried deeper (for
example inside a table cell) never open a section.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from bs4.element import Tag

from .text import element_text, has_class

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
HEADLINE_CLASS = "mw-headline"
HEADING_CONTAINER_CLASS = "mw-heading"

_HEADING_NAME_RE = re.compile(r"^h([1-6])$")


@dataclass(frozen=True)
class HeadingMatch:
    level: int
    title: str


def heading_level(tag: Tag) -> int:
    """Return 1-6 for an ``h1``..``h6`` tag, 0 for anything else."""
    match = _HEADING_NAME_RE.match((tag.name or "").lower())
    return int(match.group(1)) if match else 0


def _is_direct_child(node: Tag, heading: Tag) -> bool:
    return heading.parent is node


def _is_node_itself(node: Tag, heading: Tag) -> bool:
    return heading is node


def _is_in_headline_wrapper(node: Tag, heading: Tag) -> bool:
    parent = heading.parent
    return parent is not None and has_class(parent, HEADLINE_CLASS) and parent.parent is node


def _is_in_heading_container(node: Tag, heading: Tag) -> bool:
    return has_class(node, HEADING_CONTAINER_CLASS) and heading.parent is node


# Evaluated in order; the first rule that accepts the heading wins.
PRIMARY_HEADING_RULES: tuple[Callable[[Tag, Tag], bool], ...] = (
    _is_direct_child,
    _is_node_itself,
    _is_in_headline_wrapper,
    _is_in_heading_container,
)


def detect_heading(node: Tag) -> HeadingMatch | None:
    """Classify a content-root child as a section heading.

    Args:
        node: A direct child of the content root

    Returns:
        HeadingMatch with the level and flattened title, or None when the
        node does not open a section
    """
    level = heading_level(node)
    if level:
        return HeadingMatch(level=level, title=element_text(node))

    heading = node.find(HEADING_TAGS)
    if heading is None:
        return None
    if not any(rule(node, heading) for rule in PRIMARY_HEADING_RULES):
        return None
    level = heading_level(heading)
    if not level:
        return None
    return HeadingMatch(level=level, title=element_text(heading))
