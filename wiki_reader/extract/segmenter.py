"""
Partitioning of the content root into an introduction and titled sections.

``SectionSegmenter`` is an explicit state machine fed one content-root child
at a time:

- COLLECTING_INTRO: text accumulates into the introduction until the first
  heading, which emits the intro (when non-empty) and opens a section.
- IN_SECTION: text accumulates into the open section; the next heading
  emits it (when it has a title or content) and opens another.
- DONE: ``finish()`` has flushed the last buffer; no more input is accepted.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from bs4.element import Tag

from ..core.types import ArticleSection
from .boilerplate import is_boilerplate_child
from .formatter import format_element
from .headings import HeadingMatch, detect_heading


class SegmenterState(str, Enum):
    COLLECTING_INTRO = "collecting_intro"
    IN_SECTION = "in_section"
    DONE = "done"


class SectionSegmenter:
    """Accumulates formatted fragments and emits ArticleSections in document order.

    Attributes:
        state: Current SegmenterState
        title: Title of the open section (empty while collecting the intro)
        level: Level of the open section (0 while collecting the intro)
        sections: Sections emitted so far
    """

    def __init__(self) -> None:
        self.state = SegmenterState.COLLECTING_INTRO
        self.title = ""
        self.level = 0
        self.sections: list[ArticleSection] = []
        self._buffer: list[str] = []

    def feed(self, node: Tag) -> None:
        """Process one child of the content root."""
        if self.state is SegmenterState.DONE:
            raise RuntimeError("segmenter already finished")
        heading = detect_heading(node)
        if heading is not None:
            self._open_section(heading)
            return
        if is_boilerplate_child(node):
            return
        fragment = format_element(node)
        if fragment.strip():
            self._buffer.append(fragment + "\n")

    def finish(self) -> list[ArticleSection]:
        """Flush the remaining buffer and return all emitted sections."""
        if self.state is not SegmenterState.DONE:
            self._finalize()
            self.state = SegmenterState.DONE
        return list(self.sections)

    def _open_section(self, heading: HeadingMatch) -> None:
        self._finalize()
        self.state = SegmenterState.IN_SECTION
        self.title = heading.title
        self.level = heading.level

    def _finalize(self) -> None:
        content = "".join(self._buffer).strip()
        self._buffer = []
        if self.state is SegmenterState.COLLECTING_INTRO:
            if content:
                self.sections.append(ArticleSection(title="", level=0, content=content))
        elif self.title or content:
            self.sections.append(ArticleSection(title=self.title, level=self.level, content=content))


def segment_sections(children: Iterable[Tag]) -> list[ArticleSection]:
    segmenter = SectionSegmenter()
    for child in children:
        segmenter.feed(child)
    return segmenter.finish()
