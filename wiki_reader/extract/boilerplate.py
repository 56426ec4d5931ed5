"""
Removal of non-content nodes from parsed article HTML.

The rule set is a declarative table of ``NodeRule`` predicates (tag name and
class membership tests). ``strip_boilerplate`` evaluates it in one pass over
the tree and never descends into a subtree it has removed, so running it a
second time finds nothing left to remove.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from bs4 import BeautifulSoup
from bs4.element import Tag

from .text import class_string, tag_classes

# Class markers shared with the per-child filter used during segmentation
PER_CHILD_CLASSES = frozenset({"shortdescription", "hatnote", "mw-jump-link", "toc"})
PER_CHILD_CLASS_SUBSTRINGS = ("infobox", "navbox")
PER_CHILD_TAGS = frozenset({"meta", "style"})


@dataclass(frozen=True)
class NodeRule:
    """A structural predicate selecting nodes to remove.

    A node matches when every non-empty constraint holds: its tag name is in
    ``tags``, it carries at least one of ``classes``, and it carries none of
    ``unless_classes``.

    Attributes:
        name: Rule label, used as the key of removal counts
        tags: Tag names to match (empty means any tag)
        classes: Classes of which at least one must be present (empty means no class test)
        unless_classes: Classes that exempt a node from the rule
    """
    name: str
    tags: frozenset[str] = frozenset()
    classes: frozenset[str] = frozenset()
    unless_classes: frozenset[str] = frozenset()

    def matches(self, tag: Tag) -> bool:
        if self.tags and tag.name not in self.tags:
            return False
        cls = set(tag_classes(tag))
        if self.classes and not (cls & self.classes):
            return False
        if self.unless_classes and (cls & self.unless_classes):
            return False
        return True


BOILERPLATE_RULES: tuple[NodeRule, ...] = (
    NodeRule("infobox", classes=frozenset({"infobox"})),
    NodeRule("thumbnail", classes=frozenset({"thumb", "image"})),
    NodeRule("image", tags=frozenset({"img", "figure"})),
    NodeRule("toc", classes=frozenset({"toc"})),
    NodeRule("edit_link", classes=frozenset({"mw-editsection"})),
    NodeRule("navbox", classes=frozenset({"navbox", "vertical-navbox", "sistersitebox"})),
    NodeRule("message_box", classes=frozenset({"metadata", "mbox", "ambox", "tmbox"})),
    NodeRule("layout_table", tags=frozenset({"table"}), unless_classes=frozenset({"wikitable"})),
    NodeRule("empty", classes=frozenset({"mw-empty-elt"})),
    NodeRule("jump_link", classes=frozenset({"mw-jump-link"})),
    NodeRule("style", tags=frozenset({"style"})),
)


def match_rule(tag: Tag, rules: tuple[NodeRule, ...] = BOILERPLATE_RULES) -> NodeRule | None:
    """Return the first rule matching ``tag``, or None."""
    for rule in rules:
        if rule.matches(tag):
            return rule
    return None


def strip_boilerplate(
    soup: BeautifulSoup | Tag, rules: tuple[NodeRule, ...] = BOILERPLATE_RULES
) -> Counter[str]:
    """Remove every node matching ``rules`` from the tree, in place.

    Args:
        soup: Parsed document (or any subtree) to clean
        rules: Rule table to apply

    Returns:
        Number of removed nodes keyed by rule name
    """
    removed: Counter[str] = Counter()
    pending: list[Tag] = [soup]
    while pending:
        node = pending.pop()
        for child in list(node.children):
            if not isinstance(child, Tag):
                continue
            rule = match_rule(child, rules)
            if rule is not None:
                child.decompose()
                removed[rule.name] += 1
            else:
                pending.append(child)
    return removed


def is_boilerplate_child(tag: Tag) -> bool:
    """Narrow per-child filter applied while segmenting the content root.

    Catches wrapper nodes that survived bulk removal: short descriptions,
    hatnotes, jump links, tables of contents, anything whose class string
    mentions an infobox or navbox, and ``meta`` / ``style`` tags.
    """
    if tag.name in PER_CHILD_TAGS:
        return True
    if PER_CHILD_CLASSES.intersection(tag_classes(tag)):
        return True
    joined = class_string(tag)
    return any(marker in joined for marker in PER_CHILD_CLASS_SUBSTRINGS)
