"""
HTML-to-sections extraction.

This package holds the extraction core: boilerplate removal, heading
detection, content formatting, section segmentation and the inline table
marker codec.
"""

from .boilerplate import BOILERPLATE_RULES, NodeRule, is_boilerplate_child, strip_boilerplate
from .extractor import extract_sections, find_content_root
from .formatter import format_element, parse_table
from .headings import HeadingMatch, detect_heading
from .segmenter import SectionSegmenter, SegmenterState, segment_sections
from .table_codec import decode_content, encode_table, normalize_text

__all__ = [
    "BOILERPLATE_RULES",
    "NodeRule",
    "is_boilerplate_child",
    "strip_boilerplate",
    "extract_sections",
    "find_content_root",
    "format_element",
    "parse_table",
    "HeadingMatch",
    "detect_heading",
    "SectionSegmenter",
    "SegmenterState",
    "segment_sections",
    "decode_content",
    "encode_table",
    "normalize_text",
]
