from .base import SectionParser
from .json_extractor import parse_structured_response
from .markdown_parser import MarkdownSectionizer, parse_markdown_sections
from .models import Code, Hero, ListBlock, Paragraph, ParsedSection, Score, Section
from .patterns import (
    extract_hero_score,
    extract_list_items,
    extract_score,
    extract_standalone_score,
    is_hero_title,
)

__all__ = [
    # Parsers
    "SectionParser",
    "MarkdownSectionizer",
    "parse_markdown_sections",
    "parse_structured_response",
    # Types
    "Code",
    "Hero",
    "ListBlock",
    "Paragraph",
    "ParsedSection",
    "Score",
    "Section",
    # Extractors
    "extract_hero_score",
    "extract_list_items",
    "extract_score",
    "extract_standalone_score",
    "is_hero_title",
]
