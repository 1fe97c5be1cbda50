# Config
from .config import FormatterConfig, Heuristics, load_heuristics

# Factory
from .factory import create_formatter

# Formatter
from .formatter import (
    ResponseFormatter,
    format_response,
    format_structured_response,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    Code,
    Hero,
    ListBlock,
    MarkdownSectionizer,
    Paragraph,
    Score,
    Section,
    parse_structured_response,
)

# Schema
from .schema import JsonSchema, StructuredOutputSchema, infer_schema

__all__ = [
    # Config
    "FormatterConfig",
    "Heuristics",
    "load_heuristics",
    # Factory
    "create_formatter",
    # Formatter
    "ResponseFormatter",
    "format_response",
    "format_structured_response",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Code",
    "Hero",
    "ListBlock",
    "MarkdownSectionizer",
    "Paragraph",
    "Score",
    "Section",
    "parse_structured_response",
    # Schema
    "JsonSchema",
    "StructuredOutputSchema",
    "infer_schema",
]
