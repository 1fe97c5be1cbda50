# src/response_kit/rendering/__init__.py

"""HTML rendering for parsed responses.

All leaf text is escaped here; the sanitizer is a second line, not the first.
"""

from .escaping import escape_attr, escape_html
from .highlight import (
    Highlighter,
    HighlightError,
    PlainHighlighter,
    PygmentsHighlighter,
    highlight_code,
)
from .inline import format_inline_content
from .sanitize import BleachSanitizer, PassthroughSanitizer, Sanitizer
from .scores import ScoreTier, render_hero, render_score_span, score_tier
from .sections import EMPTY_PLACEHOLDER, SectionRenderer
from .structured import StructuredRenderer, format_label

__all__ = [
    # Renderers
    "SectionRenderer",
    "StructuredRenderer",
    "EMPTY_PLACEHOLDER",
    # Highlighting
    "Highlighter",
    "HighlightError",
    "PlainHighlighter",
    "PygmentsHighlighter",
    "highlight_code",
    # Sanitizing
    "Sanitizer",
    "BleachSanitizer",
    "PassthroughSanitizer",
    # Scores
    "ScoreTier",
    "score_tier",
    "render_hero",
    "render_score_span",
    # Text
    "escape_attr",
    "escape_html",
    "format_inline_content",
    "format_label",
]
