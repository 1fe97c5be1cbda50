# src/response_kit/rendering/inline.py

"""Inline formatting for leaf text.

Text is escaped first, then rewritten in a fixed order: inline scores, bold,
italic, inline code. Score badges are parked behind a NUL placeholder so no
later pattern can match inside them; inline code runs last over that
protected text.
"""

import math
import re

from response_kit.parsers.models import Score
from response_kit.parsers.patterns import SCORE_MAX_PATTERN, SCORE_VALUE_PATTERN

from .escaping import escape_html
from .scores import render_score_span

_INLINE_SCORE_RE = re.compile(
    rf"(?:(\w+)\s*:\s*)?({SCORE_VALUE_PATTERN})\s*/\s*({SCORE_MAX_PATTERN})"
)
_BOLD_STAR_RE = re.compile(r"\*\*(.+?)\*\*")
_BOLD_UNDERSCORE_RE = re.compile(r"__(.+?)__")
_ITALIC_STAR_RE = re.compile(r"(?<![\w*])\*(?![*\s])(.+?)(?<![*\s])\*(?![\w*])")
_ITALIC_UNDERSCORE_RE = re.compile(r"(?<![\w*])_(?![_\s])(.+?)(?<![_\s])_(?![\w*])")
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")
_PLACEHOLDER_RE = re.compile("\x00(\\d+)\x00")


class _Stash:
    def __init__(self) -> None:
        self._parts: list[str] = []

    def put(self, markup: str) -> str:
        self._parts.append(markup)
        return f"\x00{len(self._parts) - 1}\x00"

    def restore(self, text: str) -> str:
        return _PLACEHOLDER_RE.sub(lambda m: self._parts[int(m.group(1))], text)


def format_inline_content(text: str) -> str:
    """Escape `text` and apply inline markdown and score badges."""
    stash = _Stash()
    result = escape_html(text)

    def _score(match: re.Match[str]) -> str:
        label, value, max_value = match.groups()
        parsed_value = float(value)
        parsed_max = int(max_value)
        if parsed_max <= 0 or not math.isfinite(parsed_value):
            return match.group(0)

        badge = render_score_span(
            Score(value=parsed_value, max=parsed_max),
            block="cr-inline-score",
            max_class="cr-inline-score__max",
        )
        if label:
            badge = f'<span class="cr-inline-score__label">{label}:</span> {badge}'
        return stash.put(badge)

    result = _INLINE_SCORE_RE.sub(_score, result)

    result = _BOLD_STAR_RE.sub(r"<strong>\1</strong>", result)
    result = _BOLD_UNDERSCORE_RE.sub(r"<strong>\1</strong>", result)

    result = _ITALIC_STAR_RE.sub(r"<em>\1</em>", result)
    result = _ITALIC_UNDERSCORE_RE.sub(r"<em>\1</em>", result)

    result = _INLINE_CODE_RE.sub(r'<code class="cr-inline-code">\1</code>', result)

    return stash.restore(result)
