# src/response_kit/rendering/highlight.py

import logging
from typing import Protocol

import pygments
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from response_kit.observability import names
from response_kit.observability.base import MetricsHook, NoOpMetricsHook

from .escaping import escape_html

logger = logging.getLogger(__name__)


class HighlightError(Exception):
    """Raised when a highlighter cannot handle a code block."""


class Highlighter(Protocol):
    """Turns source code into escaped, highlighted HTML.

    Implementations raise HighlightError instead of guessing when they cannot
    handle the input; `highlight_code` owns the fallback.
    """

    def highlight(self, code: str, language: str) -> str: ...

    def highlight_auto(self, code: str) -> str: ...


class PygmentsHighlighter:
    """Pygments-backed highlighter emitting bare token spans (no wrapper)."""

    def __init__(self) -> None:
        self._formatter = HtmlFormatter(nowrap=True)

    def highlight(self, code: str, language: str) -> str:
        try:
            lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound as exc:
            raise HighlightError(f"Unknown language: {language}") from exc
        return pygments.highlight(code, lexer, self._formatter)

    def highlight_auto(self, code: str) -> str:
        try:
            lexer = guess_lexer(code, stripnl=False, ensurenl=False)
        except ClassNotFound as exc:
            raise HighlightError("Could not detect a language") from exc
        return pygments.highlight(code, lexer, self._formatter)


class PlainHighlighter:
    """No highlighting, only escaping."""

    def highlight(self, code: str, language: str) -> str:
        return escape_html(code)

    def highlight_auto(self, code: str) -> str:
        return escape_html(code)


def highlight_code(
    highlighter: Highlighter,
    code: str,
    language: str | None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Highlight `code`, falling back to escaped plain text on failure."""
    try:
        if language:
            return highlighter.highlight(code, language)
        return highlighter.highlight_auto(code)
    except HighlightError as exc:
        logger.warning("Highlighting failed, rendering plain text: %s", exc)
        metrics_hook.increment(
            names.HIGHLIGHT_ERRORS_TOTAL, labels={"language": language or "auto"}
        )
        return escape_html(code)
