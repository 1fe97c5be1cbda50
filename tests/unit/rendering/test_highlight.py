# tests/unit/rendering/test_highlight.py

from unittest.mock import MagicMock

import pytest

from response_kit.observability import names
from response_kit.rendering.highlight import (
    HighlightError,
    PlainHighlighter,
    PygmentsHighlighter,
    highlight_code,
)


class TestPygmentsHighlighter:
    def test_known_language(self) -> None:
        html = PygmentsHighlighter().highlight("x = 1", "python")

        assert '<span class="n">x</span>' in html
        assert "<pre" not in html

    def test_output_escaped(self) -> None:
        html = PygmentsHighlighter().highlight("a < b", "python")

        assert "&lt;" in html
        assert "a < b" not in html

    def test_unknown_language_raises(self) -> None:
        with pytest.raises(HighlightError, match="Unknown language"):
            PygmentsHighlighter().highlight("x", "nosuchlang")


class TestPlainHighlighter:
    def test_escapes_only(self) -> None:
        assert PlainHighlighter().highlight("<b>", "python") == "&lt;b&gt;"
        assert PlainHighlighter().highlight_auto("a & b") == "a &amp; b"


class TestHighlightCode:
    def test_declared_language(self) -> None:
        html = highlight_code(PygmentsHighlighter(), "x = 1", "python")

        assert "<span" in html

    def test_auto_detection_never_leaks_markup(self) -> None:
        html = highlight_code(PygmentsHighlighter(), "<b>hi</b>", None)

        assert "<b>" not in html

    def test_fallback_on_failure(self) -> None:
        metrics_hook = MagicMock()

        html = highlight_code(PygmentsHighlighter(), "<b>", "nosuchlang", metrics_hook)

        assert html == "&lt;b&gt;"
        metrics_hook.increment.assert_called_once_with(
            names.HIGHLIGHT_ERRORS_TOTAL, labels={"language": "nosuchlang"}
        )

    def test_auto_failure_labelled_auto(self) -> None:
        highlighter = MagicMock()
        highlighter.highlight_auto.side_effect = HighlightError("nope")
        metrics_hook = MagicMock()

        html = highlight_code(highlighter, "a & b", None, metrics_hook)

        assert html == "a &amp; b"
        metrics_hook.increment.assert_called_once_with(
            names.HIGHLIGHT_ERRORS_TOTAL, labels={"language": "auto"}
        )
