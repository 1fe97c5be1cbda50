# tests/unit/test_factory.py

from unittest.mock import MagicMock

import pytest

from response_kit.config import FormatterConfig, Heuristics
from response_kit.factory import create_formatter
from response_kit.formatter import ResponseFormatter
from response_kit.rendering.highlight import PlainHighlighter, PygmentsHighlighter
from response_kit.rendering.sanitize import BleachSanitizer, PassthroughSanitizer


class TestFactory:
    def test_default_formatter(self) -> None:
        formatter = create_formatter()

        assert isinstance(formatter, ResponseFormatter)
        assert isinstance(formatter._section_renderer._highlighter, PygmentsHighlighter)
        assert isinstance(formatter._sanitizer, BleachSanitizer)

    def test_plain_highlighter(self) -> None:
        formatter = create_formatter(FormatterConfig(highlighter="plain"))

        assert isinstance(formatter._section_renderer._highlighter, PlainHighlighter)
        assert isinstance(
            formatter._structured_renderer._highlighter, PlainHighlighter
        )

    def test_sanitize_disabled(self) -> None:
        formatter = create_formatter(FormatterConfig(sanitize=False))

        assert isinstance(formatter._sanitizer, PassthroughSanitizer)

    def test_unknown_highlighter_raises(self) -> None:
        config = FormatterConfig(highlighter="prism")  # type: ignore[arg-type]

        with pytest.raises(ValueError, match="Unknown highlighter"):
            create_formatter(config)

    def test_config_values_passed_through(self) -> None:
        """Test that heuristics and metrics hook reach the formatter."""
        heuristics = Heuristics(max_depth=3)
        metrics_hook = MagicMock()

        formatter = create_formatter(
            FormatterConfig(heuristics=heuristics), metrics_hook
        )

        assert formatter._heuristics is heuristics
        assert formatter.metrics_hook is metrics_hook
        formatter.format_response("hello")
        metrics_hook.record_latency.assert_called_once()
