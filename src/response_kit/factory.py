# src/response_kit/factory.py

from response_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import FormatterConfig
from .formatter import ResponseFormatter
from .rendering.highlight import Highlighter, PlainHighlighter, PygmentsHighlighter
from .rendering.sanitize import BleachSanitizer, PassthroughSanitizer, Sanitizer


def create_formatter(
    config: FormatterConfig = FormatterConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ResponseFormatter:
    """Create a response formatter from config.

    Args:
        config: Formatter configuration (highlighter, sanitizing, heuristics).
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured ResponseFormatter.

    Raises:
        ValueError: If the highlighter is unknown.

    Example:
        >>> config = FormatterConfig(highlighter="plain")
        >>> formatter = create_formatter(config)
        >>> html = formatter.format_response("## Tone 7/10\\nWarm.")
    """
    highlighter: Highlighter
    if config.highlighter == "pygments":
        highlighter = PygmentsHighlighter()
    elif config.highlighter == "plain":
        highlighter = PlainHighlighter()
    else:
        raise ValueError(f"Unknown highlighter: {config.highlighter}")

    sanitizer: Sanitizer = (
        BleachSanitizer() if config.sanitize else PassthroughSanitizer()
    )

    return ResponseFormatter(
        heuristics=config.heuristics,
        highlighter=highlighter,
        sanitizer=sanitizer,
        metrics_hook=metrics_hook,
    )
