# src/response_kit/formatter.py

import logging
from collections.abc import Mapping
from functools import lru_cache
from time import monotonic
from typing import Any

from response_kit.config import Heuristics
from response_kit.observability import names
from response_kit.observability.base import MetricsHook, NoOpMetricsHook
from response_kit.parsers.json_extractor import parse_structured_response
from response_kit.parsers.markdown_parser import MarkdownSectionizer
from response_kit.rendering.highlight import Highlighter, PygmentsHighlighter
from response_kit.rendering.sanitize import BleachSanitizer, Sanitizer
from response_kit.rendering.sections import SectionRenderer
from response_kit.rendering.structured import StructuredRenderer
from response_kit.schema.inference import infer_schema
from response_kit.schema.models import JsonSchema, StructuredOutputSchema

logger = logging.getLogger(__name__)

SchemaLike = StructuredOutputSchema | JsonSchema | Mapping[str, Any]


class ResponseFormatter:
    """Turns raw model output into a safe HTML fragment.

    Stateless between calls: the same input always yields the same markup.
    """

    def __init__(
        self,
        heuristics: Heuristics = Heuristics(),
        highlighter: Highlighter = PygmentsHighlighter(),
        sanitizer: Sanitizer = BleachSanitizer(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._heuristics = heuristics
        self._sanitizer = sanitizer
        self.metrics_hook = metrics_hook
        self._sectionizer = MarkdownSectionizer(heuristics.hero_title_words)
        self._section_renderer = SectionRenderer(highlighter, metrics_hook)
        self._structured_renderer = StructuredRenderer(
            heuristics, highlighter, metrics_hook
        )

    def format_response(self, text: str) -> str:
        """Format a response, detecting JSON vs prose.

        A JSON object or array is rendered structurally with an inferred
        schema. Anything else, including JSON scalars, is treated as markdown.
        """
        start = monotonic()
        text = _as_text(text)

        data = parse_structured_response(text)
        if isinstance(data, dict | list):
            markup = self._render_structured(data, None)
            return self._finish(markup, "structured", start)

        markup = self._render_markdown(text)
        return self._finish(markup, "markdown", start)

    def format_structured_response(
        self, text: str, schema: SchemaLike | None = None
    ) -> str:
        """Format a response expected to be JSON.

        Args:
            text: Raw model output, optionally with the JSON in a fenced block.
            schema: Declared output schema. Inferred from the data when absent.

        Returns:
            Sanitized HTML. Falls back to the markdown path when no JSON
            object or array can be extracted.
        """
        start = monotonic()
        text = _as_text(text)

        data = parse_structured_response(text)
        if not isinstance(data, dict | list):
            logger.debug("Structured response is not a JSON object, formatting as prose")
            self.metrics_hook.increment(names.FORMAT_JSON_FALLBACK_TOTAL)
            markup = self._render_markdown(text)
            return self._finish(markup, "markdown", start)

        markup = self._render_structured(data, schema)
        return self._finish(markup, "structured", start)

    def _render_markdown(self, text: str) -> str:
        sections = self._sectionizer.parse(text)
        return self._section_renderer.render(sections)

    def _render_structured(
        self, data: dict[str, Any] | list[Any], schema: SchemaLike | None
    ) -> str:
        resolved = _resolve_schema(schema, data)

        if isinstance(data, list):
            # Arrays render as objects keyed by element index
            item_schema = resolved.items
            data = {str(i): item for i, item in enumerate(data)}
            properties = (
                {key: item_schema for key in data} if item_schema is not None else None
            )
            resolved = JsonSchema(type="object", properties=properties)

        return self._structured_renderer.render_structured_root(data, resolved)

    def _finish(self, markup: str, mode: str, start: float) -> str:
        result = self._sanitizer.sanitize(markup)
        elapsed_ms = 1000 * (monotonic() - start)

        self.metrics_hook.record_latency(
            names.FORMAT_DURATION, elapsed_ms, labels={"mode": mode}
        )
        self.metrics_hook.increment(names.FORMAT_REQUESTS_TOTAL, labels={"mode": mode})

        logger.debug(
            "Formatted response: mode=%s, chars=%d, latency=%.1fms",
            mode,
            len(result),
            elapsed_ms,
        )
        return result


def _as_text(text: Any) -> str:
    if text is None:
        return ""
    return text if isinstance(text, str) else str(text)


def _resolve_schema(schema: SchemaLike | None, data: Any) -> JsonSchema:
    if schema is None:
        return infer_schema(data)
    if isinstance(schema, StructuredOutputSchema):
        return schema.value
    if isinstance(schema, JsonSchema):
        return schema
    if "name" in schema and "value" in schema:
        return StructuredOutputSchema.model_validate(schema).value
    return JsonSchema.model_validate(schema)


@lru_cache(maxsize=1)
def _default_formatter() -> ResponseFormatter:
    return ResponseFormatter()


def format_response(text: str) -> str:
    """Format a model response with the default formatter."""
    return _default_formatter().format_response(text)


def format_structured_response(text: str, schema: SchemaLike | None = None) -> str:
    """Format a JSON model response with the default formatter."""
    return _default_formatter().format_structured_response(text, schema)
