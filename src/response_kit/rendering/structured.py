# src/response_kit/rendering/structured.py

"""Schema-driven rendering of parsed JSON.

Walks the data and its schema together and picks a presentation per node:
hero block, labeled field, bulleted list, card list or nested section.
"""

import json
import logging
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from response_kit.config import DEFAULT_SCORE_WORDS, Heuristics
from response_kit.observability import names
from response_kit.observability.base import MetricsHook, NoOpMetricsHook
from response_kit.schema.inference import infer_type
from response_kit.schema.models import JsonSchema

from .escaping import escape_attr, escape_html
from .highlight import Highlighter, PlainHighlighter, highlight_code
from .inline import format_inline_content
from .scores import bare_score, render_hero, render_score_span
from .sections import wrap_document

logger = logging.getLogger(__name__)

_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_WORD_START_RE = re.compile(r"\b\w")

_NUMERIC_TYPES = {"number", "integer"}


def is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def as_number(value: Any) -> float | None:
    """`value` as a finite float, or None when it is not one.

    Integers too large for a float are not scores and come back as None.
    """
    if not is_number(value):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def is_simple_value(value: Any) -> bool:
    return value is None or isinstance(value, str | int | float | bool)


def is_url(text: str) -> bool:
    return bool(_URL_RE.match(text))


def is_email(text: str) -> bool:
    return bool(_EMAIL_RE.match(text))


def format_label(key: str) -> str:
    """"overall_score" -> "Overall Score", "dialogueQuality" -> "Dialogue Quality"."""
    label = key.replace("_", " ")
    label = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", label)
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), label)


def format_number(value: float) -> str:
    """Grouped thousands, at most two decimals."""
    if isinstance(value, int):
        return f"{value:,}"
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def find_hero_key(data: Mapping[str, Any], patterns: Iterable[str]) -> str | None:
    """Key holding the headline score, by pattern priority then key order."""
    for pattern in patterns:
        for key, value in data.items():
            normalized = key.lower().replace("_", "")
            if normalized == pattern and as_number(value) is not None:
                return key
    return None


def looks_like_score(
    label: str, value: float, score_words: Iterable[str] = DEFAULT_SCORE_WORDS
) -> bool:
    """Whether a number should render as a score badge.

    Both 0-10 and 0-100 scales are common in model output, so any value in
    [0, 10] and any integer in [0, 100] counts, as does a score-like label.
    """
    if any(word in label for word in score_words):
        return True
    if not math.isfinite(value):
        return False
    if 0 <= value <= 10:
        return True
    return 0 <= value <= 100 and float(value).is_integer()


def _resolve_type(schema: JsonSchema, value: Any) -> str:
    """Declared type when it fits the value, runtime type otherwise."""
    runtime = infer_type(value)
    declared = schema.primary_type
    if declared is None or declared == runtime:
        return runtime
    if declared in _NUMERIC_TYPES and runtime == "number":
        return declared
    return runtime


def _ordered_keys(data: Mapping[str, Any], schema: JsonSchema) -> list[str]:
    if schema.properties:
        return [key for key in schema.properties if key in data]
    return list(data)


def _property_schema(schema: JsonSchema, key: str, value: Any) -> JsonSchema:
    properties = schema.properties or {}
    return properties.get(key) or JsonSchema(type=infer_type(value))


class StructuredRenderer:
    def __init__(
        self,
        heuristics: Heuristics = Heuristics(),
        highlighter: Highlighter = PlainHighlighter(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._heuristics = heuristics
        self._highlighter = highlighter
        self.metrics_hook = metrics_hook

    def render_structured_root(self, data: Mapping[str, Any], schema: JsonSchema) -> str:
        parts: list[str] = []

        hero_key = find_hero_key(data, self._heuristics.hero_keys)
        if hero_key is not None:
            score = bare_score(
                as_number(data[hero_key]), self._heuristics.score_scale_threshold
            )
            parts.append(render_hero(format_label(hero_key), score))

        for key in _ordered_keys(data, schema):
            if key == hero_key:
                continue
            value = data[key]
            parts.append(
                self.render_field(key, value, _property_schema(schema, key, value), 0)
            )

        logger.debug(
            "Rendered structured root: hero=%s, fields=%d", hero_key, len(parts)
        )
        return wrap_document(parts)

    def render_field(self, key: str, value: Any, schema: JsonSchema, depth: int) -> str:
        if depth > self._heuristics.max_depth:
            self.metrics_hook.increment(names.RENDER_DEPTH_LIMIT_TOTAL)
            return self._render_json(value)

        label = format_label(key)
        value_type = _resolve_type(schema, value)

        if value_type == "array":
            return self._render_array_field(label, value, schema, depth)
        if value_type == "object":
            return self._render_object_field(label, value, schema, depth)

        return (
            '<div class="cr-field">'
            f'<div class="cr-field__label">{escape_html(label)}</div>'
            f'<div class="cr-field__value">{self.render_value(value, schema, key)}</div>'
            "</div>"
        )

    def _render_array_field(
        self, label: str, items: list[Any], schema: JsonSchema, depth: int
    ) -> str:
        label_html = f'<div class="cr-field__label">{escape_html(label)}</div>'
        if not items:
            return (
                '<div class="cr-field">'
                f"{label_html}"
                '<div class="cr-field__value cr-field--empty">(none)</div>'
                "</div>"
            )

        if all(is_simple_value(item) for item in items):
            list_items = "".join(
                f"<li>{self._render_simple_value(item)}</li>" for item in items
            )
            return f'<div class="cr-field">{label_html}<ul class="cr-list">{list_items}</ul></div>'

        # Sampled from the first element, like schema inference
        item_schema = schema.items or JsonSchema(type=infer_type(items[0]))
        cards = []
        for item in items:
            if isinstance(item, dict):
                cards.append(self._render_card(item, item_schema, depth + 1))
            else:
                cards.append(
                    f'<div class="cr-card">{self.render_value(item, item_schema)}</div>'
                )
        return f'<div class="cr-field">{label_html}<div class="cr-cards">{"".join(cards)}</div></div>'

    def _render_card(
        self, data: Mapping[str, Any], schema: JsonSchema, depth: int
    ) -> str:
        keys = _ordered_keys(data, schema)
        title_key = self._pick_title_key(data, keys)
        score_key = next((k for k in keys if self._is_card_score(data[k])), None)
        body_key = next(
            (
                k
                for k in keys
                if k != title_key
                and isinstance(data[k], str)
                and len(data[k]) >= self._heuristics.card_body_min_length
            ),
            None,
        )

        header = ""
        if title_key is not None or score_key is not None:
            title_html = ""
            if title_key is not None:
                title_html = (
                    f'<span class="cr-card__title">{escape_html(data[title_key])}</span>'
                )
            score_html = ""
            if score_key is not None:
                score_html = self._render_score_badge(as_number(data[score_key]))
            header = f'<div class="cr-card__header">{title_html}{score_html}</div>'

        body = ""
        if body_key is not None:
            body = f'<div class="cr-card__body">{format_inline_content(data[body_key])}</div>'

        roles = {title_key, score_key, body_key}
        remaining = "".join(
            self.render_field(k, data[k], _property_schema(schema, k, data[k]), depth + 1)
            for k in keys
            if k not in roles
        )
        extra = f'<div class="cr-card__extra">{remaining}</div>' if remaining else ""

        return f'<div class="cr-card">{header}{body}{extra}</div>'

    def _is_card_score(self, value: Any) -> bool:
        number = as_number(value)
        return number is not None and 0 <= number <= self._heuristics.card_score_max

    def _pick_title_key(self, data: Mapping[str, Any], keys: list[str]) -> str | None:
        """Shortest non-empty string under the title limit; key order breaks ties."""
        candidates = [
            k
            for k in keys
            if isinstance(data[k], str)
            and data[k].strip()
            and len(data[k]) < self._heuristics.card_title_max_length
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda k: len(data[k]))

    def _render_object_field(
        self, label: str, data: Mapping[str, Any], schema: JsonSchema, depth: int
    ) -> str:
        fields = "".join(
            self.render_field(k, data[k], _property_schema(schema, k, data[k]), depth + 1)
            for k in _ordered_keys(data, schema)
        )
        return (
            '<div class="cr-section">'
            '<div class="cr-section__header">'
            f'<h3 class="cr-section__title">{escape_html(label)}</h3>'
            "</div>"
            f'<div class="cr-section__body cr-section__body--nested">{fields}</div>'
            "</div>"
        )

    def render_value(
        self, value: Any, schema: JsonSchema, field_name: str | None = None
    ) -> str:
        if value is None:
            return '<span class="cr-null">—</span>'

        value_type = _resolve_type(schema, value)
        if value_type == "string":
            return self._render_string(value, schema)
        if value_type in _NUMERIC_TYPES:
            return self._render_number(value, schema, field_name)
        if value_type == "boolean":
            return self._render_boolean(value)
        if value_type in ("array", "object"):
            return self._render_json(value)
        return f"<span>{escape_html(value)}</span>"

    def _render_string(self, data: str, schema: JsonSchema) -> str:
        if not data.strip():
            return '<span class="cr-empty">(empty)</span>'

        if schema.format in ("uri", "url") or is_url(data):
            limit = self._heuristics.link_label_max_length
            display = data if len(data) <= limit else data[: limit - 3] + "..."
            return (
                f'<a href="{escape_attr(data)}" target="_blank" rel="noopener" '
                f'class="cr-link">{escape_html(display)}</a>'
            )

        if schema.format == "email" or is_email(data):
            return (
                f'<a href="mailto:{escape_attr(data)}" class="cr-link">'
                f"{escape_html(data)}</a>"
            )

        if len(data) > self._heuristics.block_text_min_length or "\n" in data:
            return f'<div class="cr-text">{format_inline_content(data)}</div>'

        return f"<span>{format_inline_content(data)}</span>"

    def _render_number(
        self, data: float, schema: JsonSchema, field_name: str | None
    ) -> str:
        label = (schema.title or schema.description or field_name or "").lower()
        number = as_number(data)
        if number is not None and looks_like_score(
            label, number, self._heuristics.score_words
        ):
            return self._render_score_badge(number)
        return f'<span class="cr-num">{format_number(data)}</span>'

    def _render_score_badge(self, data: float) -> str:
        score = bare_score(data, self._heuristics.score_scale_threshold)
        return render_score_span(score, block="cr-score", max_class="cr-score__max")

    def _render_boolean(self, data: bool) -> str:
        if data:
            return '<span class="cr-bool cr-bool--yes"><i class="fa-solid fa-check-circle"></i> Yes</span>'
        return '<span class="cr-bool cr-bool--no"><i class="fa-solid fa-times-circle"></i> No</span>'

    def _render_simple_value(self, data: Any) -> str:
        if data is None:
            return '<span class="cr-null">—</span>'
        if isinstance(data, bool):
            return self._render_boolean(data)
        if is_number(data):
            return f'<span class="cr-num">{format_number(data)}</span>'
        return format_inline_content(str(data))

    def _render_json(self, data: Any) -> str:
        dumped = json.dumps(data, indent=2, ensure_ascii=False)
        highlighted = highlight_code(self._highlighter, dumped, "json", self.metrics_hook)
        return f'<pre class="cr-code__pre"><code class="highlight">{highlighted}</code></pre>'
