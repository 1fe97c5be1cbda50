# src/response_kit/rendering/sections.py

import logging

from response_kit.observability.base import MetricsHook, NoOpMetricsHook
from response_kit.parsers.models import (
    Code,
    Hero,
    ListBlock,
    Paragraph,
    ParsedSection,
    Section,
)

from .escaping import escape_html
from .highlight import Highlighter, PlainHighlighter, highlight_code
from .inline import format_inline_content
from .scores import render_hero, render_score_span

logger = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = '<div class="cr-formatted cr-formatted--empty">No content</div>'


def wrap_document(parts: list[str]) -> str:
    if not parts:
        return EMPTY_PLACEHOLDER
    return f'<div class="cr-formatted">{"".join(parts)}</div>'


class SectionRenderer:
    """Renders a sectionized markdown tree with the structured renderer's vocabulary."""

    def __init__(
        self,
        highlighter: Highlighter = PlainHighlighter(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._highlighter = highlighter
        self.metrics_hook = metrics_hook

    def render(self, sections: list[ParsedSection]) -> str:
        logger.debug("Rendering %d sections", len(sections))
        return wrap_document([self.render_section(s) for s in sections])

    def render_section(self, section: ParsedSection) -> str:
        if isinstance(section, Hero):
            return render_hero(section.title, section.score)
        if isinstance(section, Section):
            return self._render_content_section(section)
        if isinstance(section, Paragraph):
            return f'<p class="cr-para">{format_inline_content(section.content)}</p>'
        if isinstance(section, ListBlock):
            return self._render_list(section)
        if isinstance(section, Code):
            return self.render_code(section.content, section.language)
        raise TypeError(f"Unknown section type: {type(section).__name__}")

    def _render_content_section(self, section: Section) -> str:
        score_html = ""
        if section.score is not None:
            score_html = render_score_span(
                section.score,
                block="cr-section__score",
                max_class="cr-section__score-max",
            )

        children = "".join(self.render_section(c) for c in section.children)
        return (
            '<div class="cr-section">'
            '<div class="cr-section__header">'
            f'<h3 class="cr-section__title">{escape_html(section.title)}</h3>'
            f"{score_html}"
            "</div>"
            f'<div class="cr-section__body">{children}</div>'
            "</div>"
        )

    def _render_list(self, section: ListBlock) -> str:
        if not section.items:
            return ""
        tag = "ol" if section.ordered else "ul"
        items = "".join(f"<li>{format_inline_content(i)}</li>" for i in section.items)
        return f'<{tag} class="cr-list">{items}</{tag}>'

    def render_code(self, content: str, language: str | None) -> str:
        highlighted = highlight_code(
            self._highlighter, content, language, self.metrics_hook
        )
        language_html = ""
        if language:
            language_html = f'<div class="cr-code__lang">{escape_html(language)}</div>'
        return (
            '<div class="cr-code">'
            f"{language_html}"
            f'<pre class="cr-code__pre"><code class="highlight">{highlighted}</code></pre>'
            "</div>"
        )
