# src/response_kit/parsers/markdown_parser.py

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from response_kit.config import DEFAULT_HERO_TITLE_WORDS

from .base import SectionParser
from .models import Code, Hero, ListBlock, Paragraph, ParsedSection, Score, Section
from .patterns import (
    extract_list_items,
    extract_standalone_score,
    is_hero_title,
    split_title_score,
)

logger = logging.getLogger(__name__)

_HORIZONTAL_RULE_RE = re.compile(r"^[-*_]{3,}\s*$")
_FENCE_RE = re.compile(r"^```([\w+#.-]*)")
_HEADING_RE = re.compile(r"^(#{1,3})\s+(.+)$")
_BOLD_LABEL_RE = re.compile(r"^\*\*([^*]+):\*\*\s*$")
_BLANK_LINE_SPLIT_RE = re.compile(r"\n\s*\n")


@dataclass
class _OpenSection:
    """A heading whose body is still being read."""

    title: str
    score: Score | None = None
    children: list[ParsedSection] = field(default_factory=list)

    def has_content(self) -> bool:
        return bool(self.children) or self.score is not None

    def close(self) -> Section:
        return Section(title=self.title, score=self.score, children=list(self.children))


@dataclass
class _SectionizerState:
    root: list[ParsedSection] = field(default_factory=list)
    current: _OpenSection | None = None
    content: list[str] = field(default_factory=list)
    in_code: bool = False
    code: list[str] = field(default_factory=list)
    code_language: str = ""

    def emit(self, section: ParsedSection) -> None:
        if self.current is not None:
            self.current.children.append(section)
        else:
            self.root.append(section)


class MarkdownSectionizer(SectionParser):
    """
    Line-oriented markdown sectionizer.
    - Headings (up to three levels) open sections
    - "value/max" scores attach to headings or become hero blocks
    - Lists, paragraphs and fenced code become leaf sections
    Anything it does not recognize is kept as paragraph text.
    """

    def __init__(
        self, hero_title_words: Iterable[str] = DEFAULT_HERO_TITLE_WORDS
    ) -> None:
        self._hero_title_words = tuple(hero_title_words)

    def parse(self, text: str) -> list[ParsedSection]:
        state = _SectionizerState()
        for line in text.replace("\r\n", "\n").split("\n"):
            self._step(state, line)
        self._finish(state)

        sections = self._promote_hero(state.root)
        logger.debug("Sectionized markdown into %d root sections", len(sections))
        return sections

    def _step(self, state: _SectionizerState, line: str) -> None:
        fence = _FENCE_RE.match(line)
        if fence:
            if state.in_code:
                self._flush_code(state)
                state.in_code = False
            else:
                self._flush_content(state)
                state.in_code = True
                state.code_language = fence.group(1)
            return

        if state.in_code:
            state.code.append(line)
            return

        if _HORIZONTAL_RULE_RE.match(line.strip()):
            return

        heading = _HEADING_RE.match(line)
        if heading:
            self._open_heading(state, depth=len(heading.group(1)), text=heading.group(2))
            return

        score = extract_standalone_score(line)
        if score is not None and state.current is not None:
            state.current.score = score
            return

        if _BOLD_LABEL_RE.match(line) and state.current is not None:
            # Keep "**Strengths:**" apart from the list that usually follows
            self._flush_content(state)
            state.emit(Paragraph(content=line.strip()))
            return

        state.content.append(line)

    def _open_heading(self, state: _SectionizerState, *, depth: int, text: str) -> None:
        self._flush_content(state)
        self._close_section(state)

        title, score = split_title_score(text.strip())
        if depth == 1 and score is not None:
            state.root.append(Hero(title=title, score=score))
            return

        state.current = _OpenSection(title=title, score=score)

    def _close_section(self, state: _SectionizerState) -> None:
        # Headings with no body and no score are dropped
        if state.current is not None and state.current.has_content():
            state.root.append(state.current.close())
        state.current = None

    def _flush_content(self, state: _SectionizerState) -> None:
        content = "\n".join(state.content).strip()
        state.content = []
        if not content:
            return

        extracted = extract_list_items(content)
        if extracted is not None:
            self._emit_paragraphs(state, extracted.prefix)
            state.emit(ListBlock(items=extracted.items, ordered=extracted.ordered))
            return

        self._emit_paragraphs(state, content)

    def _emit_paragraphs(self, state: _SectionizerState, text: str) -> None:
        for paragraph in _BLANK_LINE_SPLIT_RE.split(text):
            if paragraph.strip():
                state.emit(Paragraph(content=paragraph.strip()))

    def _flush_code(self, state: _SectionizerState) -> None:
        if state.code:
            state.emit(
                Code(content="\n".join(state.code), language=state.code_language or None)
            )
        state.code = []
        state.code_language = ""

    def _finish(self, state: _SectionizerState) -> None:
        self._flush_content(state)
        if state.in_code:
            logger.debug("Unterminated code block at end of input")
            self._flush_code(state)
            state.in_code = False
        self._close_section(state)

    def _promote_hero(self, sections: list[ParsedSection]) -> list[ParsedSection]:
        """Turn a leading scored "Overall ..." section into a hero block."""
        if not sections:
            return sections

        first = sections[0]
        if not isinstance(first, Section) or first.score is None:
            return sections
        if not is_hero_title(first.title, self._hero_title_words):
            return sections

        hero = Hero(title=first.title, score=first.score)
        return [hero, *first.children, *sections[1:]]


def parse_markdown_sections(text: str) -> list[ParsedSection]:
    return MarkdownSectionizer().parse(text)
