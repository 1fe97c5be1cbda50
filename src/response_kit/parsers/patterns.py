# src/response_kit/parsers/patterns.py

"""Score, hero-title and list-item extractors.

Pure functions over strings. No state, no logging.
"""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from response_kit.config import DEFAULT_HERO_TITLE_WORDS

from .models import Score

# Digit runs are bounded; longer numbers are not scores.
SCORE_VALUE_PATTERN = r"(?<![\d.])\d{1,9}(?:\.\d{1,9})?"
SCORE_MAX_PATTERN = r"\d{1,9}(?!\d)"

_SCORE_RE = re.compile(
    rf"(?P<label>\bscore\s*:\s*)?(?P<value>{SCORE_VALUE_PATTERN})\s*/\s*"
    rf"(?P<max>{SCORE_MAX_PATTERN})",
    re.IGNORECASE,
)
_STANDALONE_SCORE_RE = re.compile(
    rf"^(?:score\s*:?\s*)?(?P<value>{SCORE_VALUE_PATTERN})\s*/\s*"
    rf"(?P<max>{SCORE_MAX_PATTERN})$",
    re.IGNORECASE,
)

_BULLET_RE = re.compile(r"^\s*[-*•]\s+(.+)$")
_ORDINAL_RE = re.compile(r"^\s*\d+[.)]\s+(.+)$")
_CONTINUATION_RE = re.compile(r"^\s+\S")

_EMPTY_BRACKETS_RE = re.compile(r"\(\s*\)|\[\s*\]")
_RUNS_OF_SPACE_RE = re.compile(r"\s{2,}")
_TITLE_EDGE_CHARS = " \t:|-–—"


@dataclass(frozen=True)
class HeroScore:
    score: Score
    label: str


@dataclass(frozen=True)
class ExtractedList:
    items: list[str]
    ordered: bool
    prefix: str = ""  # Text before the first item marker


def _score_from_match(match: re.Match[str] | None) -> Score | None:
    if match is None:
        return None
    value = float(match.group("value"))
    max_value = int(match.group("max"))
    if max_value <= 0 or not math.isfinite(value):
        return None
    return Score(value=value, max=max_value)


def extract_score(text: str) -> Score | None:
    """First `value/max` in the text, e.g. "8/10" or "Score: 85/100".

    Only the first match is considered; a zero max means no score.
    """
    return _score_from_match(_SCORE_RE.search(text))


def extract_standalone_score(line: str) -> Score | None:
    """Score that fills the whole line: "8/10", "Score: 8/10", "score 8/10"."""
    return _score_from_match(_STANDALONE_SCORE_RE.match(line.strip()))


def split_title_score(title: str) -> tuple[str, Score | None]:
    """Split a heading into (display title, score).

    The score expression (and a "Score:" label directly before it) is removed
    from the title together with separators left dangling at either end.
    """
    match = _SCORE_RE.search(title)
    score = _score_from_match(match)
    if match is None or score is None:
        return title.strip(), None

    label = title[: match.start()] + title[match.end() :]
    label = _EMPTY_BRACKETS_RE.sub("", label)
    label = _RUNS_OF_SPACE_RE.sub(" ", label)
    return label.strip(_TITLE_EDGE_CHARS), score


def extract_hero_score(title: str) -> HeroScore | None:
    label, score = split_title_score(title)
    if score is None:
        return None
    return HeroScore(score=score, label=label)


def is_hero_title(title: str, words: Iterable[str] = DEFAULT_HERO_TITLE_WORDS) -> bool:
    normalized = title.lower().replace("_", "").replace("-", "")
    return any(word in normalized for word in words)


def extract_list_items(content: str) -> ExtractedList | None:
    """Decompose a block of text into list items.

    Lines before the first item marker are returned as `prefix`. Once items
    have started, every non-blank line must be an item marker or an indented
    continuation of the previous item; otherwise returns None.
    """
    items: list[str] = []
    prefix: list[str] = []
    current: str | None = None
    ordered: bool | None = None

    for line in content.split("\n"):
        bullet = _BULLET_RE.match(line)
        ordinal = None if bullet else _ORDINAL_RE.match(line)
        marker = bullet or ordinal

        if ordered is None and not marker:
            prefix.append(line)
        elif marker:
            if ordered is None:
                ordered = ordinal is not None
            if current is not None:
                items.append(current.strip())
            current = marker.group(1)
        elif not line.strip():
            if current is not None:
                items.append(current.strip())
            current = None
        elif _CONTINUATION_RE.match(line) and (current is not None or items):
            # Indented text after a blank line belongs to the last item
            if current is None:
                current = items.pop()
            current += " " + line.strip()
        else:
            return None

    if current is not None:
        items.append(current.strip())

    if not items:
        return None
    return ExtractedList(
        items=items, ordered=bool(ordered), prefix="\n".join(prefix).strip()
    )
