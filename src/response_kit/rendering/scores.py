# src/response_kit/rendering/scores.py

"""Score badges and hero blocks shared by every renderer.

`score_tier` is the only place a score is mapped to a color.
"""

from enum import Enum

from response_kit.parsers.models import Score

from .escaping import escape_html


class ScoreTier(str, Enum):
    """Color bucket for a score on the 0-10 scale."""

    HIGH = "high"
    GOOD = "good"
    MID = "mid"
    LOW = "low"
    BAD = "bad"

    @property
    def color(self) -> str:
        return f"var(--cr-score-{self.value}, {_TIER_FALLBACK_COLORS[self]})"


_TIER_FALLBACK_COLORS = {
    ScoreTier.HIGH: "#10b981",
    ScoreTier.GOOD: "#22c55e",
    ScoreTier.MID: "#eab308",
    ScoreTier.LOW: "#f97316",
    ScoreTier.BAD: "#ef4444",
}


def score_tier(normalized: float) -> ScoreTier:
    if normalized >= 8:
        return ScoreTier.HIGH
    if normalized >= 6:
        return ScoreTier.GOOD
    if normalized >= 4:
        return ScoreTier.MID
    if normalized >= 2:
        return ScoreTier.LOW
    return ScoreTier.BAD


def bare_score(value: float, scale_threshold: float = 10) -> Score:
    """Score for a bare number: out of 100 above the threshold, else out of 10."""
    return Score(value=value, max=100 if value > scale_threshold else 10)


def format_score_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def _format_percent(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def render_score_span(score: Score, block: str, max_class: str) -> str:
    tier = score_tier(score.normalized)
    return (
        f'<span class="{block} {block}--{tier.value}" style="--score-color: {tier.color}">'
        f"{format_score_value(score.value)}"
        f'<span class="{max_class}">/{score.max}</span>'
        "</span>"
    )


def render_hero(title: str, score: Score) -> str:
    tier = score_tier(score.normalized)
    percent = _format_percent(score.value / score.max * 100)
    return (
        f'<div class="cr-hero cr-hero--{tier.value}">'
        f'<div class="cr-hero__label">{escape_html(title or "Score")}</div>'
        '<div class="cr-hero__score">'
        f'<span class="cr-hero__value" style="--score-color: {tier.color}">'
        f"{format_score_value(score.value)}</span>"
        f'<span class="cr-hero__max">/{score.max}</span>'
        "</div>"
        '<div class="cr-hero__bar">'
        f'<div class="cr-hero__fill" style="width: {percent}%; --score-color: {tier.color}"></div>'
        "</div>"
        "</div>"
    )
