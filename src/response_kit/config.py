# src/response_kit/config.py

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# Exact (normalized) JSON keys that hold the headline score, in priority order.
DEFAULT_HERO_KEYS: tuple[str, ...] = (
    "overallscore",
    "totalscore",
    "overall",
    "total",
    "score",
    "rating",
)

# Substrings that mark a markdown heading as the overall verdict.
DEFAULT_HERO_TITLE_WORDS: tuple[str, ...] = (
    "overall",
    "total",
    "final",
    "summary",
    "verdict",
    "rating",
    "soulcheck",
)

DEFAULT_SCORE_WORDS: tuple[str, ...] = (
    "score",
    "rating",
    "rank",
    "grade",
    "level",
    "confidence",
    "quality",
)


class Heuristics(BaseModel):
    """Tuned thresholds and word lists for layout decisions.

    Empirically tuned against model output; load overrides from YAML with
    `load_heuristics` instead of editing code.
    """

    max_depth: int = 8
    hero_keys: tuple[str, ...] = DEFAULT_HERO_KEYS
    hero_title_words: tuple[str, ...] = DEFAULT_HERO_TITLE_WORDS
    score_words: tuple[str, ...] = DEFAULT_SCORE_WORDS
    card_title_max_length: int = 100
    card_body_min_length: int = 50
    card_score_max: float = 100
    block_text_min_length: int = 100
    link_label_max_length: int = 50
    score_scale_threshold: float = 10

    model_config = ConfigDict(extra="forbid", frozen=True)


@dataclass(frozen=True)
class FormatterConfig:
    """Configuration for ResponseFormatter.

    Immutable. Explicit. No magic defaults from environment.
    """

    highlighter: Literal["pygments", "plain"] = "pygments"
    sanitize: bool = True  # Set False only when the caller sanitizes downstream
    heuristics: Heuristics = field(default_factory=Heuristics)


def load_heuristics(path: str | Path) -> Heuristics:
    """Load heuristics overrides from a YAML file.

    Keys that are not present keep their defaults. Unknown keys are rejected.
    """
    file_path = Path(path)
    logger.info("Loading formatter heuristics from %s", file_path)
    with open(file_path) as f:
        data = yaml.safe_load(f) or {}
    return Heuristics(**data)
