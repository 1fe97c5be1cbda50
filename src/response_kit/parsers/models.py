# src/response_kit/parsers/models.py

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(frozen=True)
class Score:
    """A `value/max` rating.

    `value` is not clamped to `max`; malformed ratings render as written.
    """

    value: float
    max: int

    def __post_init__(self) -> None:
        if self.max <= 0:
            raise ValueError("max must be > 0")

    @property
    def normalized(self) -> float:
        """Value on the 0-10 scale used for color tiers."""
        if self.max == 100:
            return self.value / 10
        return self.value


@dataclass(frozen=True)
class Hero:
    title: str
    score: Score


@dataclass(frozen=True)
class Section:
    title: str
    score: Score | None = None
    children: list["ParsedSection"] = field(default_factory=list)


@dataclass(frozen=True)
class Paragraph:
    content: str


@dataclass(frozen=True)
class ListBlock:
    items: list[str]
    ordered: bool = False


@dataclass(frozen=True)
class Code:
    content: str
    language: str | None = None


ParsedSection: TypeAlias = Hero | Section | Paragraph | ListBlock | Code
