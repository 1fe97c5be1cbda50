# src/response_kit/parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedSection


class SectionParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> list[ParsedSection]:
        """
        Parse raw response text into a tree of typed sections.

        Requirements:
        - Deterministic output for same input
        - Never raises on malformed input
        - No state carried between calls
        """
        raise NotImplementedError
