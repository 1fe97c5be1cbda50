# src/response_kit/rendering/sanitize.py

from typing import Protocol

import bleach
from bleach.css_sanitizer import CSSSanitizer

ALLOWED_TAGS = frozenset(
    {
        "a",
        "code",
        "div",
        "em",
        "h3",
        "i",
        "li",
        "ol",
        "p",
        "pre",
        "span",
        "strong",
        "ul",
    }
)
ALLOWED_ATTRIBUTES = {
    "*": ["class", "style"],
    "a": ["href", "target", "rel", "class"],
}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# Only the properties the renderers emit
_CSS_SANITIZER = CSSSanitizer(allowed_css_properties=["width", "--score-color"])


class Sanitizer(Protocol):
    def sanitize(self, markup: str) -> str: ...


class BleachSanitizer:
    """Allow-list sanitizer for rendered fragments.

    A new bleach cleaner is built per call; bleach cleaners are not safe to
    share between threads.
    """

    def sanitize(self, markup: str) -> str:
        if not markup:
            return ""
        return bleach.clean(
            markup,
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
            css_sanitizer=_CSS_SANITIZER,
        )


class PassthroughSanitizer:
    """For callers that sanitize before inserting the fragment."""

    def sanitize(self, markup: str) -> str:
        return markup
