# src/response_kit/rendering/escaping.py

import html
from typing import Any


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    # NUL is reserved for the inline formatter's placeholders
    return text.replace("\x00", "")


def escape_html(value: Any) -> str:
    """Escape text for use as element content."""
    return html.escape(_as_text(value), quote=False)


def escape_attr(value: Any) -> str:
    """Escape text for use inside a double-quoted attribute."""
    return html.escape(_as_text(value), quote=True)
