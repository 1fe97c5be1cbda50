# src/response_kit/parsers/json_extractor.py

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_FENCED_JSON_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _strict_loads(text: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False, None


def parse_structured_response(text: str) -> Any | None:
    """Parse a model response as JSON.

    Tries the whole text first, then the first fenced code block.
    No lenient repair: each step either parses strictly or fails.

    Returns:
        The parsed value, or None when neither step yields JSON.
    """
    ok, value = _strict_loads(text)
    if ok:
        return value

    match = _FENCED_JSON_RE.search(text)
    if match is None:
        logger.debug("No JSON and no fenced block found")
        return None

    ok, value = _strict_loads(match.group(1).strip())
    if not ok:
        logger.debug("Fenced block is not valid JSON")
        return None
    return value
