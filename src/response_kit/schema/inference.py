# src/response_kit/schema/inference.py

"""Derive a minimal structural schema from parsed JSON.

Lets the renderer treat inferred and declared schemas the same way.
"""

from typing import Any

from .models import JsonSchema

# Deep enough that the renderer's depth ceiling is always hit first
_INFERENCE_DEPTH_LIMIT = 64


def infer_type(value: Any) -> str:
    """JSON type name of a parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def infer_schema(value: Any, _depth: int = 0) -> JsonSchema:
    """Infer a schema from a value.

    Arrays are sampled by their first element only; heterogeneous arrays are
    treated as homogeneous.
    """
    value_type = infer_type(value)
    if _depth >= _INFERENCE_DEPTH_LIMIT:
        return JsonSchema(type=value_type)

    if value_type == "array":
        items = (
            infer_schema(value[0], _depth + 1) if value else JsonSchema(type="string")
        )
        return JsonSchema(type="array", items=items)

    if value_type == "object":
        properties = {key: infer_schema(v, _depth + 1) for key, v in value.items()}
        return JsonSchema(type="object", properties=properties)

    return JsonSchema(type=value_type)
