from .inference import infer_schema, infer_type
from .models import JsonSchema, StructuredOutputSchema

__all__ = [
    "JsonSchema",
    "StructuredOutputSchema",
    "infer_schema",
    "infer_type",
]
