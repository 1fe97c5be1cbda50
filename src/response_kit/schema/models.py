# src/response_kit/schema/models.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class JsonSchema(BaseModel):
    """The subset of JSON Schema the renderer reads.

    Validation happens upstream; unknown keywords are kept but ignored.
    """

    type: str | list[str] | None = None
    properties: dict[str, JsonSchema] | None = None
    items: JsonSchema | None = None
    format: str | None = None
    title: str | None = None
    description: str | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def primary_type(self) -> str | None:
        """The declared type, preferring the first non-null entry of a union."""
        if isinstance(self.type, list):
            non_null = [t for t in self.type if t != "null"]
            if non_null:
                return non_null[0]
            return self.type[0] if self.type else None
        return self.type


class StructuredOutputSchema(BaseModel):
    """Named schema as stored with a preset."""

    name: str
    strict: bool = False
    value: JsonSchema

    model_config = ConfigDict(extra="forbid")
