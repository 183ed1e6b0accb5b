"""Determine the response type of an operation."""

from __future__ import annotations

from typing import Any

from .model import ResponseType
from .naming import upper_first
from .schema_parser import enum_declaration, resolve_type


def _success_schema(responses: dict[str, Any]) -> dict[str, Any] | None:
    """Schema of the first documented 2xx response; 200 and 201 win."""
    candidates = ["200", "201"] + sorted(
        code for code in responses if str(code).startswith("2") and code not in ("200", "201")
    )
    for code in candidates:
        response = responses.get(code) or {}
        if "schema" in response:
            return response["schema"]
    return None


def process_responses(responses: dict[str, Any] | None, simple_name: str) -> ResponseType:
    """Response type for an operation, with an enum declaration for enum schemas."""
    schema = _success_schema(responses or {})
    if schema is None:
        return ResponseType(type="void")

    if "enum" in schema and "$ref" not in schema:
        name = upper_first(f"{simple_name}Response")
        return ResponseType(type=name, enum_declaration=enum_declaration(name, schema["enum"]))

    return ResponseType(type=resolve_type(schema))
