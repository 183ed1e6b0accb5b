"""Translate Swagger schema fragments into TypeScript type strings.

Handles:
- $ref to definitions (emitted as __model.<Type>)
- primitive types and formats
- arrays, nested arrays
- additionalProperties maps
- inline enums (string literal unions)
- allOf composition (intersection types)
"""

from __future__ import annotations

import json
import re
from typing import Any

from .naming import is_valid_property_name, type_name

# Namespace the controllers and definitions import the model barrel under
MODEL_NAMESPACE = "__model"

_PRIMITIVES: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "file": "File",
}

_SCALAR_RE = re.compile(r"^(string|number|boolean|any|File)$")
_LITERAL_UNION_RE = re.compile(r"^(('[^']*'|-?\d+(\.\d+)?|true|false)( \| )?)+$")


def ref_type(ref: str) -> str:
    """Model type referenced by a ``#/definitions/...`` pointer."""
    return f"{MODEL_NAMESPACE}.{type_name(ref.rsplit('/', 1)[-1])}"


def literal(value: Any) -> str:
    """TypeScript literal for an enum value."""
    if isinstance(value, str):
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"
    return json.dumps(value)


def resolve_type(schema: dict[str, Any] | None) -> str:
    """Resolve a Swagger schema to a TypeScript type string."""
    if not schema:
        return "any"

    if "$ref" in schema:
        return ref_type(schema["$ref"])

    if "allOf" in schema:
        parts = [resolve_type(sub) for sub in schema["allOf"]]
        parts = [p for p in parts if p != "any"]
        return " & ".join(parts) if parts else "any"

    if "enum" in schema:
        return " | ".join(literal(v) for v in schema["enum"]) or "any"

    schema_type = schema.get("type")
    if schema_type in _PRIMITIVES:
        return _PRIMITIVES[schema_type]

    if schema_type == "array":
        item_type = resolve_type(schema.get("items"))
        if " " in item_type:
            item_type = f"({item_type})"
        return f"{item_type}[]"

    if schema_type == "object" or "properties" in schema:
        additional = schema.get("additionalProperties")
        if isinstance(additional, dict):
            return f"{{[key: string]: {resolve_type(additional)}}}"
        if "properties" in schema:
            return inline_object(schema)
        return "object"

    return "any"


def inline_object(schema: dict[str, Any]) -> str:
    """Single-line object type for an anonymous schema with properties."""
    required = set(schema.get("required", []))
    members = []
    for name, prop in schema.get("properties", {}).items():
        key = name if is_valid_property_name(name) else f"'{name}'"
        optional = "" if name in required else "?"
        members.append(f"{key}{optional}: {resolve_type(prop)}")
    return "{" + "; ".join(members) + "}"


def is_scalar(type_str: str) -> bool:
    """True for primitives and literal unions, the types an argument list can carry."""
    return bool(_SCALAR_RE.match(type_str) or _LITERAL_UNION_RE.match(type_str))


def uses_global_type(type_str: str) -> bool:
    """True if the type references the shared model namespace."""
    return f"{MODEL_NAMESPACE}." in type_str


def enum_member(value: Any) -> str:
    """Enum member name for a value; quoted when not an identifier."""
    text = str(value)
    if is_valid_property_name(text):
        return text
    return literal(text)


def enum_declaration(name: str, values: list[Any]) -> str:
    """``export enum`` declaration for string values, a literal union otherwise."""
    if all(isinstance(v, str) for v in values):
        members = [f"  {enum_member(v)} = {literal(v)}," for v in values]
        return f"export enum {name} {{\n" + "\n".join(members) + "\n}"
    return f"export type {name} = {' | '.join(literal(v) for v in values)};"
