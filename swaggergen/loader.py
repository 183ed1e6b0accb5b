"""Load the Swagger schema and validate its descriptors.

Reads the JSON file, applies the text-level normalization, and extracts
paths, definitions and typed parameter descriptors.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import SchemaParseError, SchemaReadError
from .model import PARAMETER_LOCATIONS, ParameterDescriptor
from .normalizer import normalize_base_path, remove_empty_objects

# Keys of a parameter object that are not part of its type description
_ENVELOPE_KEYS = {"name", "in", "required", "description", "schema"}


def load_schema(path: str | Path) -> dict[str, Any]:
    """Read, normalize and parse the schema file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaReadError(str(path), str(e)) from e

    try:
        schema = json.loads(remove_empty_objects(text))
    except json.JSONDecodeError as e:
        raise SchemaParseError(str(path), str(e)) from e

    if not isinstance(schema, dict):
        raise SchemaParseError(str(path), "top-level JSON value is not an object")

    schema["basePath"] = normalize_base_path(schema.get("basePath"))
    return schema


def get_paths(schema: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the schema."""
    return schema.get("paths") or {}


def get_definitions(schema: dict[str, Any]) -> dict[str, Any]:
    """Extract model definitions from the schema."""
    return schema.get("definitions") or {}


def resolve_ref(schema: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a local $ref pointer in the schema."""
    parts = ref.lstrip("#/").split("/")
    node = schema
    for part in parts:
        node = node[part]
    return node


def build_parameters(
    schema: dict[str, Any],
    raw_params: list[dict[str, Any]] | None,
) -> tuple[ParameterDescriptor, ...] | None:
    """Validate raw parameter objects into ParameterDescriptors.

    Returns None when the operation declares no parameter list at all.
    """
    if raw_params is None:
        return None

    params = []
    for raw in raw_params:
        if "$ref" in raw:
            try:
                raw = resolve_ref(schema, raw["$ref"])
            except (KeyError, TypeError) as e:
                raise SchemaParseError("", f"unresolvable parameter reference {raw['$ref']}") from e

        name = raw.get("name")
        location = raw.get("in")
        if not isinstance(name, str) or not name:
            raise SchemaParseError("", f"parameter without a name: {raw!r}")
        if location not in PARAMETER_LOCATIONS:
            raise SchemaParseError("", f"parameter {name!r} has unknown location {location!r}")

        params.append(ParameterDescriptor(
            name=name,
            location=location,
            required=bool(raw.get("required", False)),
            description=raw.get("description", "") or "",
            type_info={k: v for k, v in raw.items() if k not in _ENVELOPE_KEYS},
            schema=raw.get("schema"),
        ))

    return tuple(params)
