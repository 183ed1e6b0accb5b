"""Compile schema definitions into TypeScript interfaces.

One file per definition under ``defs/``, plus the ``model.ts`` barrel
that controllers import as ``__model``.
"""

from __future__ import annotations

import os
from typing import Any

from . import conf
from .codegen import render, write_file
from .conf import GeneratorConfig
from .naming import property_key, type_name
from .schema_parser import enum_declaration, ref_type, resolve_type, uses_global_type
from .utils import indent, make_comment


def _members(schema: dict[str, Any]) -> list[str]:
    """Interface member lines for an object schema."""
    required = set(schema.get("required", []))
    members = []
    for name, prop in (schema.get("properties") or {}).items():
        optional = "" if name in required else "?"
        comment = make_comment([prop.get("description", "")]) if isinstance(prop, dict) else ""
        members.append(f"{comment}{property_key(name)}{optional}: {resolve_type(prop)};")
    return members


def _interface(name: str, schema: dict[str, Any]) -> str:
    """``export interface`` body; allOf refs become ``extends`` clauses."""
    parents: list[str] = []
    members = _members(schema)
    for sub in schema.get("allOf", []):
        if "$ref" in sub:
            parents.append(ref_type(sub["$ref"]))
        else:
            members.extend(_members(sub))

    extends = f" extends {', '.join(parents)}" if parents else ""
    if not members:
        return f"export interface {name}{extends} {{}}"
    return f"export interface {name}{extends} {{\n{indent(members)}\n}}"


def process_definition(name: str, schema: dict[str, Any]) -> str:
    """TypeScript declaration for one definition."""
    if "enum" in schema:
        declaration = enum_declaration(name, schema["enum"])
    elif isinstance(schema.get("additionalProperties"), dict) and "properties" not in schema:
        declaration = f"export type {name} = {resolve_type(schema)};"
    elif schema.get("type", "object") == "object" or "properties" in schema or "allOf" in schema:
        declaration = _interface(name, schema)
    else:
        declaration = f"export type {name} = {resolve_type(schema)};"

    comment = make_comment([schema.get("description", "")])
    return comment + declaration


def process_definitions(
    definitions: dict[str, Any] | None,
    config: GeneratorConfig,
) -> list[str]:
    """Write every definition and the model barrel. Returns the type names written."""
    names: list[str] = []
    defs_dir = os.path.join(config.dest, conf.DEFS_DIR)

    for key, schema in (definitions or {}).items():
        name = type_name(key)
        if not name or name in names:
            continue
        declaration = process_definition(name, schema or {})
        content = render(
            "definition.ts.j2",
            declaration=declaration,
            uses_global_type=uses_global_type(declaration),
            model_import=f"../{conf.MODEL_FILE}",
        )
        write_file(os.path.join(defs_dir, f"{name}.ts"), content, config.header)
        names.append(name)

    barrel = render("model.ts.j2", defs_dir=conf.DEFS_DIR, names=sorted(names))
    write_file(os.path.join(config.dest, f"{conf.MODEL_FILE}.ts"), barrel, config.header)
    return names
