"""Synthesize the parameter interface of one operation."""

from __future__ import annotations

from typing import Sequence

from .model import ParameterDescriptor, ProcessedParams
from .naming import is_valid_variable_name, property_key
from .schema_parser import is_scalar, resolve_type, uses_global_type
from .utils import indent, make_comment


def param_type(param: ParameterDescriptor) -> str:
    """TypeScript type of a parameter; body parameters type by their schema."""
    if param.schema is not None:
        return resolve_type(param.schema)
    return resolve_type(param.type_info)


def process_params(
    param_def: Sequence[ParameterDescriptor],
    params_type: str,
) -> ProcessedParams:
    """Build the ``<Name>Params`` interface for the given parameters."""
    members: list[str] = []
    types_only: list[str] = []
    global_type = False

    for param in param_def:
        ts_type = param_type(param)
        optional = "" if param.required else "?"
        global_type = global_type or uses_global_type(ts_type)

        comment = make_comment([param.description]) if param.description else ""
        members.append(f"{comment}{property_key(param.name)}{optional}: {ts_type};")

        # Only scalars with plain names can become positional arguments
        if is_scalar(ts_type) and is_valid_variable_name(param.name):
            types_only.append(f"{param.name}{optional}: {ts_type}")

    if not members:
        return ProcessedParams(
            param_def="",
            types_only=(),
            is_interface_empty=True,
            uses_global_type=False,
        )

    body = indent("\n".join(members))
    return ProcessedParams(
        param_def=f"export interface {params_type} {{\n{body}\n}}",
        types_only=tuple(types_only),
        is_interface_empty=False,
        uses_global_type=global_type,
    )
