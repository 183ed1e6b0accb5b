"""Typed descriptors passed between the loader and the compilers.

Everything here is immutable once built; the loader validates raw schema
dicts into these shapes so the compilers can trust their input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Location = Literal["path", "query", "header", "body", "formData"]

PARAMETER_LOCATIONS: tuple[str, ...] = ("path", "query", "header", "body", "formData")


@dataclass(frozen=True)
class ParameterDescriptor:
    """One operation parameter and where it travels in the request."""

    name: str
    location: Location
    required: bool = False
    description: str = ""
    # Raw type information (type/format/items/enum/...) minus the envelope keys
    type_info: dict[str, Any] = field(default_factory=dict)
    # Model reference carried by `body` parameters, e.g. {"$ref": "#/definitions/Pet"}
    schema: dict[str, Any] | None = None


@dataclass(frozen=True)
class ResponseType:
    """Emitted response type and, for enum responses, its declaration."""

    type: str
    enum_declaration: str = ""


@dataclass(frozen=True)
class MethodDescriptor:
    """One HTTP verb on one URL path, ready for the method compiler."""

    url: str
    simple_name: str
    method_name: str
    base_path: str
    response_def: ResponseType
    summary: str = ""
    description: str = ""
    swagger_url: str = ""
    param_def: tuple[ParameterDescriptor, ...] | None = None


@dataclass(frozen=True)
class ProcessedParams:
    """Parameter compiler output consumed by the method compiler."""

    param_def: str
    types_only: tuple[str, ...]
    is_interface_empty: bool
    uses_global_type: bool


@dataclass(frozen=True)
class MethodCode:
    """Compiled method fragments handed to the controller aggregation."""

    method_def: str
    interface_def: str
    uses_global_type: bool
    param_groups: dict[str, list[ParameterDescriptor]]
    response_def: ResponseType
    simple_name: str
    method_name: str
