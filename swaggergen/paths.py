"""Compile the ``paths`` section into one service class per controller.

Assigns each operation to a controller (first tag, else first path
segment), names its method, compiles it, and writes the aggregated
controller file with the imports its methods need.
"""

from __future__ import annotations

import os
from typing import Any

from . import conf
from .codegen import render, write_file
from .conf import GeneratorConfig
from .loader import build_parameters
from .method import MethodCompiler
from .model import MethodCode, MethodDescriptor
from .naming import controller_name, deduplicate_simple_names, method_simple_name
from .responses import process_responses
from .schema_parser import uses_global_type
from .store import process_store


def _merge_parameters(
    path_params: list[dict[str, Any]] | None,
    op_params: list[dict[str, Any]] | None,
) -> list[dict[str, Any]] | None:
    """Path-level parameters apply to every verb unless the operation redefines them."""
    if path_params is None and op_params is None:
        return None
    merged: dict[tuple[str, str], dict[str, Any]] = {}
    for raw in (path_params or []) + (op_params or []):
        key = (raw.get("$ref") or raw.get("name", ""), raw.get("in", ""))
        merged[key] = raw
    return list(merged.values())


def _collect_operations(
    paths: dict[str, Any],
    config: GeneratorConfig,
) -> dict[str, list[dict[str, Any]]]:
    """Group raw operations by controller, in document order."""
    controllers: dict[str, list[dict[str, Any]]] = {}
    for url, path_item in paths.items():
        for verb, operation in path_item.items():
            if verb not in config.allowed_params:
                continue
            name = controller_name(operation.get("tags"), url)
            controllers.setdefault(name, []).append({
                "url": url,
                "verb": verb,
                "operation": operation,
                "parameters": _merge_parameters(path_item.get("parameters"), operation.get("parameters")),
            })
    return controllers


def _swagger_link(swagger_url: str, operation: dict[str, Any]) -> str:
    """Link to the operation in Swagger UI, when it is addressable."""
    tags = operation.get("tags")
    operation_id = operation.get("operationId")
    if not swagger_url or not tags or not operation_id:
        return ""
    return f"{swagger_url}{tags[0]}/{operation_id}"


def build_descriptors(
    operations: list[dict[str, Any]],
    swagger_url: str,
    base_path: str,
    schema: dict[str, Any] | None = None,
) -> list[MethodDescriptor]:
    """MethodDescriptors for one controller's operations, with unique names."""
    names = deduplicate_simple_names([
        method_simple_name(op["operation"], op["verb"], op["url"]) for op in operations
    ])
    descriptors = []
    for op, simple_name in zip(operations, names):
        operation = op["operation"]
        descriptors.append(MethodDescriptor(
            url=op["url"],
            simple_name=simple_name,
            method_name=op["verb"],
            base_path=base_path,
            response_def=process_responses(operation.get("responses"), simple_name),
            summary=operation.get("summary", "") or "",
            description=operation.get("description", "") or "",
            swagger_url=_swagger_link(swagger_url, operation),
            param_def=build_parameters(schema or {}, op["parameters"]),
        ))
    return descriptors


def process_controller(
    name: str,
    methods: list[MethodCode],
    config: GeneratorConfig,
) -> str:
    """Render and write ``controllers/<name>.ts``. Returns the file path."""
    http_imports = ["HttpClient"]
    if any("header" in m.param_groups for m in methods):
        http_imports.append("HttpHeaders")
    if any("query" in m.param_groups for m in methods):
        http_imports.append("HttpParams")

    global_type = any(
        m.uses_global_type or uses_global_type(m.response_def.type) for m in methods
    )

    content = render(
        "controller.ts.j2",
        class_name=f"{name}Service",
        http_imports=http_imports,
        uses_global_type=global_type,
        model_import=f"../{conf.MODEL_FILE}",
        interfaces=[m.interface_def for m in methods if m.interface_def],
        methods="".join(m.method_def for m in methods).rstrip("\n"),
    )
    path = os.path.join(config.dest, conf.API_DIR, f"{name}.ts")
    return str(write_file(path, content, config.header))


def process_paths(
    paths: dict[str, Any] | None,
    swagger_url: str,
    config: GeneratorConfig,
    base_path: str = "",
    schema: dict[str, Any] | None = None,
) -> list[str]:
    """Compile and write every controller. Returns the controller names."""
    compiler = MethodCompiler(config.allowed_params, config.unwrap_single_param_methods)
    controllers = _collect_operations(paths or {}, config)

    for name, operations in controllers.items():
        descriptors = build_descriptors(operations, swagger_url, base_path, schema)
        methods = [compiler.compile(d) for d in descriptors]
        process_controller(name, methods, config)
        if config.generate_store:
            process_store(name, methods, config)

    return list(controllers)
