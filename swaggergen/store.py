"""NgRx action scaffolding for compiled operations."""

from __future__ import annotations

import os
from typing import Sequence

from . import conf
from .codegen import render, write_file
from .conf import GeneratorConfig
from .model import MethodCode
from .naming import upper_first
from .schema_parser import uses_global_type


def process_store(
    controller: str,
    methods: Sequence[MethodCode],
    config: GeneratorConfig,
) -> list[str]:
    """Write ``store/<controller>/<method>.actions.ts`` files. Returns their paths."""
    store_dir = os.path.join(config.dest, conf.STORE_DIR, controller)
    written = []

    for method in methods:
        params_type = upper_first(f"{method.simple_name}Params")
        if f"export interface {params_type} " not in method.interface_def:
            params_type = ""
        controller_imports = [params_type] if params_type else []
        if method.response_def.enum_declaration:
            controller_imports.append(method.response_def.type)

        content = render(
            "store_actions.ts.j2",
            controller=controller,
            simple_name=method.simple_name,
            params_type=params_type,
            response_type=method.response_def.type,
            action_type=f"{upper_first(method.simple_name)}Action",
            controller_imports=controller_imports,
            uses_global_type=uses_global_type(method.response_def.type),
            controller_import=f"../../{conf.API_DIR}/{controller}",
            model_import=f"../../{conf.MODEL_FILE}",
            utils_import=f"../../{conf.COMMON_DIR}/utils",
        )
        path = write_file(
            os.path.join(store_dir, f"{method.simple_name}.actions.ts"), content, config.header,
        )
        written.append(str(path))

    return written
