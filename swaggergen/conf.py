"""Generator configuration.

Default locations, output layout, and the per-verb request policy tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Defaults for generate() and the CLI
API_FILE = "conf/api/api-docs.json"
OUT_DIR = "src/api"
SWAGGER_URL_PATH = "/swagger"
SWAGGER_FILE = "/swagger-ui.html#!/"

# Output layout under the destination directory
COMMON_DIR = "common"
DEFS_DIR = "defs"
API_DIR = "controllers"
STORE_DIR = "store"
MODEL_FILE = "model"

INDENTATION = "  "

# Parameter locations each HTTP verb may carry; anything else is dropped
ALLOWED_PARAMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "get": ("path", "query", "header"),
    "head": ("path", "query", "header"),
    "delete": ("path", "query", "header"),
    "options": ("path", "query", "header"),
    "post": ("path", "query", "header", "body", "formData"),
    "put": ("path", "query", "header", "body", "formData"),
    "patch": ("path", "query", "header", "body", "formData"),
})

# Verbs whose client call takes a body argument, with the groups tried in order.
# A verb missing here sends no body.
BODY_SOURCES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "post": ("body", "formData"),
    "put": ("body", "formData"),
    "patch": ("body", "formData"),
})


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings shared by every compiler during one generator run."""

    header: str = ""
    dest: str = OUT_DIR
    generate_store: bool = True
    unwrap_single_param_methods: bool = False
    allowed_params: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: ALLOWED_PARAMS)
