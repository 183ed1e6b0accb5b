"""Generate the Angular API layer from a Swagger JSON schema."""

from __future__ import annotations

import os

from . import conf
from .codegen import render, write_file
from .conf import GeneratorConfig
from .definitions import process_definitions
from .errors import SchemaParseError, SchemaReadError, SwaggerGenError
from .loader import get_definitions, get_paths, load_schema
from .paths import process_paths
from .utils import create_dir, empty_dir, out, process_header


def generate(
    src: str = conf.API_FILE,
    dest: str = conf.OUT_DIR,
    generate_store: bool = True,
    unwrap_single_param_methods: bool = False,
    swagger_url_path: str = conf.SWAGGER_URL_PATH,
    omit_version: bool = False,
) -> None:
    """Generate the API layer for `src` into `dest`.

    Problems reading or parsing the schema are reported on the terminal
    and end the run; nothing is raised to the caller.
    """
    try:
        schema = load_schema(src)
    except SchemaReadError as e:
        out(f"JSON scheme file '{src}' does not exist or cannot be read", "red")
        out(str(e))
        return
    except SchemaParseError as e:
        out(f"{src} is either not a valid JSON scheme or contains non-printable characters", "red")
        out(str(e))
        return

    recreate_directories(dest)

    config = GeneratorConfig(
        header=process_header(schema, omit_version),
        dest=dest,
        generate_store=generate_store,
        unwrap_single_param_methods=unwrap_single_param_methods,
    )

    try:
        generate_common(os.path.join(dest, conf.COMMON_DIR), config.header)
        definitions = process_definitions(get_definitions(schema), config)
        swagger_url = f"http://{schema.get('host', '')}{swagger_url_path}{conf.SWAGGER_FILE}"
        controllers = process_paths(
            get_paths(schema), swagger_url, config, schema["basePath"], schema,
        )
    except SwaggerGenError as e:
        out(f"Error while generating from {src}", "red")
        out(str(e))
        return

    out(
        f"Generated {len(definitions)} definitions and {len(controllers)} controllers in {dest}",
        "green",
    )


def recreate_directories(dest: str) -> None:
    """Empty and recreate the four output directories."""
    for sub in (conf.COMMON_DIR, conf.DEFS_DIR, conf.API_DIR, conf.STORE_DIR):
        empty_dir(os.path.join(dest, sub))
    for sub in (conf.COMMON_DIR, conf.DEFS_DIR, conf.API_DIR, conf.STORE_DIR):
        create_dir(os.path.join(dest, sub))


def generate_common(common_dir: str, header: str = "") -> None:
    """Write the shared TypeScript helpers."""
    write_file(os.path.join(common_dir, "utils.ts"), render("utils.ts.j2"), header)
