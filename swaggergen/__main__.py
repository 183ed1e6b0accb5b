"""Entry point: python -m swaggergen

Reads a Swagger JSON schema and generates the Angular API layer.
"""

from __future__ import annotations

import click

from . import conf
from .pipeline import generate


@click.command()
@click.option("-s", "--src", default=conf.API_FILE, show_default=True, help="Source Swagger JSON schema.")
@click.option("-d", "--dest", default=conf.OUT_DIR, show_default=True, help="Destination directory.")
@click.option("--no-store", is_flag=True, help="Do not generate NgRx store actions.")
@click.option(
    "-u", "--unwrap-single-param-methods", is_flag=True,
    help="Also emit positional-argument variants of single-parameter methods.",
)
@click.option(
    "-w", "--swagger-url-path", default=conf.SWAGGER_URL_PATH, show_default=True,
    help="Path where the Swagger UI is served, used for method doc links.",
)
@click.option("--omit-version", is_flag=True, help="Leave API version info out of file headers.")
def main(
    src: str,
    dest: str,
    no_store: bool,
    unwrap_single_param_methods: bool,
    swagger_url_path: str,
    omit_version: bool,
) -> None:
    """Generate an Angular API client from a Swagger schema."""
    generate(
        src=src,
        dest=dest,
        generate_store=not no_store,
        unwrap_single_param_methods=unwrap_single_param_methods,
        swagger_url_path=swagger_url_path,
        omit_version=omit_version,
    )


if __name__ == "__main__":
    main()
