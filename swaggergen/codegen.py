"""Render templates and write generated output.

Every compiler hands its context to a template in ``templates/`` and the
result is written below the destination directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from .utils import indent

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    env.filters["ts_indent"] = indent
    return env


_ENV = _environment()


def render(template_name: str, **context: Any) -> str:
    """Render one template with the given context."""
    return _ENV.get_template(template_name).render(**context)


def write_file(path: str | Path, content: str, header: str = "") -> Path:
    """Write a generated file, prefixed by the run's header banner."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(header + content, encoding="utf-8")
    return path
