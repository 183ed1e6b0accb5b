"""Text helpers, output directories and terminal diagnostics."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, Iterable

import click

from . import conf


def indent(text: str | Iterable[str], level: int = 1) -> str:
    """Indent every non-empty line; a list of blocks is joined by newlines first."""
    if not isinstance(text, str):
        text = "\n".join(text)
    prefix = conf.INDENTATION * level
    return "\n".join(prefix + line if line.strip() else line for line in text.split("\n"))


def make_comment(lines: Iterable[str]) -> str:
    """JSDoc block from non-empty lines; multi-line entries are split."""
    flat = []
    for line in lines:
        if not line:
            continue
        text = str(line).strip().replace("*/", "*\\/")
        flat.extend(part.rstrip() for part in text.splitlines())
    if not flat:
        return ""
    body = "".join(f" * {line}\n" if line else " *\n" for line in flat)
    return f"/**\n{body} */\n"


def process_header(schema: dict[str, Any], omit_version: bool = False) -> str:
    """Banner written at the top of every generated file."""
    header = "/* tslint:disable */\n"
    if omit_version:
        return header

    info = schema.get("info") or {}
    lines = [
        str(info.get("title", "")),
        str(info.get("version", "")),
        f"{schema.get('host', '')}{schema.get('basePath', '')}",
    ]
    return header + make_comment([line for line in lines if line])


def empty_dir(path: str | Path) -> None:
    """Remove a directory tree if it exists."""
    shutil.rmtree(path, ignore_errors=True)


def create_dir(path: str | Path) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def out(message: str, color: str | None = None) -> None:
    """Print a status line, optionally colored (red = fatal, green = done)."""
    click.secho(message, fg=color)
