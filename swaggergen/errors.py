"""Fatal conditions raised while loading a schema."""

from __future__ import annotations


class SwaggerGenError(Exception):
    """Base class for errors that abort a generator run."""


class SchemaReadError(SwaggerGenError):
    """The schema file is missing or unreadable."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        super().__init__(reason or f"cannot read {path}")


class SchemaParseError(SwaggerGenError):
    """The normalized schema text is not valid JSON or has a malformed descriptor."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        super().__init__(reason or f"cannot parse {path}")
