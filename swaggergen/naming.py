"""Names for generated TypeScript symbols.

Identifier checks used when parameter names become object keys, plus the
controller and method names derived from tags, operation ids and paths:

  GET    /pets              tags=[pet]          -> PetService.getPets
  GET    /pets/{id}         operationId=getPet  -> PetService.getPet
  POST   /store/order       no tags             -> StoreService.postStoreOrder
  DELETE /user/{username}   tags=[user-admin]   -> UserAdminService.deleteUserUsername
"""

from __future__ import annotations

import re
from typing import Any

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")

_RESERVED_WORDS = {
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with",
}


def is_valid_property_name(name: str) -> bool:
    """True if `name` can be written as a bare TypeScript property name."""
    return bool(_IDENTIFIER_RE.match(name))


def is_valid_variable_name(name: str) -> bool:
    """True if `name` can be declared as a TypeScript function argument."""
    return is_valid_property_name(name) and name not in _RESERVED_WORDS


def property_key(name: str) -> str:
    """Key as written in an object literal or interface body."""
    return name if is_valid_property_name(name) else f"'{name}'"


def property_access(obj: str, name: str) -> str:
    """Member access expression on `obj`."""
    return f"{obj}.{name}" if is_valid_property_name(name) else f"{obj}['{name}']"


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _words(text: str) -> list[str]:
    """Split on non-alphanumerics and camelCase boundaries."""
    text = re.sub(r"([a-z\d])([A-Z])", r"\1 \2", text)
    return [w for w in re.split(r"[^A-Za-z0-9]+", text) if w]


def camel_case(text: str) -> str:
    """Convert any delimited or PascalCase string to camelCase."""
    words = _words(text)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(upper_first(w.lower()) for w in rest)


def pascal_case(text: str) -> str:
    return upper_first(camel_case(text))


def type_name(definition: str) -> str:
    """TypeScript type name for a schema definition key.

    Springfox generics like ``Page«Pet»`` flatten to ``PagePet``.
    """
    name = re.sub(r"[^\w]", "", definition.replace("«", "").replace("»", ""))
    if name and name[0].isdigit():
        name = f"_{name}"
    return upper_first(name)


def _path_segments(url: str) -> list[str]:
    return [s for s in url.split("/") if s]


def controller_name(tags: list[str] | None, url: str) -> str:
    """Controller (service class) base name: first tag, else first path segment."""
    if tags:
        name = pascal_case(tags[0])
        if name:
            return name
    for segment in _path_segments(url):
        if not segment.startswith("{"):
            name = pascal_case(segment)
            if name:
                return name
    return "Api"


def method_simple_name(operation: dict[str, Any], verb: str, url: str) -> str:
    """Method name: camelCased operationId, else verb plus path segments."""
    operation_id = operation.get("operationId")
    if operation_id:
        name = camel_case(operation_id)
        if name:
            return _safe_method_name(name)

    segments = [s.strip("{}") for s in _path_segments(url)]
    return _safe_method_name(camel_case(" ".join([verb, *segments])))


def _safe_method_name(name: str) -> str:
    if name[:1].isdigit():
        return f"_{name}"
    return name


def deduplicate_simple_names(names: list[str]) -> list[str]:
    """Make method names unique within one controller by numbering repeats."""
    counters: dict[str, int] = {}
    taken: set[str] = set()
    result = []
    for name in names:
        candidate = name
        if candidate in taken:
            n = counters.get(name, 1)
            while candidate in taken:
                n += 1
                candidate = f"{name}{n}"
            counters[name] = n
        taken.add(candidate)
        result.append(candidate)
    return result
