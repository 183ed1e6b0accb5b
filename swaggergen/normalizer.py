"""Text-level repairs applied to the raw schema before it is parsed.

Some Swagger producers (springfox in particular) emit placeholder
definitions such as ``"Map«string,object»":{"type":"object","title":"..."}``
that carry no properties. They are removed here, on the raw text, because
the exact span is needed to delete them without breaking the JSON.
"""

from __future__ import annotations

import re

_EMPTY_OBJECT_RE = re.compile(
    r'"(?P<key>[«»\w]*?)":\{"type":"[«»\w]*?","title":"[«»\w]*?"\}',
    re.ASCII,
)

_GENERIC_OBJECT = '"type":"object"'


def remove_empty_objects(text: str) -> str:
    """Inline references to empty placeholder definitions and drop them.

    References are rewritten before any fragment is removed, otherwise a
    reference whose definition is already gone could not be matched.
    """
    matches = list(_EMPTY_OBJECT_RE.finditer(text))
    if not matches:
        return text

    fragments = [m.group(0) for m in matches]
    keys = [m.group("key") for m in matches]

    for key in keys:
        text = text.replace(f'"$ref":"#/definitions/{key}"', _GENERIC_OBJECT)

    for fragment in fragments:
        text = text.replace(f",{fragment}", "")
        text = text.replace(f"{fragment},", "")
        text = text.replace(fragment, "")

    return text


def normalize_base_path(base_path: object) -> str:
    """Strip trailing slashes; anything but a string becomes ''."""
    if isinstance(base_path, str):
        return base_path.rstrip("/")
    return ""
