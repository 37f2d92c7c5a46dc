"""Terminal decoding: one raw node → one target element."""

from __future__ import annotations

import re
from typing import Any

from .errors import TypeMismatch
from .model import JSONLDDecodable

_NUMBER_RE = re.compile(r"^\s*-?\d+(\.\d+)?\s*$")


def is_composite(target: Any) -> bool:
    """True when *target* decodes itself from a keyed object."""
    return isinstance(target, JSONLDDecodable) and not is_scalar_target(target)


def is_scalar_target(target: Any) -> bool:
    return target in (str, int, float)


def number_to_text(value: int | float) -> str:
    """Render a JSON number the way it reads in the document (6.0 → "6")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def scalar_to_text(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return number_to_text(raw)
    raise TypeMismatch("text", raw)


def decode_value(raw: Any, target: Any) -> Any:
    """Decode *raw* as *target*.

    - ``str``: strings as-is, numbers stringified
    - ``int`` / ``float``: numbers, or strings holding a plain number
    - composite: keyed objects, via ``target.from_jsonld``

    Raises TypeMismatch when the node cannot be read as *target*.
    """
    if target is str:
        return scalar_to_text(raw)
    if target is int or target is float:
        return _decode_number(raw, target)
    if is_composite(target):
        if not isinstance(raw, dict):
            raise TypeMismatch(getattr(target, "__name__", repr(target)), raw)
        return target.from_jsonld(raw)
    raise TypeError(f"unsupported target type {target!r}")


def _decode_number(raw: Any, target: type) -> int | float:
    if isinstance(raw, bool):
        raise TypeMismatch(target.__name__, raw)
    if isinstance(raw, str):
        match = _NUMBER_RE.match(raw)
        if not match:
            raise TypeMismatch(target.__name__, raw)
        if target is int and match.group(1) is None:
            return int(raw)
        raw = float(raw)
    if not isinstance(raw, (int, float)):
        raise TypeMismatch(target.__name__, raw)
    if target is int:
        if isinstance(raw, float) and not raw.is_integer():
            raise TypeMismatch("int", raw)
        return int(raw)
    return float(raw)
