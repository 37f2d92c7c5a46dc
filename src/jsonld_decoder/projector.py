"""Key-path projection into keyed objects and arrays of keyed objects."""

from __future__ import annotations

import logging
from typing import Any

from .coerce import decode_value
from .errors import KeyPathResolutionError, TypeMismatch
from .model import KeyPath

logger = logging.getLogger(__name__)


def project(container: dict, path: KeyPath, target: Any) -> Any:
    """Descend *path* inside *container* and decode the terminal value as *target*.

    Every key but the last must name a keyed object; the last must hold a
    value decodable as *target*.  Any other outcome raises
    KeyPathResolutionError with the offending key.
    """
    if not isinstance(container, dict):
        raise KeyPathResolutionError(path.keys[0], path, "not a keyed object at")

    node = container
    for key in path.parents:
        if key not in node:
            raise KeyPathResolutionError(key, path, "missing key")
        node = node[key]
        if not isinstance(node, dict):
            raise KeyPathResolutionError(key, path, "not a keyed object at")

    terminal = path.terminal
    if terminal not in node:
        raise KeyPathResolutionError(terminal, path, "missing key")
    try:
        return decode_value(node[terminal], target)
    except TypeMismatch as exc:
        raise KeyPathResolutionError(terminal, path, f"undecodable value ({exc}) at") from exc


def project_array(items: list, path: KeyPath, target: Any) -> list:
    """Project every element of *items*, dropping the ones that do not resolve.

    Document order is kept; nothing is deduplicated.
    """
    results = []
    for index, item in enumerate(items):
        try:
            results.append(project(item, path, target))
        except KeyPathResolutionError as exc:
            logger.debug("Dropping element %d: %s", index, exc)
    return results
