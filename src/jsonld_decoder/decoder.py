"""Shape decoder: pick one interpretation of a raw field value by its shape.

The branch is chosen by the structural shape of the raw value, never by
trial and error across interpretations:

    scalar              → decode directly (or build from text for composites)
    sequence of scalars → decode each element directly
    keyed object        → project along the key path, or decode natively
    sequence of objects → project each element, dropping failures
    anything else       → Absent

Structural mismatches are local and silent.  A key path that does not
resolve inside a single present keyed object raises KeyPathResolutionError.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .coerce import decode_value, is_composite, scalar_to_text
from .errors import KeyPathResolutionError, TypeMismatch
from .model import Absent, AdaptiveObjectBuilder, KeyPath, Shape, shape_of
from .projector import project, project_array

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def decode_field(
    raw: Any,
    target: Any = str,
    path: KeyPath | str | Iterable[str] | None = None,
    builder: AdaptiveObjectBuilder | None = None,
) -> list | Any:
    """Decode *raw* into a list of *target* elements, or ``Absent``.

    An empty sequence decodes to ``[]``, which is distinct from ``Absent``.
    """
    path = _as_path(path)
    shape = shape_of(raw)

    if shape is Shape.SCALAR:
        try:
            return [_decode_scalar(raw, target, builder)]
        except TypeMismatch as exc:
            logger.debug("Scalar does not decode as %s: %s", _name(target), exc)
            return Absent

    if shape is Shape.SEQUENCE:
        return _decode_sequence(raw, target, path, builder)

    if shape is Shape.KEYED:
        try:
            return [_decode_object(raw, target, path)]
        except TypeMismatch as exc:
            logger.debug("Object does not decode as %s: %s", _name(target), exc)
            return Absent

    return Absent


def decode_single(
    raw: Any,
    target: Any = str,
    path: KeyPath | str | Iterable[str] | None = None,
    builder: AdaptiveObjectBuilder | None = None,
) -> Any:
    """Decode *raw* into one *target* element, or ``Absent``.

    For a sequence the first element that decodes wins.
    """
    path = _as_path(path)
    shape = shape_of(raw)

    if shape is Shape.SCALAR:
        try:
            return _decode_scalar(raw, target, builder)
        except TypeMismatch as exc:
            logger.debug("Scalar does not decode as %s: %s", _name(target), exc)
            return Absent

    if shape is Shape.KEYED:
        try:
            return _decode_object(raw, target, path)
        except TypeMismatch as exc:
            logger.debug("Object does not decode as %s: %s", _name(target), exc)
            return Absent

    if shape is Shape.SEQUENCE:
        for index, item in enumerate(raw):
            try:
                return _decode_element(item, target, path, builder)
            except (TypeMismatch, KeyPathResolutionError) as exc:
                logger.debug("Skipping element %d: %s", index, exc)

    return Absent


def decode_member(
    parent: dict,
    key: str,
    target: Any = str,
    path: KeyPath | str | Iterable[str] | None = None,
    builder: AdaptiveObjectBuilder | None = None,
    multi: bool = True,
) -> Any:
    """Look *key* up in *parent* and decode it; a missing key is ``Absent``."""
    if key not in parent:
        return Absent
    decode = decode_field if multi else decode_single
    try:
        return decode(parent[key], target, path, builder)
    except KeyPathResolutionError as exc:
        if exc.source is None:
            exc.source = key
        raise


# ---------------------------------------------------------------------------
# Per-shape decoding
# ---------------------------------------------------------------------------

def _decode_scalar(raw: Any, target: Any, builder: AdaptiveObjectBuilder | None) -> Any:
    if is_composite(target):
        if builder is None:
            raise TypeMismatch(_name(target), raw)
        return builder.from_text(scalar_to_text(raw))
    return decode_value(raw, target)


def _decode_object(raw: dict, target: Any, path: KeyPath | None) -> Any:
    if path is not None:
        return project(raw, path, target)
    if is_composite(target):
        return decode_value(raw, target)
    raise TypeMismatch(f"{_name(target)} (no key path declared)", raw)


def _decode_sequence(
    items: list,
    target: Any,
    path: KeyPath | None,
    builder: AdaptiveObjectBuilder | None,
) -> list | Any:
    shapes = {shape_of(item) for item in items}

    if path is not None and shapes == {Shape.KEYED}:
        return project_array(items, path, target)

    # A sequence in which no element has a usable shape is a mismatch as a
    # whole; one whose objects only failed projection is an empty result.
    results = []
    matched = False
    for index, item in enumerate(items):
        try:
            results.append(_decode_element(item, target, path, builder))
            matched = True
        except KeyPathResolutionError as exc:
            logger.debug("Dropping element %d: %s", index, exc)
            matched = True
        except TypeMismatch as exc:
            logger.debug("Dropping element %d: %s", index, exc)
    if items and not matched:
        return Absent
    return results


def _decode_element(
    item: Any,
    target: Any,
    path: KeyPath | None,
    builder: AdaptiveObjectBuilder | None,
) -> Any:
    """Decode one sequence element by its own shape."""
    shape = shape_of(item)
    if shape is Shape.SCALAR:
        return _decode_scalar(item, target, builder)
    if shape is Shape.KEYED:
        return _decode_object(item, target, path)
    raise TypeMismatch("scalar or keyed object", item)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _as_path(path: KeyPath | str | Iterable[str] | None) -> KeyPath | None:
    if path is None:
        return None
    return KeyPath.parse(path)


def _name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))
