"""FieldDef and RecordDef: declared per-field decoding schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .decoder import decode_member
from .errors import ConfigurationError, KeyPathResolutionError
from .model import Absent, AdaptiveObjectBuilder, KeyPath


@dataclass(frozen=True, slots=True)
class FieldDef:
    name: str
    key: str | None = None  # source key in the document; defaults to name
    target: Any = str
    path: KeyPath | None = None
    builder: AdaptiveObjectBuilder | None = None
    multi: bool = True  # list of values vs. a single value

    def __post_init__(self) -> None:
        if self.key is None:
            object.__setattr__(self, "key", self.name)
        if self.path is not None and not isinstance(self.path, KeyPath):
            object.__setattr__(self, "path", KeyPath.parse(self.path))

    def decode(self, obj: dict) -> Any:
        return decode_member(obj, self.key, self.target, self.path, self.builder, self.multi)


@dataclass(frozen=True, slots=True)
class RecordDef:
    name: str
    fields: tuple[FieldDef, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise ConfigurationError(f"duplicate field '{f.name}' in record {self.name}")
            seen.add(f.name)

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]


def decode_record(obj: dict, record: RecordDef) -> dict[str, Any]:
    """Decode every declared field of *record* from the keyed object *obj*.

    Absent fields map to ``Absent``.  A key path that does not resolve
    aborts the whole record.
    """
    values: dict[str, Any] = {}
    for f in record.fields:
        try:
            values[f.name] = f.decode(obj)
        except KeyPathResolutionError as exc:
            if exc.record is None:
                exc.record = record.name
                exc.field = f.name
            raise
    return values


def absent_to_none(values: dict[str, Any]) -> dict[str, Any]:
    """Map ``Absent`` to ``None`` so *values* can feed a dataclass constructor."""
    return {k: (None if v is Absent else v) for k, v in values.items()}
