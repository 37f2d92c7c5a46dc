"""Data model for raw JSON-LD nodes, key paths and decode outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterable, Protocol, TypeVar, Union, runtime_checkable

from .errors import ConfigurationError

T_co = TypeVar("T_co", covariant=True)


# ---------------------------------------------------------------------------
# Absent: singleton for "no value"
# ---------------------------------------------------------------------------

class _AbsentType:
    """Sentinel returned when a field is missing or has no usable shape."""

    _instance: _AbsentType | None = None

    def __new__(cls) -> _AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False


Absent = _AbsentType()


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------

class Shape(Enum):
    SCALAR = auto()
    SEQUENCE = auto()
    KEYED = auto()
    NONE = auto()


RawValue = Union[str, int, float, bool, None, list, dict]


def shape_of(raw: Any) -> Shape:
    """Classify a node produced by the JSON parser.

    ``bool`` is checked before the numbers since it is an ``int`` subclass;
    booleans and ``null`` have no usable shape.
    """
    if raw is None or isinstance(raw, bool):
        return Shape.NONE
    if isinstance(raw, (str, int, float)):
        return Shape.SCALAR
    if isinstance(raw, list):
        return Shape.SEQUENCE
    if isinstance(raw, dict):
        return Shape.KEYED
    return Shape.NONE


# ---------------------------------------------------------------------------
# KeyPath
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyPath:
    """Ordered, non-empty sequence of keys leading to a terminal value."""

    keys: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.keys:
            raise ConfigurationError("a key path needs at least one key")
        if any(not isinstance(k, str) or not k for k in self.keys):
            raise ConfigurationError(f"invalid key in key path {self.keys!r}")

    @classmethod
    def of(cls, *keys: str) -> KeyPath:
        return cls(tuple(keys))

    @classmethod
    def parse(cls, spec: str | Iterable[str] | KeyPath) -> KeyPath:
        """Build a KeyPath from a dotted string, a sequence of keys or a KeyPath."""
        if isinstance(spec, KeyPath):
            return spec
        if isinstance(spec, str):
            return cls(tuple(spec.split("."))) if spec else cls(())
        return cls(tuple(spec))

    @property
    def parents(self) -> tuple[str, ...]:
        return self.keys[:-1]

    @property
    def terminal(self) -> str:
        return self.keys[-1]

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self):
        return iter(self.keys)

    def __str__(self) -> str:
        return ".".join(self.keys)


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------

@runtime_checkable
class AdaptiveObjectBuilder(Protocol[T_co]):
    """Constructs a composite element from a bare text value."""

    def from_text(self, text: str) -> T_co: ...


@runtime_checkable
class JSONLDDecodable(Protocol[T_co]):
    """A composite element that decodes itself from a keyed object."""

    def from_jsonld(self, obj: dict) -> T_co: ...
