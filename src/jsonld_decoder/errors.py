"""Error taxonomy for jsonld_decoder."""

from __future__ import annotations


class JSONLDDecoderError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(JSONLDDecoderError):
    """A schema declaration or setting is invalid (e.g. an empty key path)."""


class TypeMismatch(JSONLDDecoderError):
    """A raw value does not have the shape a candidate interpretation needs.

    Raised by terminal decoding and always handled inside the decoder.
    """

    def __init__(self, expected: str, found: object) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected}, found {type(found).__name__}")


class KeyPathResolutionError(JSONLDDecoderError):
    """A declared key path does not resolve inside a present keyed object.

    ``key`` is the key that was missing or undecodable, ``path`` the full
    declared path.  As the error travels up, the member decoder fills in
    ``source`` (the document key) and the record decoder fills in ``field``
    (the declared field name) and ``record``.  Several fields may read the
    same document key, so ``field`` is what tells them apart.
    """

    def __init__(
        self,
        key: str,
        path: object,
        reason: str = "missing key",
        *,
        source: str | None = None,
        field: str | None = None,
        record: str | None = None,
    ) -> None:
        self.key = key
        self.path = path
        self.reason = reason
        self.source = source
        self.field = field
        self.record = record
        super().__init__(key, path, reason)

    def __str__(self) -> str:
        where = ""
        if self.record:
            where += f"{self.record}."
        if self.field:
            where += self.field
        if self.source and self.source != self.field:
            where += f" ({self.source})" if where else self.source
        prefix = f"{where}: " if where else ""
        return f"{prefix}{self.reason} '{self.key}' in key path {self.path}"


class DocumentError(JSONLDDecoderError):
    """The document could not be parsed or holds no node of the wanted type."""
