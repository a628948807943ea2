"""Errors raised while decoding a package metadata descriptor.

``JsonSyntaxError`` means the text is not JSON at all; every ``SchemaError``
means the JSON is well formed but does not match the schema. Each error keeps
the offending field and the expected/found kinds as attributes so callers can
dispatch on them instead of parsing messages.
"""
from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Base error for a descriptor that could not be decoded."""


class JsonSyntaxError(DecodeError):
    """Raised when the text is not well-formed JSON."""

    def __init__(self, msg: str, lineno: int = 0, colno: int = 0, pos: int = 0) -> None:
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        self.pos = pos
        if lineno:
            super().__init__(f"invalid JSON: {msg}: line {lineno} column {colno} (char {pos})")
        else:
            super().__init__(f"invalid JSON: {msg}")


class SchemaError(DecodeError):
    """Base error for well-formed JSON that does not match the schema."""


class NotAnObjectError(SchemaError):
    def __init__(self, found: str) -> None:
        self.found = found
        super().__init__(f"expected object, found {found}")


class UnknownFieldError(SchemaError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"unknown field: {field}")


class MissingFieldError(SchemaError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing field: {field}")


class DuplicateFieldError(SchemaError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"duplicate field: {field}")


class TypeMismatchError(SchemaError):
    """A field (or one element of an array field) has the wrong JSON kind."""

    def __init__(self, field: str, expected: str, found: str, index: Optional[int] = None) -> None:
        self.field = field
        self.expected = expected
        self.found = found
        self.index = index
        super().__init__(f"{self.location}: expected {expected}, found {found}")

    @property
    def location(self) -> str:
        if self.index is None:
            return self.field
        return f"{self.field}[{self.index}]"


class VersionMismatchError(SchemaError):
    """``schema_version`` is an integer, but not the one this decoder handles."""

    def __init__(self, expected: int, found: int) -> None:
        self.field = "schema_version"
        self.expected = expected
        self.found = found
        super().__init__(f"schema_version: expected {expected}, found {found}")


__all__ = [
    "DecodeError",
    "DuplicateFieldError",
    "JsonSyntaxError",
    "MissingFieldError",
    "NotAnObjectError",
    "SchemaError",
    "TypeMismatchError",
    "UnknownFieldError",
    "VersionMismatchError",
]
