"""Strict decoder for package metadata descriptors.

``decode`` parses JSON text and validates it against ``FIELDS_V1`` in one
pass, raising the first ``DecodeError`` it finds. It performs no I/O and
keeps no state between calls.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from prefab_metadata.errors import (
    DecodeError,
    DuplicateFieldError,
    JsonSyntaxError,
    MissingFieldError,
    NotAnObjectError,
    TypeMismatchError,
    UnknownFieldError,
    VersionMismatchError,
)
from prefab_metadata.schemas.package_metadata import (
    FIELDS_V1,
    REQUIRED_KEYS_V1,
    SCHEMA_VERSION,
    FieldSpec,
    JsonKind,
    PackageMetadataV1,
    kind_of,
)
from prefab_metadata.utils.logger_util import get_logger, logging
logger = get_logger(__name__, logging.INFO)


class _JsonObject(dict):
    """dict that remembers the first key repeated in the source object."""

    duplicate_key: Optional[str] = None


def _object_pairs(pairs) -> _JsonObject:
    obj = _JsonObject()
    for key, value in pairs:
        if key in obj and obj.duplicate_key is None:
            obj.duplicate_key = key
        obj[key] = value
    return obj


def _reject_constant(name: str):
    # json accepts NaN/Infinity by default; they are not JSON
    raise JsonSyntaxError(f"non-standard constant {name}")


def _parse(raw_text: Union[str, bytes, bytearray]) -> Any:
    try:
        return json.loads(raw_text, object_pairs_hook=_object_pairs, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise JsonSyntaxError(exc.msg, exc.lineno, exc.colno, exc.pos) from exc
    except JsonSyntaxError:
        raise
    except UnicodeDecodeError as exc:
        raise JsonSyntaxError(f"text is not valid UTF-8 ({exc.reason})") from exc
    except RecursionError as exc:
        raise JsonSyntaxError("document is nested too deeply") from exc
    except ValueError as exc:
        # int() refuses literals past sys.get_int_max_str_digits()
        raise JsonSyntaxError(f"number literal out of range ({exc})") from exc


def _check_field_set(obj: Dict[str, Any]) -> None:
    for key in obj:
        if key not in REQUIRED_KEYS_V1:
            raise UnknownFieldError(key)
    duplicate = getattr(obj, "duplicate_key", None)
    if duplicate is not None:
        raise DuplicateFieldError(duplicate)
    for spec in FIELDS_V1:
        if spec.required and spec.name not in obj:
            raise MissingFieldError(spec.name)


def _check_field(spec: FieldSpec, value: Any) -> None:
    found = kind_of(value)
    if found is not spec.kind:
        raise TypeMismatchError(spec.name, spec.kind.value, found.value)
    if spec.element_kind is not None:
        for index, element in enumerate(value):
            element_found = kind_of(element)
            if element_found is not spec.element_kind:
                raise TypeMismatchError(spec.name, spec.element_kind.value, element_found.value, index=index)


def decode(raw_text: Union[str, bytes, bytearray]) -> PackageMetadataV1:
    """Decode a schema version 1 descriptor into a ``PackageMetadataV1``.

    Raises:
        JsonSyntaxError: the text is not well-formed JSON.
        NotAnObjectError: the top-level value is not an object.
        UnknownFieldError / DuplicateFieldError / MissingFieldError: the key
            set is not exactly ``schema_version``, ``name``, ``dependencies``.
        TypeMismatchError: a field, or an element of ``dependencies``, has
            the wrong JSON kind. ``1.0`` is a float, not an integer.
        VersionMismatchError: ``schema_version`` is an integer other than 1.
    """
    doc = _parse(raw_text)

    found = kind_of(doc)
    if found is not JsonKind.OBJECT:
        raise NotAnObjectError(found.value)

    _check_field_set(doc)
    for spec in FIELDS_V1:
        _check_field(spec, doc[spec.name])
        if spec.name == "schema_version" and doc[spec.name] != SCHEMA_VERSION:
            raise VersionMismatchError(SCHEMA_VERSION, doc[spec.name])

    metadata = PackageMetadataV1(
        schema_version=doc["schema_version"],
        name=doc["name"],
        dependencies=tuple(doc["dependencies"]),
    )
    logger.debug("decoded package %r with %d dependencies", metadata.name, len(metadata.dependencies))
    return metadata


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of ``try_decode``: exactly one of ``metadata`` and ``error`` is set."""

    metadata: Optional[PackageMetadataV1] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_decode(raw_text: Union[str, bytes, bytearray]) -> DecodeResult:
    """Like ``decode`` but returns the error instead of raising it."""
    try:
        return DecodeResult(metadata=decode(raw_text))
    except DecodeError as exc:
        logger.debug("descriptor rejected: %s", exc)
        return DecodeResult(error=exc)
