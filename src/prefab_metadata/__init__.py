"""Strict decoding of native package metadata descriptors."""

from .decoder import DecodeResult, decode, try_decode
from .errors import (
    DecodeError,
    DuplicateFieldError,
    JsonSyntaxError,
    MissingFieldError,
    NotAnObjectError,
    SchemaError,
    TypeMismatchError,
    UnknownFieldError,
    VersionMismatchError,
)
from .loader import DESCRIPTOR_FILENAME, load_package_metadata, scan_package_metadata
from .schemas.package_metadata import SCHEMA_VERSION, PackageMetadataV1

__all__ = [
    "DESCRIPTOR_FILENAME",
    "DecodeError",
    "DecodeResult",
    "DuplicateFieldError",
    "JsonSyntaxError",
    "MissingFieldError",
    "NotAnObjectError",
    "PackageMetadataV1",
    "SCHEMA_VERSION",
    "SchemaError",
    "TypeMismatchError",
    "UnknownFieldError",
    "VersionMismatchError",
    "decode",
    "load_package_metadata",
    "scan_package_metadata",
    "try_decode",
]
