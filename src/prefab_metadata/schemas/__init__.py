"""Schema models for package metadata descriptors.

The models are strict: they refuse unknown fields and never coerce values
into the declared types.
"""

from .package_metadata import (
    FIELDS_V1,
    REQUIRED_KEYS_V1,
    SCHEMA_VERSION,
    FieldSpec,
    JsonKind,
    PackageMetadataV1,
    kind_of,
)

__all__ = [
    "FIELDS_V1",
    "REQUIRED_KEYS_V1",
    "SCHEMA_VERSION",
    "FieldSpec",
    "JsonKind",
    "PackageMetadataV1",
    "kind_of",
]
