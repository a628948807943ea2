from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from prefab_metadata.utils.logger_util import get_logger, logging
logger = get_logger(__name__, logging.INFO)

SCHEMA_VERSION = 1


class JsonKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(value: Any) -> JsonKind:
    """Return the JSON kind of a value produced by ``json.loads``.

    bool is checked before int since it is an int subclass; a float stays a
    float even when it is numerically integral (``1.0``).
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, int):
        return JsonKind.INTEGER
    if isinstance(value, float):
        return JsonKind.FLOAT
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")


@dataclass(frozen=True)
class FieldSpec:
    """One field of a descriptor layout: its key, kind and element kind for arrays."""

    name: str
    kind: JsonKind
    element_kind: Optional[JsonKind] = None
    required: bool = True


# declaration order decides which error is reported first
FIELDS_V1: Tuple[FieldSpec, ...] = (
    FieldSpec("schema_version", JsonKind.INTEGER),
    FieldSpec("name", JsonKind.STRING),
    FieldSpec("dependencies", JsonKind.ARRAY, element_kind=JsonKind.STRING),
)

REQUIRED_KEYS_V1: FrozenSet[str] = frozenset(f.name for f in FIELDS_V1 if f.required)


class PackageMetadataV1(BaseModel):
    """Validated metadata of one native package (descriptor schema version 1).

    Instances are immutable and closed: unknown keys, coerced types and any
    other schema version are rejected at construction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: StrictInt = Field(..., description="Descriptor layout version, always 1")
    name: StrictStr = Field(..., description="Identifying name of the package")
    # tuple keeps the record immutable; order is the document order
    dependencies: Tuple[StrictStr, ...] = Field(..., description="Names of packages this one depends on")

    @field_validator("schema_version")
    def _known_version(cls, v: int):
        if v != SCHEMA_VERSION:
            raise ValueError(f"schema_version must be {SCHEMA_VERSION}, got {v}")
        return v
