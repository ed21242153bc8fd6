"""
Field descriptor definitions for attrkit.

This module contains the immutable value objects describing a record's
declared fields: their coarse kind, their visibility, and their annotations.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

HIDDEN_PREFIX = "_"


class FieldKind(str, Enum):
    """Coarse category of a field's declared type."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    COMPLEX = "complex"
    BOOLEAN = "boolean"
    BYTES = "bytes"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    RECORD = "record"
    REFERENCE = "reference"
    ENUM = "enum"
    OPTIONAL = "optional"  # X | None
    UNION = "union"
    ANY = "any"
    FUNCTION = "function"
    OBJECT = "object"  # any other concrete class
    UNKNOWN = "unknown"  # unresolved forward reference


class Visibility(str, Enum):
    """Whether a field is externally accessible."""

    VISIBLE = "visible"
    HIDDEN = "hidden"

    @classmethod
    def for_name(cls, name: str) -> Visibility:
        """Underscore-prefixed names are hidden, everything else is visible."""
        return cls.HIDDEN if name.startswith(HIDDEN_PREFIX) else cls.VISIBLE


class FieldDescriptor(BaseModel):
    """
    Snapshot of a single declared field of a record type.

    Attributes:
        name: Field identifier, exactly as declared
        declared_type: Resolved type annotation (or the raw string when it
            cannot be resolved)
        kind: Coarse category of ``declared_type``
        visibility: Declaration-time visibility
        annotations: Metadata strings keyed by annotation key (e.g. "json")
        position: Zero-based declaration index
    """

    name: str
    declared_type: Any = None
    kind: FieldKind = FieldKind.UNKNOWN
    visibility: Visibility = Visibility.VISIBLE
    annotations: dict[str, str] = Field(default_factory=dict)
    position: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def is_visible(self) -> bool:
        """Check if field is externally accessible."""
        return self.visibility is Visibility.VISIBLE

    def annotation(self, key: str) -> str:
        """Return the annotation for ``key``, or an empty string when absent."""
        return self.annotations.get(key, "")


class _Unset:
    """Marker for a declared field that has not been assigned a value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()
