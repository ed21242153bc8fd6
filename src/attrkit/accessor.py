"""
Accessor: the public entry point for reading, writing, and describing
record fields by name.

Every operation normalizes its input first, then resolves a single field or
sweeps all visible fields, and finally (for writes only) assigns in place.

Usage:
    from attrkit import Ref, get_field, set_field, names

    user = User(Username="srathi", Age=30)
    names(user)                      # ["Username", "Age"]
    set_field(Ref(user), "Age", 40)  # user.Age == 40
    get_field(user, "Age")           # 40
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import enumerator, mutator, resolver
from .descriptors import FieldDescriptor, FieldKind
from .handles import RecordHandle
from .inspectors import DEFAULT_INSPECTORS, TypeInspector
from .normalizer import normalize


@dataclass(frozen=True)
class AccessorConfig:
    """
    Configuration for an Accessor.

    Examples:
        # Default: pydantic models and dataclasses
        accessor = Accessor()

        # Dataclasses only
        accessor = Accessor(AccessorConfig(inspectors=(DataclassInspector(),)))
    """

    inspectors: tuple[TypeInspector, ...] = DEFAULT_INSPECTORS


class Accessor:
    """Stateless field accessor over records and references to records."""

    def __init__(self, config: AccessorConfig | None = None) -> None:
        self.config = config or AccessorConfig()

    def handle(self, obj: Any) -> RecordHandle:
        """Normalize ``obj`` into a record handle."""
        return normalize(obj, self.config.inspectors)

    # === Single-field operations ===

    def get_field(self, obj: Any, name: str) -> Any:
        """
        Return the current value of a visible field.

        ``obj`` may be a record or a ``Ref`` to one.

        Raises:
            NotARecordError, NoSuchFieldError, HiddenFieldError,
            UnsetFieldError
        """
        handle = self.handle(obj)
        descriptor = resolver.resolve_visible(handle, name)
        return handle.inspector.read(handle.record, descriptor.name)

    def has_field(self, obj: Any, name: str) -> bool:
        """
        Check whether the record type declares ``name``.

        Hidden fields count as present.

        Raises:
            NotARecordError
        """
        return resolver.exists(self.handle(obj), name)

    def set_field(self, obj: Any, name: str, value: Any) -> None:
        """
        Assign ``value`` to a visible field in place.

        ``obj`` must be a ``Ref`` to a mutable record and ``type(value)``
        must be exactly the field's declared type.

        Raises:
            NotARecordError, NotAddressableError, NoSuchFieldError,
            HiddenFieldError, TypeMismatchError
        """
        mutator.assign(self.handle(obj), name, value)

    def describe(self, obj: Any, name: str) -> FieldDescriptor:
        """Return the descriptor of a visible field."""
        return resolver.resolve_visible(self.handle(obj), name)

    def get_annotation(self, obj: Any, name: str, key: str) -> str:
        """Return the ``key`` annotation of a visible field, or ``""`` if absent."""
        return self.describe(obj, name).annotation(key)

    def get_kind(self, obj: Any, name: str) -> FieldKind:
        """Return the coarse kind of a visible field."""
        return self.describe(obj, name).kind

    # === Whole-record operations ===

    def fields(self, obj: Any) -> list[FieldDescriptor]:
        """Return descriptors of all visible fields in declaration order."""
        return enumerator.visible_fields(self.handle(obj))

    def names(self, obj: Any) -> list[str]:
        """Return visible field names in declaration order."""
        return enumerator.names(self.handle(obj))

    def values(self, obj: Any) -> dict[str, Any]:
        """Return a snapshot of visible field values keyed by name (``UNSET`` when unassigned)."""
        return enumerator.values(self.handle(obj))

    def annotations(self, obj: Any, key: str) -> dict[str, str]:
        """Return the ``key`` annotation of every visible field."""
        return enumerator.annotations(self.handle(obj), key)

    def kinds(self, obj: Any) -> dict[str, FieldKind]:
        """Return the coarse kind of every visible field."""
        return enumerator.kinds(self.handle(obj))


default_accessor = Accessor()

get_field = default_accessor.get_field
has_field = default_accessor.has_field
set_field = default_accessor.set_field
describe = default_accessor.describe
get_annotation = default_accessor.get_annotation
get_kind = default_accessor.get_kind
fields = default_accessor.fields
names = default_accessor.names
values = default_accessor.values
annotations = default_accessor.annotations
kinds = default_accessor.kinds
