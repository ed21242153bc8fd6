"""
Field name resolution against a record handle.

Lookups are exact and case-sensitive. Existence checks ignore visibility;
anything that exposes a field's value or metadata requires it to be visible.
"""

from __future__ import annotations

from .descriptors import FieldDescriptor
from .errors import hidden_field, no_such_field
from .handles import RecordHandle


def resolve(handle: RecordHandle, name: str) -> FieldDescriptor:
    """
    Find the declared field called ``name``.

    Raises:
        NoSuchFieldError: If the record type declares no such field
    """
    for descriptor in handle.inspector.fields(handle.record_type):
        if descriptor.name == name:
            return descriptor
    raise no_such_field(handle.record_type, name)


def resolve_visible(handle: RecordHandle, name: str) -> FieldDescriptor:
    """
    Find the declared field called ``name`` and require it to be visible.

    Raises:
        NoSuchFieldError: If the record type declares no such field
        HiddenFieldError: If the field exists but is hidden
    """
    descriptor = resolve(handle, name)
    if not descriptor.is_visible:
        raise hidden_field(handle.record_type, name)
    return descriptor


def exists(handle: RecordHandle, name: str) -> bool:
    """Check whether ``name`` is declared, regardless of visibility."""
    return any(d.name == name for d in handle.inspector.fields(handle.record_type))
