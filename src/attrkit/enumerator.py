"""
Whole-record sweeps over visible fields.

All sweeps share one traversal order (field declaration order) and one filter
(visible fields only). Results are snapshots, never live views.
"""

from __future__ import annotations

from typing import Any

from .descriptors import UNSET, FieldDescriptor, FieldKind
from .errors import UnsetFieldError
from .handles import RecordHandle


def visible_fields(handle: RecordHandle) -> list[FieldDescriptor]:
    """Return descriptors of the visible fields in declaration order."""
    return [d for d in handle.inspector.fields(handle.record_type) if d.is_visible]


def names(handle: RecordHandle) -> list[str]:
    """Return visible field names in declaration order."""
    return [d.name for d in visible_fields(handle)]


def values(handle: RecordHandle) -> dict[str, Any]:
    """
    Return a snapshot mapping of visible field names to current values.

    Fields that have not been assigned yet map to ``UNSET``.
    """
    snapshot: dict[str, Any] = {}
    for d in visible_fields(handle):
        try:
            snapshot[d.name] = handle.inspector.read(handle.record, d.name)
        except UnsetFieldError:
            snapshot[d.name] = UNSET
    return snapshot


def annotations(handle: RecordHandle, key: str) -> dict[str, str]:
    """
    Return the ``key`` annotation of every visible field.

    Fields without that annotation map to an empty string rather than being
    left out.
    """
    return {d.name: d.annotation(key) for d in visible_fields(handle)}


def kinds(handle: RecordHandle) -> dict[str, FieldKind]:
    """Return the coarse kind of every visible field."""
    return {d.name: d.kind for d in visible_fields(handle)}
