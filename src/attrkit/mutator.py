"""
In-place field assignment.

Checks run in a fixed order (addressability, existence, visibility, exact
type) and nothing is written unless all of them pass.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import NotAddressableError, type_mismatch
from .handles import RecordHandle
from .kinds import matches
from .resolver import resolve_visible

logger = logging.getLogger(__name__)


def assign(handle: RecordHandle, name: str, new_value: Any) -> None:
    """
    Store ``new_value`` into field ``name`` of the handle's record.

    Raises:
        NotAddressableError: If the record was not passed by reference, or
            its type (or the field) is frozen
        NoSuchFieldError: If the record type declares no such field
        HiddenFieldError: If the field is hidden
        TypeMismatchError: If ``type(new_value)`` is not exactly the declared type
    """
    if not handle.addressable:
        reason = (
            f"{handle.record_type.__qualname__} is frozen"
            if handle.frozen
            else f"wrap the {handle.record_type.__qualname__} in Ref() to set {name!r}"
        )
        logger.debug("Refused write to %s.%s: %s", handle.record_type.__qualname__, name, reason)
        raise NotAddressableError(detail=reason)

    descriptor = resolve_visible(handle, name)

    if not matches(descriptor.declared_type, new_value):
        logger.debug(
            "Refused write to %s.%s: %s is not %r",
            handle.record_type.__qualname__,
            name,
            type(new_value).__qualname__,
            descriptor.declared_type,
        )
        raise type_mismatch(handle.record_type, name, descriptor.declared_type, new_value)

    handle.inspector.write(handle.record, name, new_value)
    logger.debug("Set %s.%s", handle.record_type.__qualname__, name)
