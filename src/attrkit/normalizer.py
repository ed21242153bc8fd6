"""
Normalization of accessor inputs into record handles.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .errors import not_a_record
from .handles import Ref, RecordHandle
from .inspectors import TypeInspector

logger = logging.getLogger(__name__)


def normalize(value: Any, inspectors: Iterable[TypeInspector]) -> RecordHandle:
    """
    Turn a record, or a ``Ref`` to a record, into a ``RecordHandle``.

    A bare record yields a read-only handle. A ``Ref`` is dereferenced exactly
    once and yields a writable handle unless the record type is frozen.

    Raises:
        NotARecordError: If the value, after at most one dereference, is not
            a record instance
    """
    by_reference = isinstance(value, Ref)
    target = value.target if by_reference else value

    for inspector in inspectors:
        if inspector.supports(target):
            record_type = type(target)
            return RecordHandle(
                record=target,
                record_type=record_type,
                inspector=inspector,
                by_reference=by_reference,
                frozen=inspector.is_frozen(record_type),
            )

    logger.debug("Rejected non-record %s (by_reference=%s)", type(target).__qualname__, by_reference)
    raise not_a_record(target)
