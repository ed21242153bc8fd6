"""
References and record handles.

Python passes every object by reference, so "by value" versus "by reference"
is made explicit: a bare record is a read-only view, while a record wrapped in
``Ref`` may be written through. ``RecordHandle`` is the normalized view every
accessor operation works on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from .inspectors import TypeInspector

T = TypeVar("T")


class Ref(Generic[T]):
    """
    Explicit single-level reference to a record.

    Examples:
        user = User(Username="srathi", Age=30)
        set_field(Ref(user), "Age", 40)  # mutates ``user``
    """

    __slots__ = ("target",)

    def __init__(self, target: T) -> None:
        self.target = target

    def __repr__(self) -> str:
        return f"Ref({self.target!r})"


def ref(record: T) -> Ref[T]:
    """Wrap ``record`` in a ``Ref`` so it can be written through."""
    return Ref(record)


@dataclass(frozen=True)
class RecordHandle:
    """
    Canonical view of a record produced by normalization.

    Handles live for a single accessor call; they are never cached.
    """

    record: Any
    record_type: type
    inspector: TypeInspector
    by_reference: bool = False
    frozen: bool = False

    @property
    def addressable(self) -> bool:
        """Writes are allowed only through a reference to a mutable record."""
        return self.by_reference and not self.frozen
