"""
Error types for attrkit field access and mutation.

Every failure of the accessor is one of a fixed set of kinds. Each kind is a
subclass of ``AttrKitError`` and also of the builtin exception a plain
``getattr``/``setattr`` would raise for the same mistake, so callers can catch
either.
"""

from __future__ import annotations

from typing import Any


class AttrKitError(Exception):
    """Base exception for all attrkit errors."""

    default_message = "Record field access failed"

    def __init__(self, message: str | None = None, detail: str | None = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with detail if available."""
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class NotARecordError(AttrKitError, TypeError):
    """
    Raised when a value is neither a record nor a reference to one.

    Examples:
    - A primitive, collection, or function
    - A record class instead of an instance
    - A reference to a reference
    """

    default_message = "Given object is not a record or a reference to a record"


class NotAddressableError(AttrKitError, TypeError):
    """
    Raised when a write targets a record that was not passed by reference.

    Frozen records are never addressable, even through a reference.
    """

    default_message = "Specified record is not passed by reference"


class NoSuchFieldError(AttrKitError, AttributeError):
    """Raised when the record type declares no field with the given name."""

    default_message = "Specified field is not present in the record"


class HiddenFieldError(AttrKitError, AttributeError):
    """Raised when value, annotation, or kind access targets a hidden field."""

    default_message = "Specified field is not an exported or public field"


class UnsetFieldError(AttrKitError, AttributeError):
    """Raised when a visible field is declared but holds no value yet."""

    default_message = "Specified field has not been assigned a value"


class TypeMismatchError(AttrKitError, TypeError):
    """Raised when a new value's type is not exactly the field's declared type."""

    default_message = "Specified value to set is of a different type"


def describe_type(tp: Any) -> str:
    """Render a type or annotation for error messages."""
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)


def not_a_record(value: Any) -> NotARecordError:
    """Helper to create a NotARecordError naming the offending type."""
    return NotARecordError(detail=f"got {describe_type(type(value))}")


def no_such_field(record_type: type, name: str) -> NoSuchFieldError:
    """Helper to create a NoSuchFieldError with record and field names."""
    return NoSuchFieldError(detail=f"{record_type.__qualname__}.{name}")


def hidden_field(record_type: type, name: str) -> HiddenFieldError:
    """Helper to create a HiddenFieldError with record and field names."""
    return HiddenFieldError(detail=f"{record_type.__qualname__}.{name}")


def unset_field(record_type: type, name: str) -> UnsetFieldError:
    """Helper to create an UnsetFieldError with record and field names."""
    return UnsetFieldError(detail=f"{record_type.__qualname__}.{name}")


def type_mismatch(record_type: type, name: str, declared: Any, value: Any) -> TypeMismatchError:
    """Helper to create a TypeMismatchError with declared and actual types."""
    return TypeMismatchError(
        detail=(
            f"{record_type.__qualname__}.{name} is declared as {describe_type(declared)}, "
            f"got {describe_type(type(value))}"
        )
    )
