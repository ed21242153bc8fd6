"""
Type classification and exact type matching.

``classify`` maps a declared annotation to a coarse ``FieldKind``.
``matches`` decides whether a runtime value may be stored in a field with a
given annotation. Matching is exact: ``type(value)`` must be the declared
class itself, never a subclass, and numbers are never widened.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import enum
import types
from typing import Annotated, Any, ForwardRef, Literal, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel

from .descriptors import FieldKind
from .handles import Ref

NoneType = type(None)

_UNION_ORIGINS = (Union, types.UnionType)

# Checked in order; bool before int, Enum before its mixin bases.
_SCALAR_KINDS: tuple[tuple[type | tuple[type, ...], FieldKind], ...] = (
    (Ref, FieldKind.REFERENCE),
    (enum.Enum, FieldKind.ENUM),
    (bool, FieldKind.BOOLEAN),
    (int, FieldKind.INTEGER),
    (float, FieldKind.FLOAT),
    (complex, FieldKind.COMPLEX),
    (str, FieldKind.STRING),
    ((bytes, bytearray, memoryview), FieldKind.BYTES),
)

_COLLECTION_KINDS: tuple[tuple[type, FieldKind], ...] = (
    (collections.abc.Mapping, FieldKind.MAPPING),
    (collections.abc.Set, FieldKind.SET),
    (collections.abc.Sequence, FieldKind.SEQUENCE),
    (collections.abc.Callable, FieldKind.FUNCTION),
)


def is_record_type(tp: Any) -> bool:
    """Check whether ``tp`` is a record class (dataclass or pydantic model)."""
    if not isinstance(tp, type) or get_origin(tp) is not None:
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def classify(declared: Any) -> FieldKind:
    """
    Classify a declared annotation into a coarse kind.

    Generic parameters are ignored: ``list[int]`` and ``tuple[str, ...]`` are
    both ``sequence``.

    Examples:
        >>> classify(int)
        <FieldKind.INTEGER: 'integer'>
        >>> classify(dict[str, int])
        <FieldKind.MAPPING: 'mapping'>
        >>> classify(int | None)
        <FieldKind.OPTIONAL: 'optional'>
    """
    if isinstance(declared, (str, ForwardRef)):
        return FieldKind.UNKNOWN
    if declared is Any:
        return FieldKind.ANY

    origin = get_origin(declared)
    args = get_args(declared)

    if origin is Annotated:
        return classify(args[0])
    if origin in _UNION_ORIGINS:
        if NoneType in args:
            return FieldKind.OPTIONAL
        return FieldKind.UNION
    if origin is Literal:
        literal_kinds = {classify(type(arg)) for arg in args}
        return literal_kinds.pop() if len(literal_kinds) == 1 else FieldKind.UNION
    if origin is not None:
        declared = origin

    if isinstance(declared, TypeVar):
        return classify(declared.__bound__) if declared.__bound__ else FieldKind.ANY
    if not isinstance(declared, type):
        return FieldKind.OBJECT

    for base, kind in _SCALAR_KINDS:
        if issubclass(declared, base):
            return kind
    if is_record_type(declared):
        return FieldKind.RECORD
    for base, kind in _COLLECTION_KINDS:
        if issubclass(declared, base):
            return kind
    return FieldKind.OBJECT


def matches(declared: Any, value: Any) -> bool:
    """
    Check that ``value`` is exactly of the declared type.

    Rules:
    - Plain classes: ``type(value) is declared``
    - Unions and Optionals: exact match against any member
    - Parameterized generics: exact match against the origin class
    - ``Literal``: same type and equal to one of the literals
    - ``Any`` and unbound type variables accept every value
    - ``object`` is a plain class: only bare ``object()`` instances match
    - Unresolved string annotations compare against the class name
    """
    value_type = type(value)

    if declared is Any:
        return True
    if isinstance(declared, ForwardRef):
        declared = declared.__forward_arg__
    if isinstance(declared, str):
        return declared in (value_type.__name__, value_type.__qualname__)
    if declared is None:
        declared = NoneType

    origin = get_origin(declared)
    args = get_args(declared)

    if origin is Annotated:
        return matches(args[0], value)
    if origin in _UNION_ORIGINS:
        return any(matches(member, value) for member in args)
    if origin is Literal:
        return any(value_type is type(arg) and value == arg for arg in args)
    if origin is not None:
        return value_type is origin

    if isinstance(declared, TypeVar):
        if declared.__bound__ is not None:
            return matches(declared.__bound__, value)
        if declared.__constraints__:
            return any(matches(c, value) for c in declared.__constraints__)
        return True

    return value_type is declared
