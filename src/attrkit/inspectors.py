"""
Type inspector interface for record introspection.

This module defines the abstract interface that every record flavour must
implement, plus the built-in inspectors for dataclasses and pydantic models.
An inspector turns a record class into ordered ``FieldDescriptor`` lists and
provides the storage slot for reads and writes.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import sys
import typing
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .descriptors import FieldDescriptor, Visibility
from .errors import NotAddressableError, unset_field
from .kinds import classify

logger = logging.getLogger(__name__)


def resolve_type_hints(record_type: type) -> dict[str, Any]:
    """
    Resolve the annotations of ``record_type``, keeping ``Annotated`` extras.

    When some annotation cannot be resolved, every annotation is evaluated on
    its own so only the unresolvable ones stay as raw strings.
    """
    try:
        return typing.get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError):
        return _resolve_each(record_type)


def _resolve_each(record_type: type) -> dict[str, Any]:
    """Evaluate annotations one by one in the namespace of their declaring class."""
    hints: dict[str, Any] = {}
    for cls in reversed(record_type.__mro__):
        if cls is object:
            continue
        module = sys.modules.get(cls.__module__)
        globalns = dict(vars(module)) if module else {}
        localns = dict(vars(cls))
        for name, raw in inspect.get_annotations(cls).items():
            hints[name] = _evaluate(cls, name, raw, globalns, localns)
    return hints


def _evaluate(cls: type, name: str, raw: Any, globalns: dict[str, Any], localns: dict[str, Any]) -> Any:
    if not isinstance(raw, str):
        return raw
    try:
        return eval(raw, globalns, localns)  # noqa: S307
    except (NameError, AttributeError, SyntaxError, TypeError) as e:
        logger.warning(
            "Could not resolve annotation of %s.%s, keeping raw annotation %r: %s",
            cls.__qualname__,
            name,
            raw,
            e,
        )
        return raw


def _raw_annotation(record_type: type, name: str) -> Any:
    """Return the unevaluated annotation of ``name`` from the nearest declaring class."""
    for cls in record_type.__mro__:
        annotations = inspect.get_annotations(cls)
        if name in annotations:
            return annotations[name]
    return Any


def stringify_annotations(metadata: Mapping[Any, Any] | None) -> dict[str, str]:
    """Render a metadata mapping as annotation strings."""
    if not metadata:
        return {}
    return {str(key): value if isinstance(value, str) else str(value) for key, value in metadata.items()}


class TypeInspector(ABC):
    """
    Abstract interface for record introspection.

    Implementations must be stateless: every call derives its answer from the
    arguments and the live class metadata.
    """

    name: str = "abstract"

    @abstractmethod
    def supports(self, value: Any) -> bool:
        """Check whether ``value`` is a record instance of this flavour."""
        ...

    @abstractmethod
    def fields(self, record_type: type) -> list[FieldDescriptor]:
        """Return every declared field of ``record_type`` in declaration order."""
        ...

    @abstractmethod
    def is_frozen(self, record_type: type) -> bool:
        """Check whether instances of ``record_type`` refuse attribute writes."""
        ...

    def read(self, record: Any, name: str) -> Any:
        """
        Read the current value of a field.

        Raises:
            UnsetFieldError: If the field has no value yet (e.g. ``field(init=False)``)
        """
        try:
            return getattr(record, name)
        except AttributeError:
            raise unset_field(type(record), name) from None

    def write(self, record: Any, name: str, value: Any) -> None:
        """Store ``value`` into a field in place."""
        setattr(record, name, value)


class DataclassInspector(TypeInspector):
    """Inspector for instances of ``@dataclass`` classes."""

    name = "dataclass"

    def supports(self, value: Any) -> bool:
        return dataclasses.is_dataclass(value) and not isinstance(value, type)

    def fields(self, record_type: type) -> list[FieldDescriptor]:
        hints = resolve_type_hints(record_type)
        descriptors = []
        for position, field in enumerate(dataclasses.fields(record_type)):
            declared = hints.get(field.name, field.type)
            descriptors.append(
                FieldDescriptor(
                    name=field.name,
                    declared_type=declared,
                    kind=classify(declared),
                    visibility=Visibility.for_name(field.name),
                    annotations=stringify_annotations(field.metadata),
                    position=position,
                )
            )
        return descriptors

    def is_frozen(self, record_type: type) -> bool:
        return bool(record_type.__dataclass_params__.frozen)


class PydanticInspector(TypeInspector):
    """
    Inspector for instances of pydantic ``BaseModel`` subclasses.

    Model fields are the visible declarations; private attributes are the
    hidden ones and follow the model fields. Annotations are read from
    ``Field(json_schema_extra={...})`` when that is a mapping.
    """

    name = "pydantic"

    def supports(self, value: Any) -> bool:
        return isinstance(value, BaseModel)

    def fields(self, record_type: type) -> list[FieldDescriptor]:
        descriptors = []
        for name, info in record_type.model_fields.items():
            extra = info.json_schema_extra if isinstance(info.json_schema_extra, Mapping) else None
            descriptors.append(
                FieldDescriptor(
                    name=name,
                    declared_type=info.annotation,
                    kind=classify(info.annotation),
                    visibility=Visibility.for_name(name),
                    annotations=stringify_annotations(extra),
                    position=len(descriptors),
                )
            )

        for name in record_type.__private_attributes__:
            declared = _raw_annotation(record_type, name)
            descriptors.append(
                FieldDescriptor(
                    name=name,
                    declared_type=declared,
                    kind=classify(declared),
                    visibility=Visibility.HIDDEN,
                    position=len(descriptors),
                )
            )
        return descriptors

    def is_frozen(self, record_type: type) -> bool:
        return bool(record_type.model_config.get("frozen", False))

    def write(self, record: Any, name: str, value: Any) -> None:
        info = type(record).model_fields.get(name)
        if info is not None and info.frozen:
            raise NotAddressableError(detail=f"{type(record).__qualname__}.{name} is frozen")
        setattr(record, name, value)


DEFAULT_INSPECTORS: tuple[TypeInspector, ...] = (PydanticInspector(), DataclassInspector())
