"""
attrkit - getattr/setattr/hasattr style field access for records.

Read, write, and describe the fields of dataclass instances and pydantic
models by name, with visibility and exact type checks.

    from attrkit import Ref, get_field, has_field, set_field

    user = User(Username="srathi", FirstName="Shyamsunder")
    has_field(user, "FirstName")                    # True
    set_field(Ref(user), "Username", "new-username")
    get_field(user, "Username")                     # "new-username"
"""

from __future__ import annotations

from ._version import get_version
from .accessor import (
    Accessor,
    AccessorConfig,
    annotations,
    default_accessor,
    describe,
    fields,
    get_annotation,
    get_field,
    get_kind,
    has_field,
    kinds,
    names,
    set_field,
    values,
)
from .descriptors import UNSET, FieldDescriptor, FieldKind, Visibility
from .errors import (
    AttrKitError,
    HiddenFieldError,
    NoSuchFieldError,
    NotAddressableError,
    NotARecordError,
    TypeMismatchError,
    UnsetFieldError,
)
from .handles import RecordHandle, Ref, ref
from .inspectors import DataclassInspector, PydanticInspector, TypeInspector

__version__ = get_version()

__all__ = [
    "__version__",
    # Accessor
    "Accessor",
    "AccessorConfig",
    "default_accessor",
    "get_field",
    "has_field",
    "set_field",
    "describe",
    "get_annotation",
    "get_kind",
    "fields",
    "names",
    "values",
    "annotations",
    "kinds",
    # References
    "Ref",
    "ref",
    "RecordHandle",
    # Descriptors
    "FieldDescriptor",
    "FieldKind",
    "Visibility",
    "UNSET",
    # Inspectors
    "TypeInspector",
    "DataclassInspector",
    "PydanticInspector",
    # Errors
    "AttrKitError",
    "NotARecordError",
    "NotAddressableError",
    "NoSuchFieldError",
    "HiddenFieldError",
    "TypeMismatchError",
    "UnsetFieldError",
]
