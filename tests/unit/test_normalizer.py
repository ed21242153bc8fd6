"""Tests for record normalization."""

from dataclasses import dataclass

import pytest

from attrkit import NotARecordError, Ref, ref
from attrkit.handles import RecordHandle
from attrkit.inspectors import DEFAULT_INSPECTORS, DataclassInspector, PydanticInspector
from attrkit.normalizer import normalize


@dataclass
class Empty:
    pass


class TestNormalize:
    """Test normalize() on records, references, and non-records."""

    def test_record_by_value_is_read_only(self, user) -> None:
        """A bare record yields a non-addressable handle to the same object."""
        handle = normalize(user, DEFAULT_INSPECTORS)
        assert isinstance(handle, RecordHandle)
        assert handle.record is user
        assert handle.record_type is type(user)
        assert not handle.by_reference
        assert not handle.addressable

    def test_reference_is_dereferenced_once(self, user) -> None:
        handle = normalize(Ref(user), DEFAULT_INSPECTORS)
        assert handle.record is user
        assert handle.by_reference
        assert handle.addressable

    def test_ref_helper_matches_constructor(self, user) -> None:
        assert normalize(ref(user), DEFAULT_INSPECTORS).record is user

    def test_frozen_record_through_reference_is_not_addressable(self, point) -> None:
        handle = normalize(Ref(point), DEFAULT_INSPECTORS)
        assert handle.by_reference
        assert handle.frozen
        assert not handle.addressable

    def test_pydantic_model_uses_pydantic_inspector(self, account) -> None:
        handle = normalize(account, DEFAULT_INSPECTORS)
        assert isinstance(handle.inspector, PydanticInspector)

    def test_dataclass_uses_dataclass_inspector(self, user) -> None:
        handle = normalize(user, DEFAULT_INSPECTORS)
        assert isinstance(handle.inspector, DataclassInspector)

    def test_record_without_fields_is_still_a_record(self) -> None:
        handle = normalize(Empty(), DEFAULT_INSPECTORS)
        assert handle.record_type is Empty

    @pytest.mark.parametrize(
        "value",
        [42, "text", 1.5, None, [1, 2], {"a": 1}, (1,), len, lambda: None],
    )
    def test_non_records_are_rejected(self, value) -> None:
        with pytest.raises(NotARecordError):
            normalize(value, DEFAULT_INSPECTORS)

    @pytest.mark.parametrize("value", [42, [1], {"a": 1}])
    def test_reference_to_non_record_is_rejected(self, value) -> None:
        with pytest.raises(NotARecordError):
            normalize(Ref(value), DEFAULT_INSPECTORS)

    def test_reference_chain_is_not_followed(self, user) -> None:
        """Only one level of indirection is allowed."""
        with pytest.raises(NotARecordError):
            normalize(Ref(Ref(user)), DEFAULT_INSPECTORS)

    def test_record_class_is_not_a_record(self, user) -> None:
        with pytest.raises(NotARecordError):
            normalize(type(user), DEFAULT_INSPECTORS)

    def test_restricted_inspectors(self, account) -> None:
        """Only the configured inspectors are consulted."""
        with pytest.raises(NotARecordError):
            normalize(account, (DataclassInspector(),))

    def test_not_a_record_is_a_type_error(self) -> None:
        with pytest.raises(TypeError, match="not a record"):
            normalize(3, DEFAULT_INSPECTORS)
