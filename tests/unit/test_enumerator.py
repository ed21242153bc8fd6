"""Tests for whole-record sweeps."""

from dataclasses import dataclass, field

import pytest

from attrkit import (
    FieldKind,
    NotARecordError,
    UNSET,
    Ref,
    annotations,
    fields,
    kinds,
    names,
    set_field,
    values,
)


@dataclass
class Base:
    id: int = 0
    _internal: str = ""


@dataclass
class Child(Base):
    title: str = ""
    rank: float = field(default=0.0, metadata={"json": "rank", "weight": 2})


@dataclass
class OnlyHidden:
    _a: int = 0
    _b: int = 0


@dataclass
class Lazy:
    a: int = 1
    b: int = field(init=False)


class TestNames:
    """Test names()."""

    def test_declaration_order_without_hidden(self, user) -> None:
        assert names(user) == ["Username", "Age"]

    def test_same_through_reference(self, user) -> None:
        assert names(Ref(user)) == names(user)

    def test_inherited_fields_come_first(self) -> None:
        assert names(Child()) == ["id", "title", "rank"]

    def test_only_hidden_fields(self) -> None:
        assert names(OnlyHidden()) == []

    def test_pydantic_model(self, account) -> None:
        assert names(account) == ["owner", "balance", "tags"]


class TestValues:
    """Test values()."""

    def test_current_values(self, user) -> None:
        assert values(user) == {"Username": "srathi", "Age": 30}

    def test_length_matches_names(self, account) -> None:
        assert len(values(account)) == len(names(account))

    def test_is_a_snapshot(self, user) -> None:
        snapshot = values(user)
        set_field(Ref(user), "Age", 40)
        assert snapshot["Age"] == 30
        assert values(user)["Age"] == 40

    def test_preserves_order(self, user) -> None:
        assert list(values(user)) == names(user)

    def test_only_hidden_fields(self) -> None:
        assert values(OnlyHidden()) == {}

    def test_unassigned_field_maps_to_unset(self) -> None:
        snapshot = values(Lazy())
        assert snapshot == {"a": 1, "b": UNSET}
        assert snapshot["b"] is UNSET
        assert len(snapshot) == len(names(Lazy()))

    def test_assigned_later(self) -> None:
        lazy = Lazy()
        set_field(Ref(lazy), "b", 5)
        assert values(lazy) == {"a": 1, "b": 5}


class TestAnnotations:
    """Test annotations()."""

    def test_missing_annotations_map_to_empty_string(self, user) -> None:
        assert annotations(user, "json") == {"Username": "username", "Age": ""}

    def test_other_key(self, user) -> None:
        assert annotations(user, "meta") == {"Username": "", "Age": "important"}

    def test_unknown_key_includes_every_visible_field(self, user) -> None:
        assert annotations(user, "xml") == {"Username": "", "Age": ""}

    def test_non_string_metadata_is_rendered(self) -> None:
        assert annotations(Child(), "weight") == {"id": "", "title": "", "rank": "2"}

    def test_pydantic_json_schema_extra(self, account) -> None:
        assert annotations(account, "json") == {"owner": "owner_name", "balance": "", "tags": ""}


class TestKinds:
    """Test kinds() and fields()."""

    def test_user_kinds(self, user) -> None:
        assert kinds(user) == {"Username": FieldKind.STRING, "Age": FieldKind.INTEGER}

    def test_pydantic_kinds(self, account) -> None:
        assert kinds(account) == {
            "owner": "string",
            "balance": "float",
            "tags": "sequence",
        }

    def test_fields_are_visible_and_ordered(self) -> None:
        descriptors = fields(Child())
        assert [d.name for d in descriptors] == ["id", "title", "rank"]
        assert all(d.is_visible for d in descriptors)
        assert [d.position for d in descriptors] == [0, 2, 3]


class TestNormalizationFailure:
    """All sweeps fail only when normalization fails."""

    @pytest.mark.parametrize("sweep", [names, values, kinds, fields])
    def test_sweeps_reject_non_records(self, sweep) -> None:
        with pytest.raises(NotARecordError):
            sweep(42)

    def test_annotations_reject_non_records(self) -> None:
        with pytest.raises(NotARecordError):
            annotations(Ref(Ref(Child())), "json")
