"""Tests for CardFieldCollection: uniqueness, ownership, lookup, order."""

import pytest

from tangle.domain.collection import CardFieldCollection
from tangle.domain.errors import DuplicateNameError, FieldOwnershipError
from tangle.domain.fields import NumberCardField, TextCardField


@pytest.fixture
def fields() -> CardFieldCollection:
    return CardFieldCollection()


class TestAdd:
    def test_distinct_names(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("a"))
        fields.add(NumberCardField("b"))
        assert fields.count == 2
        assert len(fields) == 2

    def test_duplicate_name_rejected(self, fields: CardFieldCollection) -> None:
        first = TextCardField("a", "first")
        fields.add(first)
        with pytest.raises(DuplicateNameError) as exc_info:
            fields.add(NumberCardField("a"))
        assert exc_info.value.name == "a"
        assert fields.count == 1
        assert fields.get("a") is first

    def test_duplicate_leaves_rejected_field_unowned(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("a"))
        other = TextCardField("a")
        with pytest.raises(DuplicateNameError):
            fields.add(other)
        other.name = "b"
        fields.add(other)
        assert fields.count == 2

    def test_names_are_case_sensitive(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("Title"))
        fields.add(TextCardField("title"))
        assert fields.count == 2

    def test_field_owned_elsewhere_rejected(self, fields: CardFieldCollection) -> None:
        field = TextCardField("a")
        fields.add(field)
        other = CardFieldCollection()
        with pytest.raises(FieldOwnershipError):
            other.add(field)
        assert other.count == 0

    def test_same_field_twice_rejected(self, fields: CardFieldCollection) -> None:
        field = TextCardField("a")
        fields.add(field)
        with pytest.raises(FieldOwnershipError):
            fields.add(field)
        assert fields.count == 1


class TestRemove:
    def test_by_name(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("a"))
        assert fields.remove("a") is True
        assert fields.count == 0

    def test_by_instance(self, fields: CardFieldCollection) -> None:
        field = TextCardField("a")
        fields.add(field)
        assert fields.remove(field) is True
        assert not fields.contains("a")

    def test_missing_name_is_noop(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("a"))
        assert fields.remove("zzz") is False
        assert fields.count == 1

    def test_remove_twice(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("a"))
        assert fields.remove("a") is True
        assert fields.remove("a") is False

    def test_removed_field_can_join_another_collection(self, fields: CardFieldCollection) -> None:
        field = TextCardField("a")
        fields.add(field)
        fields.remove("a")
        other = CardFieldCollection()
        other.add(field)
        assert other.get("a") is field


class TestClear:
    def test_clear(self, fields: CardFieldCollection) -> None:
        a, b = TextCardField("a"), TextCardField("b")
        fields.add(a)
        fields.add(b)
        fields.clear()
        assert fields.count == 0
        assert list(fields) == []
        a.name = "renamed"
        assert a.name == "renamed"

    def test_clear_empty(self, fields: CardFieldCollection) -> None:
        fields.clear()
        assert fields.count == 0


class TestContains:
    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_is_never_present(self, fields: CardFieldCollection, blank: str | None) -> None:
        fields.add(TextCardField(""))
        assert fields.contains(blank) is False

    def test_by_name_and_instance(self, fields: CardFieldCollection) -> None:
        field = TextCardField("a")
        fields.add(field)
        assert fields.contains("a")
        assert fields.contains(field)
        assert field in fields
        assert "a" in fields
        assert "b" not in fields

    def test_unrelated_object(self, fields: CardFieldCollection) -> None:
        assert 42 not in fields


class TestGet:
    def test_present(self, fields: CardFieldCollection) -> None:
        field = NumberCardField("n", 1.0)
        fields.add(field)
        assert fields.get("n") is field

    def test_missing_returns_none(self, fields: CardFieldCollection) -> None:
        assert fields.get("missing") is None
        assert fields.get(None) is None


class TestIteration:
    def test_each_field_once_in_insertion_order(self, fields: CardFieldCollection) -> None:
        names = ["c", "a", "b"]
        for name in names:
            fields.add(TextCardField(name))
        assert [f.name for f in fields] == names

    def test_stable_across_iterations(self, fields: CardFieldCollection) -> None:
        for name in ("x", "y", "z"):
            fields.add(TextCardField(name))
        assert list(fields) == list(fields)

    def test_to_list_is_snapshot(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("a"))
        snapshot = fields.to_list()
        fields.add(TextCardField("b"))
        assert [f.name for f in snapshot] == ["a"]

    def test_copy_to(self, fields: CardFieldCollection) -> None:
        a, b = TextCardField("a"), TextCardField("b")
        fields.add(a)
        fields.add(b)
        target: list = [None, None, None]
        fields.copy_to(target, 1)
        assert target == [None, a, b]

    def test_copy_to_too_short(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("a"))
        fields.add(TextCardField("b"))
        with pytest.raises(ValueError, match="room"):
            fields.copy_to([None, None], 1)

    def test_copy_to_negative_index(self, fields: CardFieldCollection) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            fields.copy_to([None], -1)


class TestRename:
    def test_rekeys(self, fields: CardFieldCollection) -> None:
        field = TextCardField("old", "v")
        fields.add(field)
        assert fields.rename("old", "new") is field
        assert field.name == "new"
        assert fields.get("new") is field
        assert fields.get("old") is None

    def test_keeps_position(self, fields: CardFieldCollection) -> None:
        for name in ("a", "b", "c"):
            fields.add(TextCardField(name))
        fields.rename("b", "B")
        assert [f.name for f in fields] == ["a", "B", "c"]

    def test_collision_leaves_collection_unchanged(self, fields: CardFieldCollection) -> None:
        fields.add(TextCardField("a"))
        fields.add(TextCardField("b"))
        with pytest.raises(DuplicateNameError):
            fields.rename("a", "b")
        assert [f.name for f in fields] == ["a", "b"]

    def test_missing_source(self, fields: CardFieldCollection) -> None:
        with pytest.raises(KeyError):
            fields.rename("nope", "x")

    def test_same_name_is_noop(self, fields: CardFieldCollection) -> None:
        field = TextCardField("a")
        fields.add(field)
        assert fields.rename("a", "a") is field
        assert fields.count == 1
