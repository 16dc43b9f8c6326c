import pytest

from bookpress.tomlpath import delete, insert, read


def test_read_simple_table():
    value = {"table": {}}
    assert read(value, "table") == {}


def test_read_nested_item():
    value = {"table": {"nested": True}}
    assert read(value, "table.nested") is True


def test_read_missing_returns_none():
    value = {"table": {"nested": True}}
    assert read(value, "table.other") is None
    assert read(value, "missing.key") is None
    assert read(value, "table.nested.deeper") is None


def test_insert_item_at_top_level():
    value = {}
    insert(value, "first", True)
    assert value["first"] is True


def test_insert_nested_item():
    value = {}
    insert(value, "first.second", True)
    assert read(value, "first.second") is True
    assert value == {"first": {"second": True}}


def test_insert_replaces_non_table():
    value = {"first": 3}
    insert(value, "first.second", "x")
    assert value == {"first": {"second": "x"}}


def test_insert_into_non_table_raises():
    with pytest.raises(TypeError):
        insert(5, "a", 1)


def test_delete_a_top_level_item():
    value = {"top": True}
    assert delete(value, "top") is True
    assert value == {}


def test_delete_a_nested_item():
    value = {"table": {"nested": True}}
    assert delete(value, "table.nested") is True
    assert value == {"table": {}}


def test_delete_missing_returns_none():
    value = {"table": {"nested": True}}
    assert delete(value, "table.other") is None
    assert delete(value, "nope.nested") is None
    assert value == {"table": {"nested": True}}