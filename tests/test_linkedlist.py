import pytest

from purrmart.linkedlist import LinkedList


def test_new_list_is_empty():
    items = LinkedList()
    assert items.is_empty()
    assert len(items) == 0
    assert items.render() == ""


def test_insert_and_delete_scenario():
    items = LinkedList()
    items.insert_last("Test")
    items.insert_first("Test3")
    assert not items.is_empty()
    assert list(items) == ["Test3", "Test"]

    items.insert_first("Test2")
    assert list(items) == ["Test2", "Test3", "Test"]

    assert items.delete_first() == "Test2"
    assert list(items) == ["Test3", "Test"]

    assert items.delete_last() == "Test"
    assert list(items) == ["Test3"]

    assert items.delete_last() == "Test3"
    assert items.is_empty()


def test_search_remove_and_index_scenario():
    items = LinkedList()
    for value in ["Test", "Test2", "Test3", "Test4", "Test5", "Test6"]:
        items.insert_last(value)

    assert "Test4" in items
    assert items.remove("Test4") is True
    assert list(items) == ["Test", "Test2", "Test3", "Test5", "Test6"]

    found = items.at(2)
    assert found == "Test3"
    items.remove(found)
    assert list(items) == ["Test", "Test2", "Test5", "Test6"]


def test_remove_missing_leaves_list_unchanged():
    items = LinkedList(["a", "b"])
    assert items.remove("zzz") is False
    assert list(items) == ["a", "b"]


def test_remove_only_first_occurrence():
    items = LinkedList(["a", "b", "a"])
    items.remove("a")
    assert list(items) == ["b", "a"]


def test_at_past_end_is_none():
    items = LinkedList(["a"])
    assert items.at(1) is None
    with pytest.raises(IndexError):
        items.at(-1)


def test_delete_from_empty_raises():
    items = LinkedList()
    with pytest.raises(IndexError):
        items.delete_first()
    with pytest.raises(IndexError):
        items.delete_last()


def test_render_numbers_lines():
    items = LinkedList(["apel", "jeruk"])
    assert items.render() == "1 apel\n2 jeruk\n"


def test_length_counts_values():
    items = LinkedList(["x", "y", "z"])
    assert len(items) == 3
    assert "w" not in items