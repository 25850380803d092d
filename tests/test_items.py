import pytest

from purrmart.items import INITIAL_SIZE, Item, ItemList


def test_driver_example():
    items = ItemList()
    items.append(Item("joe", 7500))
    items.append(Item("leona", 99999))
    assert items[0].price == 7500
    assert items[1].name == "leona"
    assert items[1].price == 99999


def test_empty_list():
    items = ItemList()
    assert items.is_empty()
    assert len(items) == 0
    assert items.capacity() == INITIAL_SIZE


def test_capacity_grows_by_initial_size():
    items = ItemList(Item(str(n), n) for n in range(INITIAL_SIZE))
    items.append(Item("more", 1))
    assert items.capacity() == INITIAL_SIZE * 2
    assert len(items) == INITIAL_SIZE + 1


def test_insert_first_and_at():
    a, b, c = Item("a", 1), Item("b", 2), Item("c", 3)
    items = ItemList([b])
    items.insert_first(a)
    items.insert_at(2, c)
    assert list(items) == [a, b, c]


def test_delete_operations():
    a, b, c, d = (Item(n, 1) for n in "abcd")
    items = ItemList([a, b, c, d])
    assert items.delete_first() == a
    assert items.delete_last() == d
    assert items.delete_at(0) == b
    assert list(items) == [c]


def test_delete_empty_raises():
    with pytest.raises(IndexError):
        ItemList().delete_first()


def test_reverse():
    things = [Item("x", 1), Item("y", 2), Item("z", 3)]
    items = ItemList(things)
    items.reverse()
    assert list(items) == things[::-1]


def test_copy_is_independent():
    items = ItemList([Item("joe", 7500)])
    duplicate = items.copy()
    assert list(duplicate) == list(items)
    duplicate[0].price = 1
    assert items[0].price == 7500


def test_contains_and_index_of():
    items = ItemList([Item("joe", 7500), Item("leona", 99999)])
    assert items.contains("leona")
    assert not items.contains("Leona")
    assert items.index_of("leona") == 1
    assert items.index_of("missing") == len(items)