import pytest

from purrmart.cartset import MAX_SET_SIZE, WordSet


def test_driver_example_keeps_insertion_order():
    cart = WordSet()
    for word in ["AK47", "Pisang", "Mobil"]:
        cart.add(word)
    assert list(cart) == ["AK47", "Pisang", "Mobil"]


def test_new_set_is_empty():
    cart = WordSet()
    assert cart.is_empty()
    assert not cart.is_full()
    assert len(cart) == 0


def test_duplicates_are_ignored():
    cart = WordSet(["Pisang", "Pisang", "Mobil"])
    assert len(cart) == 2
    assert "Pisang" in cart


def test_membership_is_case_sensitive():
    cart = WordSet(["Pisang"])
    assert "pisang" not in cart


def test_discard_member_and_non_member():
    cart = WordSet(["AK47", "Pisang", "Mobil"])
    cart.discard("Pisang")
    assert list(cart) == ["AK47", "Mobil"]
    cart.discard("Kereta")
    assert list(cart) == ["AK47", "Mobil"]


def test_full_set_rejects_new_word():
    cart = WordSet(str(n) for n in range(MAX_SET_SIZE))
    assert cart.is_full()
    cart.add("0")
    assert len(cart) == MAX_SET_SIZE
    with pytest.raises(ValueError):
        cart.add("overflow")