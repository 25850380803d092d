import pytest

from purrmart.users import MAX_USERS, User, UserList, UserListError

password = "password"


def _ano():
    return User("ano", password=password, money=5000)


def _wisa():
    return User("wisa", password=password, money=3000)


def test_driver_set_two_users():
    users = UserList()
    users[0] = _ano()
    users[1] = _wisa()
    assert len(users) == 2
    assert [user.money for user in users] == [5000, 3000]
    assert [user.name for user in users] == ["ano", "wisa"]
    assert users[1].password == password


def test_new_user_has_empty_history_and_wishlist():
    user = _ano()
    assert user.history.is_empty()
    assert user.wishlist.is_empty()


def test_users_do_not_share_history():
    first, second = _ano(), _wisa()
    first.history.push("item")
    assert len(first.history) == 1
    assert len(second.history) == 0


def test_empty_list():
    users = UserList()
    assert users.is_empty()
    assert not users.is_full()
    assert len(users) == 0


def test_max_size():
    assert UserList().max_size() == MAX_USERS


def test_append_until_full():
    users = UserList(User(str(n), password=password) for n in range(MAX_USERS))
    assert users.is_full()
    with pytest.raises(UserListError):
        users.append(_ano())
    assert len(users) == MAX_USERS


def test_pop_last_returns_last_user():
    users = UserList([_ano(), _wisa()])
    assert users.pop_last().name == "wisa"
    assert len(users) == 1
    assert users[0].name == "ano"


def test_pop_last_empty_raises():
    with pytest.raises(UserListError):
        UserList().pop_last()


def test_setitem_replaces_existing():
    users = UserList([_ano()])
    users[0] = _wisa()
    assert len(users) == 1
    assert users[0].name == "wisa"


def test_setitem_beyond_end_raises():
    users = UserList()
    with pytest.raises(IndexError):
        users[1] = _ano()
    assert users.is_empty()


def test_getitem_out_of_range():
    users = UserList([_ano()])
    with pytest.raises(IndexError):
        users[1]
    with pytest.raises(IndexError):
        users[-1]
    assert users[0].name == "ano"
    assert len(users) == 1


def test_valid_index_bounds():
    users = UserList()
    assert users.is_valid_index(0)
    assert users.is_valid_index(MAX_USERS - 1)
    assert not users.is_valid_index(MAX_USERS)
    assert not users.is_valid_index(-1)