import pytest

from bookstore.errors import DuplicateUser, MissingField
from bookstore.storage import REGISTERED_MESSAGE, UserStore


def test_register_new_user(users):
    assert users.register("alice", "secret") == REGISTERED_MESSAGE
    assert users.exists("alice")
    assert users.list_users()[0].password == "secret"


def test_register_same_username_twice(users):
    users.register("alice", "secret")
    with pytest.raises(DuplicateUser, match="user already exists."):
        users.register("alice", "other")
    assert len(users.list_users()) == 1


@pytest.mark.parametrize("username,password", [("", "pw"), ("bob", ""), (None, "pw"), ("bob", None)])
def test_register_missing_field(users, username, password):
    with pytest.raises(MissingField, match="Missing username or password"):
        users.register(username, password)
    assert users.list_users() == []


def test_stores_are_independent():
    first, second = UserStore(), UserStore()
    first.register("alice", "secret")
    assert not second.exists("alice")


def test_register_coerces_values_to_strings(users):
    users.register(7, 8)
    assert users.exists("7")
    with pytest.raises(DuplicateUser):
        users.register("7", "x")
