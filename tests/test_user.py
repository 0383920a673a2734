import pytest

from coursenet.user import User


def test_fields_are_kept():
    u = User(3, "Jason Chen", 2000, 94087, set())
    assert u.id == 3
    assert u.name == "Jason Chen"
    assert u.year == 2000
    assert u.zip_code == 94087


def test_initial_friends():
    u = User(3, "Jason Chen", 2000, 94087, {0, 1, 2})
    assert len(u.friends) == 3


def test_default_user_is_empty():
    u = User()
    assert u.name == ""
    assert u.friends == set()


def test_default_friend_sets_are_not_shared():
    a = User()
    b = User()
    a.add_friend(1)
    assert b.friends == set()


def test_add_duplicate_friend():
    u = User(3, "Jason Chen", 2000, 94087, set())
    u.add_friend(2)
    assert len(u.friends) == 1
    u.add_friend(2)
    assert len(u.friends) == 1


def test_add_friend():
    u = User(1, "Jason Chen", 2000, 94087, set())
    u.add_friend(2)
    assert len(u.friends) == 1
    u.add_friend(3)
    assert len(u.friends) == 2
    f = set(u.friends)
    assert 2 in f
    assert 3 in f
    assert 0 not in f
    assert 1 not in f


def test_delete_friend():
    u = User(3, "Jason Chen", 2000, 94087, {0, 1, 2})
    assert len(u.friends) == 3
    u.delete_friend(0)
    assert len(u.friends) == 2
    u.delete_friend(0)
    assert len(u.friends) == 2
    u.delete_friend(1)
    assert len(u.friends) == 1
    u.delete_friend(2)
    assert len(u.friends) == 0
    u.delete_friend(2)
    assert len(u.friends) == 0


def test_friends_is_a_live_reference():
    u = User(3, "Jason Chen", 2000, 94087, {0, 1, 2})
    friends = u.friends
    friends.add(4)
    assert len(u.friends) == 4


@pytest.mark.parametrize("friend_id", [0, 5, 100])
def test_add_then_delete_restores(friend_id):
    u = User(7, "Issac Boone", 1999, 94305, {1, 2})
    u.add_friend(friend_id)
    u.delete_friend(friend_id)
    assert u.friends == {1, 2} - {friend_id} | ({friend_id} & {1, 2}) - {friend_id}