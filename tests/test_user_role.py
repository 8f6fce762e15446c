import sqlite3

import pytest

from appauth.database import NotFoundError
from appauth.schema import create_tables
from appauth.user import User, UserChangeset
from appauth.user_role import UserRole, UserRoleChangeset


@pytest.fixture
def db():
    connection = sqlite3.connect(":memory:")
    create_tables(connection)
    yield connection
    connection.close()


def _make_user(db, email):
    return User.create(db, UserChangeset(email, "password", True)).id


def test_create_returns_stored_row(db):
    uid = _make_user(db, "alice@example.com")
    created = UserRole.create(db, UserRoleChangeset(uid, "admin"))
    assert (created.user_id, created.role) == (uid, "admin")
    assert UserRole.read(db, uid, "admin") == created


def test_create_duplicate_raises(db):
    uid = _make_user(db, "alice@example.com")
    UserRole.create(db, UserRoleChangeset(uid, "admin"))
    with pytest.raises(sqlite3.IntegrityError):
        UserRole.create(db, UserRoleChangeset(uid, "admin"))


def test_read_missing_raises(db):
    uid = _make_user(db, "alice@example.com")
    with pytest.raises(NotFoundError):
        UserRole.read(db, uid, "admin")


def test_create_many_returns_count_and_rows(db):
    uid = _make_user(db, "alice@example.com")
    roles = ["admin", "editor", "viewer"]
    count = UserRole.create_many(db, [UserRoleChangeset(uid, r) for r in roles])
    assert count == len(roles)
    assert [ur.role for ur in UserRole.read_all(db, uid)] == roles


def test_create_many_empty(db):
    uid = _make_user(db, "alice@example.com")
    assert UserRole.create_many(db, []) == 0
    assert UserRole.read_all(db, uid) == []


def test_create_many_is_atomic(db):
    uid = _make_user(db, "alice@example.com")
    UserRole.create(db, UserRoleChangeset(uid, "admin"))
    with pytest.raises(sqlite3.IntegrityError):
        UserRole.create_many(
            db, [UserRoleChangeset(uid, "viewer"), UserRoleChangeset(uid, "admin")]
        )
    assert [ur.role for ur in UserRole.read_all(db, uid)] == ["admin"]


def test_read_all_filters_by_user(db):
    alice = _make_user(db, "alice@example.com")
    bob = _make_user(db, "bob@example.com")
    UserRole.create(db, UserRoleChangeset(alice, "admin"))
    UserRole.create(db, UserRoleChangeset(bob, "viewer"))
    rows = UserRole.read_all(db, bob)
    assert [(r.user_id, r.role) for r in rows] == [(bob, "viewer")]


def test_delete_removes_row(db):
    uid = _make_user(db, "alice@example.com")
    UserRole.create(db, UserRoleChangeset(uid, "admin"))
    assert UserRole.delete(db, uid, "admin") == 1
    with pytest.raises(NotFoundError):
        UserRole.read(db, uid, "admin")
    assert UserRole.delete(db, uid, "admin") == 0


def test_delete_many_removes_only_listed(db):
    alice = _make_user(db, "alice@example.com")
    bob = _make_user(db, "bob@example.com")
    roles = ["admin", "editor", "viewer"]
    UserRole.create_many(db, [UserRoleChangeset(alice, r) for r in roles])
    UserRole.create(db, UserRoleChangeset(bob, "admin"))
    assert UserRole.delete_many(db, alice, ["admin", "viewer"]) == 2
    assert [ur.role for ur in UserRole.read_all(db, alice)] == ["editor"]
    assert [ur.role for ur in UserRole.read_all(db, bob)] == ["admin"]
    assert UserRole.delete_many(db, alice, []) == 0