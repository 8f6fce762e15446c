"""Roles assigned to users, stored in the ``user_roles`` table."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .database import NotFoundError

_COLUMNS = "user_id, role, created_at"


def _parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class UserRole:
    """A row of the ``user_roles`` table."""

    user_id: int
    role: str
    created_at: datetime

    @classmethod
    def _from_row(cls, row) -> UserRole:
        return cls(
            user_id=row[0],
            role=row[1],
            created_at=_parse_timestamp(row[2]),
        )

    @staticmethod
    def create(db: sqlite3.Connection, item: UserRoleChangeset) -> UserRole:
        """Insert the assignment described by ``item`` and return the stored row."""
        with db:
            db.execute(
                "INSERT INTO user_roles (user_id, role) VALUES (?, ?)",
                (item.user_id, item.role),
            )
        return UserRole.read(db, item.user_id, item.role)

    @staticmethod
    def create_many(db: sqlite3.Connection, items: Iterable[UserRoleChangeset]) -> int:
        """Insert every assignment in ``items`` at once; return the number of rows added."""
        items = list(items)
        if not items:
            return 0
        placeholders = ", ".join("(?, ?)" for _ in items)
        params = [value for item in items for value in (item.user_id, item.role)]
        with db:
            cursor = db.execute(
                f"INSERT INTO user_roles (user_id, role) VALUES {placeholders}",
                params,
            )
        return cursor.rowcount

    @staticmethod
    def read(db: sqlite3.Connection, item_user_id: int, item_role: str) -> UserRole:
        """Return the assignment of ``item_role`` to user ``item_user_id``."""
        row = db.execute(
            f"SELECT {_COLUMNS} FROM user_roles WHERE user_id = ? AND role = ? LIMIT 1",
            (item_user_id, item_role),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"user {item_user_id} has no role {item_role!r}")
        return UserRole._from_row(row)

    @staticmethod
    def read_all(db: sqlite3.Connection, item_user_id: int) -> list[UserRole]:
        """Return every role of user ``item_user_id``, oldest first."""
        rows = db.execute(
            f"SELECT {_COLUMNS} FROM user_roles WHERE user_id = ? "
            "ORDER BY created_at, rowid",
            (item_user_id,),
        ).fetchall()
        return [UserRole._from_row(row) for row in rows]

    @staticmethod
    def delete(db: sqlite3.Connection, item_user_id: int, item_role: str) -> int:
        """Unassign ``item_role`` from user ``item_user_id``; return the rows removed."""
        with db:
            cursor = db.execute(
                "DELETE FROM user_roles WHERE user_id = ? AND role = ?",
                (item_user_id, item_role),
            )
        return cursor.rowcount

    @staticmethod
    def delete_many(
        db: sqlite3.Connection, item_user_id: int, item_roles: Iterable[str]
    ) -> int:
        """Unassign each of ``item_roles`` from user ``item_user_id``; return the rows removed."""
        item_roles = list(item_roles)
        if not item_roles:
            return 0
        placeholders = ", ".join("?" for _ in item_roles)
        with db:
            cursor = db.execute(
                f"DELETE FROM user_roles WHERE user_id = ? AND role IN ({placeholders})",
                [item_user_id, *item_roles],
            )
        return cursor.rowcount


@dataclass
class UserRoleChangeset:
    """The mutable columns of a user role."""

    user_id: int
    role: str