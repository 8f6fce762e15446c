"""Permissions granted directly to users, stored in the ``user_permissions`` table."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .database import NotFoundError

_COLUMNS = "user_id, permission, created_at"


def _parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class UserPermission:
    """A row of the ``user_permissions`` table."""

    user_id: int
    permission: str
    created_at: datetime

    @classmethod
    def _from_row(cls, row) -> UserPermission:
        return cls(
            user_id=row[0],
            permission=row[1],
            created_at=_parse_timestamp(row[2]),
        )

    @staticmethod
    def create(db: sqlite3.Connection, item: UserPermissionChangeset) -> UserPermission:
        """Insert the grant described by ``item`` and return the stored row."""
        with db:
            db.execute(
                "INSERT INTO user_permissions (user_id, permission) VALUES (?, ?)",
                (item.user_id, item.permission),
            )
        return UserPermission.read(db, item.user_id, item.permission)

    @staticmethod
    def create_many(
        db: sqlite3.Connection, items: Iterable[UserPermissionChangeset]
    ) -> int:
        """Insert every grant in ``items`` at once; return the number of rows added."""
        items = list(items)
        if not items:
            return 0
        placeholders = ", ".join("(?, ?)" for _ in items)
        params = [value for item in items for value in (item.user_id, item.permission)]
        with db:
            cursor = db.execute(
                "INSERT INTO user_permissions (user_id, permission) "
                f"VALUES {placeholders}",
                params,
            )
        return cursor.rowcount

    @staticmethod
    def read(
        db: sqlite3.Connection, item_user_id: int, item_permission: str
    ) -> UserPermission:
        """Return the grant of ``item_permission`` to user ``item_user_id``."""
        row = db.execute(
            f"SELECT {_COLUMNS} FROM user_permissions "
            "WHERE user_id = ? AND permission = ? LIMIT 1",
            (item_user_id, item_permission),
        ).fetchone()
        if row is None:
            raise NotFoundError(
                f"user {item_user_id} has no permission {item_permission!r}"
            )
        return UserPermission._from_row(row)

    @staticmethod
    def read_all(db: sqlite3.Connection, item_user_id: int) -> list[UserPermission]:
        """Return every grant to user ``item_user_id``, oldest first."""
        rows = db.execute(
            f"SELECT {_COLUMNS} FROM user_permissions WHERE user_id = ? "
            "ORDER BY created_at, rowid",
            (item_user_id,),
        ).fetchall()
        return [UserPermission._from_row(row) for row in rows]

    @staticmethod
    def delete(db: sqlite3.Connection, item_user_id: int, item_permission: str) -> int:
        """Revoke ``item_permission`` from user ``item_user_id``; return the rows removed."""
        with db:
            cursor = db.execute(
                "DELETE FROM user_permissions WHERE user_id = ? AND permission = ?",
                (item_user_id, item_permission),
            )
        return cursor.rowcount

    @staticmethod
    def delete_many(
        db: sqlite3.Connection, item_user_id: int, item_permissions: Iterable[str]
    ) -> int:
        """Revoke each of ``item_permissions`` from user ``item_user_id``; return the rows removed."""
        item_permissions = list(item_permissions)
        if not item_permissions:
            return 0
        placeholders = ", ".join("?" for _ in item_permissions)
        with db:
            cursor = db.execute(
                "DELETE FROM user_permissions "
                f"WHERE user_id = ? AND permission IN ({placeholders})",
                [item_user_id, *item_permissions],
            )
        return cursor.rowcount

    @staticmethod
    def delete_all(db: sqlite3.Connection, item_user_id: int) -> int:
        """Revoke every permission from user ``item_user_id``; return the rows removed."""
        with db:
            cursor = db.execute(
                "DELETE FROM user_permissions WHERE user_id = ?", (item_user_id,)
            )
        return cursor.rowcount


@dataclass
class UserPermissionChangeset:
    """The mutable columns of a user permission."""

    user_id: int
    permission: str