"""Permissions granted to roles, stored in the ``role_permissions`` table."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .database import NotFoundError

_COLUMNS = "role, permission, created_at"


def _parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class RolePermission:
    """A row of the ``role_permissions`` table."""

    role: str
    permission: str
    created_at: datetime

    @classmethod
    def _from_row(cls, row) -> RolePermission:
        return cls(
            role=row[0],
            permission=row[1],
            created_at=_parse_timestamp(row[2]),
        )

    @staticmethod
    def create(db: sqlite3.Connection, item: RolePermissionChangeset) -> RolePermission:
        """Insert the grant described by ``item`` and return the stored row."""
        with db:
            db.execute(
                "INSERT INTO role_permissions (role, permission) VALUES (?, ?)",
                (item.role, item.permission),
            )
        return RolePermission.read(db, item.role, item.permission)

    @staticmethod
    def create_many(
        db: sqlite3.Connection, items: Iterable[RolePermissionChangeset]
    ) -> int:
        """Insert every grant in ``items`` at once; return the number of rows added."""
        items = list(items)
        if not items:
            return 0
        placeholders = ", ".join("(?, ?)" for _ in items)
        params = [value for item in items for value in (item.role, item.permission)]
        with db:
            cursor = db.execute(
                f"INSERT INTO role_permissions (role, permission) VALUES {placeholders}",
                params,
            )
        return cursor.rowcount

    @staticmethod
    def read(
        db: sqlite3.Connection, item_role: str, item_permission: str
    ) -> RolePermission:
        """Return the grant of ``item_permission`` to ``item_role``."""
        row = db.execute(
            f"SELECT {_COLUMNS} FROM role_permissions "
            "WHERE role = ? AND permission = ? LIMIT 1",
            (item_role, item_permission),
        ).fetchone()
        if row is None:
            raise NotFoundError(
                f"role {item_role!r} has no permission {item_permission!r}"
            )
        return RolePermission._from_row(row)

    @staticmethod
    def read_all(db: sqlite3.Connection, item_role: str) -> list[RolePermission]:
        """Return every grant to ``item_role``, oldest first."""
        rows = db.execute(
            f"SELECT {_COLUMNS} FROM role_permissions WHERE role = ? "
            "ORDER BY created_at, rowid",
            (item_role,),
        ).fetchall()
        return [RolePermission._from_row(row) for row in rows]

    @staticmethod
    def delete(db: sqlite3.Connection, item_role: str, item_permission: str) -> int:
        """Revoke ``item_permission`` from ``item_role``; return the rows removed."""
        with db:
            cursor = db.execute(
                "DELETE FROM role_permissions WHERE role = ? AND permission = ?",
                (item_role, item_permission),
            )
        return cursor.rowcount

    @staticmethod
    def delete_many(
        db: sqlite3.Connection, item_role: str, item_permissions: Iterable[str]
    ) -> int:
        """Revoke each of ``item_permissions`` from ``item_role``; return the rows removed."""
        item_permissions = list(item_permissions)
        if not item_permissions:
            return 0
        placeholders = ", ".join("?" for _ in item_permissions)
        with db:
            cursor = db.execute(
                "DELETE FROM role_permissions "
                f"WHERE role = ? AND permission IN ({placeholders})",
                [item_role, *item_permissions],
            )
        return cursor.rowcount

    @staticmethod
    def delete_all(db: sqlite3.Connection, item_role: str) -> int:
        """Revoke every permission from ``item_role``; return the rows removed."""
        with db:
            cursor = db.execute(
                "DELETE FROM role_permissions WHERE role = ?", (item_role,)
            )
        return cursor.rowcount


@dataclass
class RolePermissionChangeset:
    """The mutable columns of a role permission."""

    role: str
    permission: str