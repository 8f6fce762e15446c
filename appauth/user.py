"""Accounts stored in the ``users`` table."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime

from .database import NotFoundError
from .payloads import PaginationParams

_COLUMNS = "id, email, hash_password, activated, created_at"


def _parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class User:
    """A row of the ``users`` table."""

    id: int
    email: str
    hash_password: str
    activated: bool
    created_at: datetime

    @classmethod
    def _from_row(cls, row) -> User:
        return cls(
            id=row[0],
            email=row[1],
            hash_password=row[2],
            activated=bool(row[3]),
            created_at=_parse_timestamp(row[4]),
        )

    @staticmethod
    def create(db: sqlite3.Connection, item: UserChangeset) -> User:
        """Insert a user built from ``item`` and return the stored row."""
        with db:
            cursor = db.execute(
                "INSERT INTO users (email, hash_password, activated) VALUES (?, ?, ?)",
                (item.email, item.hash_password, item.activated),
            )
        return User.read(db, cursor.lastrowid)

    @staticmethod
    def read(db: sqlite3.Connection, item_id: int) -> User:
        """Return the user with primary key ``item_id``."""
        row = db.execute(
            f"SELECT {_COLUMNS} FROM users WHERE id = ? LIMIT 1", (item_id,)
        ).fetchone()
        if row is None:
            raise NotFoundError(f"no user with id {item_id}")
        return User._from_row(row)

    @staticmethod
    def find_by_email(db: sqlite3.Connection, item_email: str) -> User:
        """Return the first user whose email is ``item_email``."""
        row = db.execute(
            f"SELECT {_COLUMNS} FROM users WHERE email = ? LIMIT 1", (item_email,)
        ).fetchone()
        if row is None:
            raise NotFoundError(f"no user with email {item_email!r}")
        return User._from_row(row)

    @staticmethod
    def read_all(db: sqlite3.Connection, pagination: PaginationParams) -> list[User]:
        """Return one page of users, oldest first."""
        offset = pagination.page * max(
            pagination.page_size, PaginationParams.MAX_PAGE_SIZE
        )
        rows = db.execute(
            f"SELECT {_COLUMNS} FROM users ORDER BY created_at, id LIMIT ? OFFSET ?",
            (pagination.page_size, offset),
        ).fetchall()
        return [User._from_row(row) for row in rows]

    @staticmethod
    def update(db: sqlite3.Connection, item_id: int, item: UserChangeset) -> User:
        """Overwrite the mutable columns of user ``item_id`` and return the result."""
        with db:
            cursor = db.execute(
                "UPDATE users SET email = ?, hash_password = ?, activated = ? WHERE id = ?",
                (item.email, item.hash_password, item.activated, item_id),
            )
        if cursor.rowcount == 0:
            raise NotFoundError(f"no user with id {item_id}")
        return User.read(db, item_id)

    @staticmethod
    def delete(db: sqlite3.Connection, item_id: int) -> int:
        """Delete user ``item_id``; return the number of rows removed."""
        with db:
            cursor = db.execute("DELETE FROM users WHERE id = ?", (item_id,))
        return cursor.rowcount


@dataclass
class UserChangeset:
    """The mutable columns of a user."""

    email: str
    hash_password: str
    activated: bool