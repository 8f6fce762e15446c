"""Login sessions stored in the ``user_sessions`` table."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime

from .database import NotFoundError
from .payloads import PaginationParams

_COLUMNS = "id, user_id, refresh_token, device, created_at"


def _parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class UserSession:
    """A row of the ``user_sessions`` table."""

    id: int
    user_id: int
    refresh_token: str
    device: str | None
    created_at: datetime

    @classmethod
    def _from_row(cls, row) -> UserSession:
        return cls(
            id=row[0],
            user_id=row[1],
            refresh_token=row[2],
            device=row[3],
            created_at=_parse_timestamp(row[4]),
        )

    @staticmethod
    def create(db: sqlite3.Connection, item: UserSessionChangeset) -> UserSession:
        """Insert a session built from ``item`` and return the stored row."""
        with db:
            cursor = db.execute(
                "INSERT INTO user_sessions (user_id, refresh_token, device) VALUES (?, ?, ?)",
                (item.user_id, item.refresh_token, item.device),
            )
        return UserSession.read(db, cursor.lastrowid)

    @staticmethod
    def read(db: sqlite3.Connection, item_id: int) -> UserSession:
        """Return the session with primary key ``item_id``."""
        row = db.execute(
            f"SELECT {_COLUMNS} FROM user_sessions WHERE id = ? LIMIT 1", (item_id,)
        ).fetchone()
        if row is None:
            raise NotFoundError(f"no user session with id {item_id}")
        return UserSession._from_row(row)

    @staticmethod
    def find_by_refresh_token(
        db: sqlite3.Connection, item_refresh_token: str
    ) -> UserSession:
        """Return the first session holding ``item_refresh_token``."""
        row = db.execute(
            f"SELECT {_COLUMNS} FROM user_sessions WHERE refresh_token = ? LIMIT 1",
            (item_refresh_token,),
        ).fetchone()
        if row is None:
            raise NotFoundError("no user session with that refresh token")
        return UserSession._from_row(row)

    @staticmethod
    def read_all(
        db: sqlite3.Connection, pagination: PaginationParams, item_user_id: int
    ) -> list[UserSession]:
        """Return one page of the sessions of user ``item_user_id``, oldest first."""
        offset = pagination.page * min(
            pagination.page_size, PaginationParams.MAX_PAGE_SIZE
        )
        rows = db.execute(
            f"SELECT {_COLUMNS} FROM user_sessions WHERE user_id = ? "
            "ORDER BY created_at, id LIMIT ? OFFSET ?",
            (item_user_id, pagination.page_size, offset),
        ).fetchall()
        return [UserSession._from_row(row) for row in rows]

    @staticmethod
    def count_all(db: sqlite3.Connection, item_user_id: int) -> int:
        """Return how many sessions user ``item_user_id`` has."""
        (count,) = db.execute(
            "SELECT COUNT(*) FROM user_sessions WHERE user_id = ?", (item_user_id,)
        ).fetchone()
        return count

    @staticmethod
    def update(
        db: sqlite3.Connection, item_id: int, item: UserSessionChangeset
    ) -> UserSession:
        """Overwrite the mutable columns of session ``item_id`` and return the result."""
        with db:
            cursor = db.execute(
                "UPDATE user_sessions SET user_id = ?, refresh_token = ?, device = ? "
                "WHERE id = ?",
                (item.user_id, item.refresh_token, item.device, item_id),
            )
        if cursor.rowcount == 0:
            raise NotFoundError(f"no user session with id {item_id}")
        return UserSession.read(db, item_id)

    @staticmethod
    def delete(db: sqlite3.Connection, item_id: int) -> int:
        """Delete session ``item_id``; return the number of rows removed."""
        with db:
            cursor = db.execute("DELETE FROM user_sessions WHERE id = ?", (item_id,))
        return cursor.rowcount

    @staticmethod
    def delete_all_for_user(db: sqlite3.Connection, item_user_id: int) -> int:
        """Delete every session of user ``item_user_id``; return the number removed."""
        with db:
            cursor = db.execute(
                "DELETE FROM user_sessions WHERE user_id = ?", (item_user_id,)
            )
        return cursor.rowcount


@dataclass
class UserSessionChangeset:
    """The mutable columns of a user session."""

    user_id: int
    refresh_token: str
    device: str | None = None