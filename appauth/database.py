"""Access to the application's SQLite database."""

from __future__ import annotations

import os
import sqlite3
import threading

_CONNECTION_TIMEOUT_SECONDS = 5


class NotFoundError(LookupError):
    """Raised when a query that expects a row finds none."""


def _sqlite_path(url: str) -> str:
    for prefix in ("sqlite://", "sqlite:"):
        if url.startswith(prefix):
            return url[len(prefix):]
    if "://" in url:
        raise ValueError(f"unsupported database url: {url!r}")
    return url


class Database:
    """Holds the shared connection to the database named by a URL."""

    def __init__(self, url: str | None = None) -> None:
        self.url = url if url is not None else self.connection_url()
        self._path = _sqlite_path(self.url)
        self._connection: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @staticmethod
    def connection_url() -> str:
        """Return the database URL from the DATABASE_URL environment variable."""
        try:
            return os.environ["DATABASE_URL"]
        except KeyError:
            raise RuntimeError("DATABASE_URL environment variable expected.") from None

    def get_connection(self) -> sqlite3.Connection:
        """Return the connection, opening it on first use."""
        with self._lock:
            if self._connection is None:
                connection = sqlite3.connect(
                    self._path,
                    timeout=_CONNECTION_TIMEOUT_SECONDS,
                    check_same_thread=False,
                    isolation_level=None,
                )
                connection.row_factory = sqlite3.Row
                self._connection = connection
            return self._connection

    def close(self) -> None:
        """Close the connection if it is open."""
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()