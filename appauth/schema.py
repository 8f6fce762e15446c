"""SQLite table definitions for users, sessions, roles, permissions and OAuth2 links."""

from __future__ import annotations

import sqlite3

# Timestamps are stored as naive UTC text with millisecond precision so that
# rows created within the same second still order by creation time.
_TIMESTAMP = "TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))"

AUTH_TABLES = (
    "role_permissions",
    "user_permissions",
    "user_roles",
    "user_sessions",
    "users",
)

OIDC_TABLES = ("user_oauth2_links",)

_AUTH_DDL = (
    f"""
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        email TEXT NOT NULL,
        hash_password TEXT NOT NULL,
        activated BOOLEAN NOT NULL,
        created_at {_TIMESTAMP}
    )
    """,
    f"""
    CREATE TABLE IF NOT EXISTS role_permissions (
        role TEXT NOT NULL,
        permission TEXT NOT NULL,
        created_at {_TIMESTAMP},
        PRIMARY KEY (role, permission)
    )
    """,
    f"""
    CREATE TABLE IF NOT EXISTS user_permissions (
        user_id INTEGER NOT NULL REFERENCES users (id),
        permission TEXT NOT NULL,
        created_at {_TIMESTAMP},
        PRIMARY KEY (user_id, permission)
    )
    """,
    f"""
    CREATE TABLE IF NOT EXISTS user_roles (
        user_id INTEGER NOT NULL REFERENCES users (id),
        role TEXT NOT NULL,
        created_at {_TIMESTAMP},
        PRIMARY KEY (user_id, role)
    )
    """,
    f"""
    CREATE TABLE IF NOT EXISTS user_sessions (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL REFERENCES users (id),
        refresh_token TEXT NOT NULL,
        device TEXT,
        created_at {_TIMESTAMP}
    )
    """,
)

_OIDC_DDL = (
    f"""
    CREATE TABLE IF NOT EXISTS user_oauth2_links (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        provider TEXT NOT NULL,
        csrf_token TEXT NOT NULL,
        nonce TEXT NOT NULL,
        pkce_secret TEXT NOT NULL,
        refresh_token TEXT,
        access_token TEXT,
        subject_id TEXT,
        user_id INTEGER REFERENCES users (id),
        created_at {_TIMESTAMP}
    )
    """,
)


def create_tables(connection: sqlite3.Connection, include_oidc: bool = False) -> None:
    """Create the auth tables (and optionally the OAuth2 link table) if missing."""
    statements = list(_AUTH_DDL)
    if include_oidc:
        statements.extend(_OIDC_DDL)
    for statement in statements:
        connection.execute(statement)
    if connection.in_transaction:
        connection.commit()