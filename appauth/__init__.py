"""User accounts, login sessions, roles and permissions stored in SQLite."""

__version__ = "0.1.0"