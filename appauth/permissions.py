"""Roles assigned to users and the permissions granted to users and roles."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .database import NotFoundError
from .role_permission import RolePermission, RolePermissionChangeset
from .user_permission import UserPermission, UserPermissionChangeset
from .user_role import UserRole, UserRoleChangeset

_STORE_ERRORS = (sqlite3.Error, NotFoundError)


def _succeeds(action: Callable[[], Any]) -> bool:
    """Run a store operation and report whether it went through."""
    try:
        action()
    except _STORE_ERRORS:
        return False
    return True


class Role:
    """Operations on the roles assigned to users."""

    @staticmethod
    def assign(db: sqlite3.Connection, user_id: int, role: str) -> bool:
        """Assign ``role`` to user ``user_id``; return whether it succeeded."""
        return _succeeds(
            lambda: UserRole.create(db, UserRoleChangeset(user_id=user_id, role=role))
        )

    @staticmethod
    def assign_many(db: sqlite3.Connection, user_id: int, roles: Iterable[str]) -> bool:
        """Assign every role in ``roles`` to user ``user_id``; return whether it succeeded."""
        items = [UserRoleChangeset(user_id=user_id, role=role) for role in roles]
        return _succeeds(lambda: UserRole.create_many(db, items))

    @staticmethod
    def unassign(db: sqlite3.Connection, user_id: int, role: str) -> bool:
        """Unassign ``role`` from user ``user_id``; return whether it succeeded."""
        return _succeeds(lambda: UserRole.delete(db, user_id, role))

    @staticmethod
    def unassign_many(
        db: sqlite3.Connection, user_id: int, roles: Iterable[str]
    ) -> bool:
        """Unassign every role in ``roles`` from user ``user_id``; return whether it succeeded."""
        roles = list(roles)
        return _succeeds(lambda: UserRole.delete_many(db, user_id, roles))

    @staticmethod
    def fetch_all(db: sqlite3.Connection, user_id: int) -> list[str]:
        """Return every role assigned to user ``user_id``."""
        rows = db.execute(
            "SELECT role FROM user_roles WHERE user_id = ?", (user_id,)
        ).fetchall()
        return [row[0] for row in rows]


@dataclass(eq=False)
class Permission:
    """A permission held by a user, and the role it comes from.

    Two permissions are equal when their names are equal, whatever role
    they come from. Permissions granted directly have an empty ``from_role``.
    """

    from_role: str
    permission: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self.permission == other.permission

    def __hash__(self) -> int:
        return hash(self.permission)

    @staticmethod
    def grant_to_user(db: sqlite3.Connection, user_id: int, permission: str) -> bool:
        """Grant ``permission`` to user ``user_id``; return whether it succeeded."""
        return _succeeds(
            lambda: UserPermission.create(
                db, UserPermissionChangeset(user_id=user_id, permission=permission)
            )
        )

    @staticmethod
    def grant_to_role(db: sqlite3.Connection, role: str, permission: str) -> bool:
        """Grant ``permission`` to ``role``; return whether it succeeded."""
        return _succeeds(
            lambda: RolePermission.create(
                db, RolePermissionChangeset(role=role, permission=permission)
            )
        )

    @staticmethod
    def grant_many_to_role(
        db: sqlite3.Connection, role: str, permissions: Iterable[str]
    ) -> bool:
        """Grant every permission in ``permissions`` to ``role``; return whether it succeeded."""
        items = [
            RolePermissionChangeset(role=role, permission=permission)
            for permission in permissions
        ]
        return _succeeds(lambda: RolePermission.create_many(db, items))

    @staticmethod
    def grant_many_to_user(
        db: sqlite3.Connection, user_id: int, permissions: Iterable[str]
    ) -> bool:
        """Grant every permission in ``permissions`` to user ``user_id``; return whether it succeeded."""
        items = [
            UserPermissionChangeset(user_id=user_id, permission=permission)
            for permission in permissions
        ]
        return _succeeds(lambda: UserPermission.create_many(db, items))

    @staticmethod
    def revoke_from_user(db: sqlite3.Connection, user_id: int, permission: str) -> bool:
        """Revoke ``permission`` from user ``user_id``; return whether it succeeded."""
        return _succeeds(lambda: UserPermission.delete(db, user_id, permission))

    @staticmethod
    def revoke_from_role(db: sqlite3.Connection, role: str, permission: str) -> bool:
        """Revoke ``permission`` from ``role``; return whether it succeeded."""
        return _succeeds(lambda: RolePermission.delete(db, role, permission))

    @staticmethod
    def revoke_many_from_user(
        db: sqlite3.Connection, user_id: int, permissions: Iterable[str]
    ) -> bool:
        """Revoke every permission in ``permissions`` from user ``user_id``."""
        permissions = list(permissions)
        return _succeeds(lambda: UserPermission.delete_many(db, user_id, permissions))

    @staticmethod
    def revoke_many_from_role(
        db: sqlite3.Connection, role: str, permissions: Iterable[str]
    ) -> bool:
        """Revoke every permission in ``permissions`` from ``role``."""
        permissions = list(permissions)
        return _succeeds(lambda: RolePermission.delete_many(db, role, permissions))

    @staticmethod
    def revoke_all_from_role(db: sqlite3.Connection, role: str) -> bool:
        """Revoke every permission granted to ``role``."""
        return _succeeds(lambda: RolePermission.delete_all(db, role))

    @staticmethod
    def revoke_all_from_user(db: sqlite3.Connection, user_id: int) -> bool:
        """Revoke every permission granted directly to user ``user_id``."""
        return _succeeds(lambda: UserPermission.delete_all(db, user_id))

    @staticmethod
    def fetch_all(db: sqlite3.Connection, user_id: int) -> list[Permission]:
        """Return the permissions of user ``user_id``, direct and through roles."""
        rows = db.execute(
            """
            SELECT permission AS permission, NULL AS from_role
            FROM user_permissions
            WHERE user_permissions.user_id = :user_id

            UNION

            SELECT role_permissions.permission AS permission,
                   user_roles.role AS from_role
            FROM user_roles
            INNER JOIN role_permissions ON user_roles.role = role_permissions.role
            WHERE user_roles.user_id = :user_id
            """,
            {"user_id": user_id},
        ).fetchall()
        return [
            Permission(from_role=row[1] if row[1] is not None else "", permission=row[0])
            for row in rows
        ]