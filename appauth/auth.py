"""The roles and permissions of an authenticated user."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


def _permission_name(permission: Any) -> str:
    return permission if isinstance(permission, str) else permission.permission


@dataclass
class Auth:
    """Roles and permissions available to a user, used to control what they may do.

    Permissions may be given as names or as objects with a ``permission``
    attribute; only the name matters when checking them.
    """

    user_id: int
    roles: set[str] = field(default_factory=set)
    permissions: set[Any] = field(default_factory=set)
    _permission_names: frozenset[str] = field(
        init=False, repr=False, compare=False, default=frozenset()
    )

    def __post_init__(self) -> None:
        self.roles = set(self.roles)
        self.permissions = set(self.permissions)
        self._permission_names = frozenset(
            _permission_name(p) for p in self.permissions
        )

    def has_permission(self, permission: str) -> bool:
        """Whether the user has ``permission``."""
        return permission in self._permission_names

    def has_all_permissions(self, perms: Iterable[str]) -> bool:
        """Whether the user has every one of ``perms``."""
        return all(self.has_permission(p) for p in perms)

    def has_any_permission(self, perms: Iterable[str]) -> bool:
        """Whether the user has at least one of ``perms``."""
        return any(self.has_permission(p) for p in perms)

    def has_role(self, role: str) -> bool:
        """Whether the user has ``role``."""
        return role in self.roles

    def has_all_roles(self, roles: Iterable[str]) -> bool:
        """Whether the user has every one of ``roles``."""
        return all(self.has_role(r) for r in roles)

    def has_any_roles(self, roles: Iterable[str]) -> bool:
        """Whether the user has at least one of ``roles``."""
        return any(self.has_role(r) for r in roles)