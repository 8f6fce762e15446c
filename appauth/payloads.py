"""Request and response payloads shared by the auth endpoints."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar


@dataclass(frozen=True)
class PaginationParams:
    """Which page of results to return, and how many results per page."""

    page: int
    page_size: int

    MAX_PAGE_SIZE: ClassVar[int] = 100


@dataclass
class UserSessionJson:
    """A user session as returned to clients."""

    id: int
    device: str | None
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "device": self.device,
            "created_at": self.created_at.isoformat(),
        }


@dataclass
class UserSessionResponse:
    """The response body of the sessions listing."""

    sessions: list[UserSessionJson]
    num_pages: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessions": [session.to_dict() for session in self.sessions],
            "num_pages": self.num_pages,
        }


def _permission_to_dict(permission: Any) -> dict[str, str]:
    if dataclasses.is_dataclass(permission) and not isinstance(permission, type):
        source: Mapping[str, Any] = dataclasses.asdict(permission)
    elif isinstance(permission, Mapping):
        source = permission
    else:
        raise TypeError(f"cannot serialise permission {permission!r}")
    try:
        return {"from_role": source["from_role"], "permission": source["permission"]}
    except KeyError as missing:
        raise ValueError(f"permission is missing field {missing}") from None


_CLAIM_FIELDS = ("exp", "sub", "token_type", "roles", "permissions")


@dataclass
class AccessTokenClaims:
    """Claims carried by an access token."""

    exp: int
    sub: int
    token_type: str
    roles: list[str]
    permissions: list[Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "exp": self.exp,
            "sub": self.sub,
            "token_type": self.token_type,
            "roles": list(self.roles),
            "permissions": [_permission_to_dict(p) for p in self.permissions],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessTokenClaims:
        """Build claims from decoded token data, validating field types."""
        missing = [name for name in _CLAIM_FIELDS if name not in data]
        if missing:
            raise ValueError(f"missing claim fields: {', '.join(missing)}")
        exp, sub = data["exp"], data["sub"]
        if isinstance(exp, bool) or not isinstance(exp, int) or exp < 0:
            raise ValueError("exp must be a non-negative integer")
        if isinstance(sub, bool) or not isinstance(sub, int):
            raise ValueError("sub must be an integer")
        if not isinstance(data["token_type"], str):
            raise ValueError("token_type must be a string")
        roles = data["roles"]
        if not isinstance(roles, list) or not all(isinstance(r, str) for r in roles):
            raise ValueError("roles must be a list of strings")
        permissions = data["permissions"]
        if not isinstance(permissions, list):
            raise ValueError("permissions must be a list")
        return cls(
            exp=exp,
            sub=sub,
            token_type=data["token_type"],
            roles=list(roles),
            permissions=[_permission_to_dict(p) for p in permissions],
        )


@dataclass
class AuthConfig:
    """Configuration of the auth service."""

    oidc_providers: list[Any] = field(default_factory=list)