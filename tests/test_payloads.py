from dataclasses import dataclass
from datetime import datetime

import pytest

from appauth.payloads import (
    AccessTokenClaims,
    AuthConfig,
    PaginationParams,
    UserSessionJson,
    UserSessionResponse,
)


@dataclass
class _Perm:
    from_role: str
    permission: str


def test_pagination_params_fields_and_limit():
    params = PaginationParams(page=2, page_size=25)
    assert (params.page, params.page_size) == (2, 25)
    assert PaginationParams.MAX_PAGE_SIZE == 100


def test_user_session_json_round_trips_timestamp():
    created = datetime(2024, 1, 2, 3, 4, 5, 123000)
    data = UserSessionJson(id=4, device="laptop", created_at=created).to_dict()
    assert data["id"] == 4
    assert data["device"] == "laptop"
    assert datetime.fromisoformat(data["created_at"]) == created


def test_user_session_json_without_device():
    data = UserSessionJson(id=1, device=None, created_at=datetime(2024, 1, 1)).to_dict()
    assert data["device"] is None
    assert set(data) == {"id", "device", "created_at"}


def test_user_session_response_serialises_sessions():
    sessions = [
        UserSessionJson(id=1, device="phone", created_at=datetime(2024, 1, 1)),
        UserSessionJson(id=2, device=None, created_at=datetime(2024, 1, 2)),
    ]
    data = UserSessionResponse(sessions=sessions, num_pages=3).to_dict()
    assert data["num_pages"] == 3
    assert data["sessions"] == [s.to_dict() for s in sessions]


def test_claims_round_trip():
    claims = AccessTokenClaims(
        exp=1700000000,
        sub=7,
        token_type="access_token",
        roles=["admin"],
        permissions=[{"from_role": "admin", "permission": "read"}],
    )
    assert AccessTokenClaims.from_dict(claims.to_dict()) == claims


def test_claims_serialise_dataclass_permissions():
    claims = AccessTokenClaims(
        exp=10,
        sub=1,
        token_type="access_token",
        roles=[],
        permissions=[_Perm(from_role="editor", permission="write")],
    )
    assert claims.to_dict()["permissions"] == [{"from_role": "editor", "permission": "write"}]


def test_claims_missing_field_raises():
    with pytest.raises(ValueError, match="roles"):
        AccessTokenClaims.from_dict(
            {"exp": 1, "sub": 1, "token_type": "access_token", "permissions": []}
        )


@pytest.mark.parametrize(
    "field_name, value",
    [
        ("exp", -1),
        ("exp", "soon"),
        ("sub", "one"),
        ("token_type", 5),
        ("roles", "admin"),
        ("permissions", "read"),
    ],
)
def test_claims_reject_bad_types(field_name, value):
    data = {
        "exp": 1,
        "sub": 1,
        "token_type": "access_token",
        "roles": [],
        "permissions": [],
    }
    data[field_name] = value
    with pytest.raises(ValueError):
        AccessTokenClaims.from_dict(data)


def test_claims_reject_incomplete_permission():
    with pytest.raises(ValueError):
        AccessTokenClaims.from_dict(
            {
                "exp": 1,
                "sub": 1,
                "token_type": "access_token",
                "roles": [],
                "permissions": [{"permission": "read"}],
            }
        )


def test_auth_config_providers_not_shared():
    first = AuthConfig()
    second = AuthConfig()
    first.oidc_providers.append("google")
    assert second.oidc_providers == []
    assert first.oidc_providers == ["google"]