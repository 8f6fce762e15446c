# appauth

Storage and checks for user authentication in a web application:

- users and their login sessions, with pagination,
- roles assigned to users and permissions granted to users or to roles,
- an `Auth` object that answers "may this user do that?",
- the text of the account e-mails (registration, activation, password reset
  and change),
- settings for OpenID Connect providers such as Google.

Data lives in a SQLite database reached through `appauth.database.Database`.
The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

## Setting up a database

```python
from appauth.database import Database
from appauth.schema import create_tables

with Database("app.db") as db:
    connection = db.get_connection()
    create_tables(connection, include_oidc=True)
```

`Database` takes a file path, optionally prefixed with `sqlite://` or
`sqlite:`; any other URL scheme raises `ValueError`. When no URL is given,
it is read from the `DATABASE_URL` environment variable
(`Database.connection_url()` raises `RuntimeError` if that is unset).
`get_connection()` opens one shared `sqlite3` connection on first use and
returns it afterwards; `close()`, or leaving the `with` block, closes it.

`create_tables` creates the `users`, `user_sessions`, `user_roles`,
`user_permissions` and `role_permissions` tables, and with
`include_oidc=True` also `user_oauth2_links`. Existing tables are left alone.

## Users and sessions

```python
from appauth.payloads import PaginationParams
from appauth.user import User, UserChangeset
from appauth.user_session import UserSession, UserSessionChangeset

user = User.create(connection, UserChangeset(
    email="someone@example.com", hash_password="placeholder", activated=True,
))
session = UserSession.create(connection, UserSessionChangeset(
    user_id=user.id, refresh_token="token", device="laptop",
))
page = UserSession.read_all(connection, PaginationParams(page=0, page_size=10), user.id)
total = UserSession.count_all(connection, user.id)
```

- `read`, `find_by_email`, `find_by_refresh_token` and `update` raise
  `appauth.database.NotFoundError` when no row matches.
- `delete` and `UserSession.delete_all_for_user` return the number of rows
  removed.
- Pages are ordered oldest first and hold at most `page_size` rows.
  `UserSession.read_all` skips `page * min(page_size, 100)` rows;
  `User.read_all` skips `page * max(page_size, 100)` rows
  (100 is `PaginationParams.MAX_PAGE_SIZE`).

## Roles and permissions

```python
from appauth.permissions import Permission, Role

Role.assign(connection, user.id, "admin")
Permission.grant_to_role(connection, "admin", "users.delete")
Permission.grant_to_user(connection, user.id, "reports.view")
roles = Role.fetch_all(connection, user.id)              # ["admin"]
permissions = Permission.fetch_all(connection, user.id)
```

The assign, unassign, grant and revoke helpers (including the `_many` and
`_all` variants) return `True` when the database accepted the change and
`False` when it refused it, for instance a duplicate grant.

`Permission.fetch_all` returns the user's direct permissions, with an empty
`from_role`, together with those that come through the user's roles, with
`from_role` set to the role. Two `Permission` objects are equal, and hash
alike, when their permission names are equal.

The table-level classes `UserRole`, `UserPermission` and `RolePermission`
(in `appauth.user_role`, `appauth.user_permission` and
`appauth.role_permission`) offer `create`, `create_many`, `read`,
`read_all`, `delete`, `delete_many`, and, for the permission tables,
`delete_all`.

## Checking access

```python
from appauth.auth import Auth

auth = Auth(user_id=user.id, roles=set(roles), permissions=set(permissions))
auth.has_role("admin")
auth.has_all_permissions(["users.delete", "reports.view"])
auth.has_any_roles(["editor", "admin"])
```

Permissions may be given as names or as `Permission` objects; only the name
is compared.

## Payloads

`appauth.payloads` holds `PaginationParams`, `UserSessionJson` and
`UserSessionResponse` (each with `to_dict()`), `AccessTokenClaims`
(`to_dict()` and `from_dict()`, which raises `ValueError` on missing or
mistyped claims) and `AuthConfig`, which lists the configured OIDC
providers.

## Account e-mails

Any object with a `send(to_email, subject, text, html)` method works as a
mailer:

```python
from appauth import mail

mail.send_register(mailer, "someone@example.com", "https://app.example.com/activate?token=token")
mail.send_activated(mailer, "someone@example.com")
```

Also available: `send_password_changed`, `send_password_reset`,
`send_recover_existent_account` and `send_recover_nonexistent_account`.

## OpenID Connect providers

```python
from appauth.oidc import OIDCProvider
from appauth.payloads import AuthConfig

google = OIDCProvider.google("client-id", "secret", "/oauth/success", "/oauth/error")
google.redirect_uri("https://app.example.com")
# 'https://app.example.com/api/auth/oidc/google/login'
config = AuthConfig(oidc_providers=[google])
```

## What this package does not do

- It has no HTTP endpoints or server: login, logout, refresh, registration,
  activation and password-reset handlers are left to the application.
- It does not hash passwords, issue or verify access tokens, or set cookies.
- It stores OIDC provider settings and creates the `user_oauth2_links`
  table, but does not run the OpenID Connect login flow and has no class for
  that table.
- It composes e-mails but does not deliver them; the mailer you pass in does.
- It works with SQLite only.

## Running the tests

```
pip install .[test]
pytest
```