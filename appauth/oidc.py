"""Configuration of OpenID Connect login providers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OIDCProvider:
    """An OpenID Connect provider users may log in with."""

    name: str
    client_id: str
    client_secret: str
    scope: list[str] = field(default_factory=list)
    # Used to discover the rest of the endpoints (.well-known).
    issuer_url: str = ""
    # Where to redirect after a successful login.
    success_uri: str = ""
    # Where to redirect when the login fails.
    error_uri: str = ""

    @classmethod
    def google(
        cls, client_id: str, client_secret: str, success_uri: str, error_uri: str
    ) -> OIDCProvider:
        """Return the configuration for logging in with Google."""
        return cls(
            name="google",
            client_id=client_id,
            client_secret=client_secret,
            scope=["email"],
            issuer_url="https://accounts.google.com",
            success_uri=success_uri,
            error_uri=error_uri,
        )

    def redirect_uri(self, api_url: str) -> str:
        """Return the URI the provider redirects back to after login."""
        return f"{api_url}/api/auth/oidc/{self.name}/login"