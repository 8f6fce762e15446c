from appauth.oidc import OIDCProvider


def _google():
    return OIDCProvider.google(
        "client-id",
        "secret",
        "http://localhost/success",
        "http://localhost/error",
    )


def test_google_fixed_fields():
    provider = _google()
    assert provider.name == "google"
    assert provider.scope == ["email"]
    assert provider.issuer_url == "https://accounts.google.com"


def test_google_passes_through_arguments():
    provider = _google()
    assert provider.client_id == "client-id"
    assert provider.client_secret == "secret"
    assert provider.success_uri == "http://localhost/success"
    assert provider.error_uri == "http://localhost/error"


def test_google_scope_not_shared_between_instances():
    first = _google()
    second = _google()
    first.scope.append("profile")
    assert second.scope == ["email"]


def test_redirect_uri_for_google():
    provider = _google()
    assert (
        provider.redirect_uri("http://localhost:3000")
        == "http://localhost:3000/api/auth/oidc/google/login"
    )


def test_redirect_uri_uses_provider_name():
    provider = OIDCProvider(
        name="custom",
        client_id="client-id",
        client_secret="secret",
        scope=["openid"],
        issuer_url="https://id.example.com",
        success_uri="https://app.example.com/ok",
        error_uri="https://app.example.com/fail",
    )
    uri = provider.redirect_uri("https://api.example.com")
    assert uri.startswith("https://api.example.com/")
    assert "/custom/" in uri
    assert uri.endswith("/login")


def test_providers_compare_by_value():
    assert _google() == _google()
    other = _google()
    other.client_id = "another-id"
    assert other != _google()