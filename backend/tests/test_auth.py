"""Authentication gate: local token verification, remote identity lookup and /api/auth/me."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest
from jose import jwt

from wordblog.config import Settings
from wordblog.errors import ConfigurationError, Unauthenticated
from wordblog.services.auth_service import AuthGate, create_access_token
from wordblog.services.ownership import Identity
from tests.conftest import OWNER_ID, auth_headers, test_settings


def test_valid_token_resolves_identity():
    token = create_access_token(test_settings, OWNER_ID, "owner@example.com")
    assert AuthGate(test_settings).resolve(token) == Identity(OWNER_ID, "owner@example.com")


def test_expired_token_is_rejected():
    payload = {
        "sub": OWNER_ID,
        "aud": "authenticated",
        "exp": datetime.now(timezone.utc) - timedelta(minutes=5),
    }
    token = jwt.encode(payload, test_settings.SUPABASE_JWT_SECRET, algorithm="HS256")
    with pytest.raises(Unauthenticated):
        AuthGate(test_settings).resolve(token)


def test_token_signed_with_another_secret_is_rejected():
    other = Settings(SUPABASE_JWT_SECRET="someone-else")
    token = create_access_token(other, OWNER_ID)
    with pytest.raises(Unauthenticated):
        AuthGate(test_settings).resolve(token)


def test_token_for_another_audience_is_rejected():
    other = Settings(SUPABASE_JWT_SECRET=test_settings.SUPABASE_JWT_SECRET, JWT_AUDIENCE="service_role")
    token = create_access_token(other, OWNER_ID)
    with pytest.raises(Unauthenticated):
        AuthGate(test_settings).resolve(token)


def test_token_without_subject_is_rejected():
    payload = {"aud": "authenticated", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)}
    token = jwt.encode(payload, test_settings.SUPABASE_JWT_SECRET, algorithm="HS256")
    with pytest.raises(Unauthenticated) as exc_info:
        AuthGate(test_settings).resolve(token)
    assert exc_info.value.message == "Invalid token payload"


def test_blank_token_is_rejected():
    with pytest.raises(Unauthenticated) as exc_info:
        AuthGate(test_settings).resolve("  ")
    assert exc_info.value.message == "Token is required"


def test_unknown_auth_mode_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        AuthGate(Settings(AUTH_MODE="magic"))


def _remote_settings():
    return Settings(
        AUTH_MODE="remote",
        SUPABASE_URL="https://project.supabase.co/",
        SUPABASE_ANON_KEY="anon-key",
    )


def test_remote_mode_asks_the_identity_service():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["apikey"] = request.headers.get("apikey")
        seen["authorization"] = request.headers.get("authorization")
        return httpx.Response(200, json={"id": OWNER_ID, "email": "owner@example.com"})

    http = httpx.Client(transport=httpx.MockTransport(handler))
    identity = AuthGate(_remote_settings(), http_client=http).resolve("opaque-token")

    assert identity == Identity(OWNER_ID, "owner@example.com")
    assert seen["url"] == "https://project.supabase.co/auth/v1/user"
    assert seen["apikey"] == "anon-key"
    assert seen["authorization"] == "Bearer opaque-token"


def test_remote_mode_rejection_is_unauthenticated():
    http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(401, json={"msg": "bad jwt"})))
    with pytest.raises(Unauthenticated):
        AuthGate(_remote_settings(), http_client=http).resolve("opaque-token")


def test_remote_mode_non_json_body_is_unauthenticated():
    http = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>proxy login</html>"))
    )
    with pytest.raises(Unauthenticated) as exc_info:
        AuthGate(_remote_settings(), http_client=http).resolve("opaque-token")
    assert exc_info.value.message == "Authentication failed"


def test_remote_mode_requires_configuration():
    with pytest.raises(ConfigurationError):
        AuthGate(Settings(AUTH_MODE="remote")).resolve("opaque-token")


def test_me_authenticated(client):
    resp = client.get("/api/auth/me", headers=auth_headers())
    assert resp.status_code == 200
    assert resp.json() == {"user_id": OWNER_ID, "email": "owner@example.com"}


def test_me_without_header(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json() == {"message": "Authorization header required"}


def test_me_with_empty_bearer_token(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Token is required"}


def test_me_with_non_bearer_scheme(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Authorization header required"}


def test_me_with_garbage_token(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid or expired token"


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
