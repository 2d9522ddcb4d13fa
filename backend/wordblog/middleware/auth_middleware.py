from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from wordblog.config import Settings, get_settings
from wordblog.errors import Unauthenticated
from wordblog.services.auth_service import AuthGate
from wordblog.services.ownership import Identity

# auto_error=False so a missing header becomes our 401 instead of FastAPI's 403.
security = HTTPBearer(auto_error=False)


def get_auth_gate(settings: Settings = Depends(get_settings)) -> AuthGate:
    return AuthGate(settings)


def bearer_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Token from the Authorization header, "" when the header carries none, None without a header."""
    if credentials is not None:
        return credentials.credentials
    header = request.headers.get("Authorization")
    if header is None:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip()


def authenticate(gate: AuthGate, token: Optional[str]) -> Identity:
    if token is None:
        raise Unauthenticated("Authorization header required")
    return gate.resolve(token)


def get_current_identity(
    token: Optional[str] = Depends(bearer_token),
    gate: AuthGate = Depends(get_auth_gate),
) -> Identity:
    return authenticate(gate, token)
