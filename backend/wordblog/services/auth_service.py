"""Authentication gate. Resolves bearer credentials against the identity service."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import httpx
from jose import JWTError, jwt

from wordblog.config import Settings
from wordblog.errors import ConfigurationError, Unauthenticated
from wordblog.services.ownership import Identity

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
AUTH_MODES = ("jwt", "remote")


def create_access_token(settings: Settings, user_id: str, email: Optional[str] = None) -> str:
    """Issue a token shaped like the identity service's own access tokens."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(user_id), "exp": expire, "role": "authenticated"}
    if settings.JWT_AUDIENCE:
        payload["aud"] = settings.JWT_AUDIENCE
    if email:
        payload["email"] = email
    return jwt.encode(payload, settings.SUPABASE_JWT_SECRET, algorithm=ALGORITHM)


class AuthGate:
    def __init__(self, settings: Settings, http_client: Optional[httpx.Client] = None):
        mode = str(settings.AUTH_MODE or "").strip().lower()
        if mode not in AUTH_MODES:
            raise ConfigurationError(f"Unknown AUTH_MODE '{settings.AUTH_MODE}'")
        self.settings = settings
        self.mode = mode
        self._http = http_client

    def resolve(self, token: Optional[str]) -> Identity:
        token = (token or "").strip()
        if not token:
            raise Unauthenticated("Token is required")
        if self.mode == "remote":
            return self._resolve_remote(token)
        return self._resolve_jwt(token)

    def _resolve_jwt(self, token: str) -> Identity:
        audience = self.settings.JWT_AUDIENCE or None
        try:
            payload = jwt.decode(
                token,
                self.settings.SUPABASE_JWT_SECRET,
                algorithms=[ALGORITHM],
                audience=audience,
                options={"verify_aud": audience is not None},
            )
        except JWTError as exc:
            logger.info("[auth] token rejected: %s", exc)
            raise Unauthenticated("Invalid or expired token") from exc

        user_id = payload.get("sub")
        if not user_id:
            raise Unauthenticated("Invalid token payload")
        return Identity(user_id=str(user_id), email=payload.get("email"))

    def _resolve_remote(self, token: str) -> Identity:
        if not self.settings.SUPABASE_URL or not self.settings.SUPABASE_ANON_KEY:
            raise ConfigurationError("Identity service URL or anon key not configured")
        headers = {
            "apikey": self.settings.SUPABASE_ANON_KEY,
            "Authorization": f"Bearer {token}",
        }
        try:
            if self._http is not None:
                response = self._http.get(self.settings.supabase_user_url(), headers=headers)
            else:
                response = httpx.get(
                    self.settings.supabase_user_url(),
                    headers=headers,
                    timeout=float(self.settings.AUTH_TIMEOUT_SECONDS),
                )
        except httpx.HTTPError as exc:
            logger.warning("[auth] identity service unreachable: %s", exc)
            raise Unauthenticated("Authentication failed") from exc

        if response.status_code != 200:
            logger.info("[auth] identity service rejected token status=%s", response.status_code)
            raise Unauthenticated("Authentication failed")

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("[auth] identity service returned a non-JSON body")
            raise Unauthenticated("Authentication failed") from exc
        user_id = data.get("id") if isinstance(data, dict) else None
        if not user_id:
            raise Unauthenticated("User not found")
        return Identity(user_id=str(user_id), email=data.get("email"))
