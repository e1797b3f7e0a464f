"""Shared-password verification, JWT issuance and the admin bearer gate."""

import hmac
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from admin_dashboard.core.config import settings
from admin_dashboard.core.exceptions import forbidden, unauthorized

ADMIN_ROLE = "admin"

# JWT bearer scheme
security_scheme = HTTPBearer(auto_error=False)


class AdminCredentialVerifier:
    """Checks a candidate password against the configured admin secret."""

    def __init__(self, secret: Optional[str] = None):
        self._secret = secret

    @property
    def secret(self) -> str:
        return self._secret if self._secret is not None else settings.ADMIN_PASSWORD

    def verify(self, candidate: str) -> bool:
        """Exact match, compared in constant time."""
        return hmac.compare_digest(
            candidate.encode("utf-8"), self.secret.encode("utf-8")
        )


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(hours=settings.JWT_EXPIRY_HOURS)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_admin_token(expires_delta: Optional[timedelta] = None) -> str:
    """Issue the single-claim admin token."""
    return create_access_token({"role": ADMIN_ROLE}, expires_delta)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token (signature and expiry)."""
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise unauthorized("Invalid or expired token")


class RequireRole:
    """Dependency that checks the bearer token carries the given role claim."""

    def __init__(self, role: str):
        self.role = role

    async def __call__(
        self,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    ) -> dict:
        # HTTPBearer yields None for a missing header or a non-Bearer scheme
        if credentials is None or not credentials.credentials:
            raise unauthorized()
        payload = decode_token(credentials.credentials)
        if payload.get("role") != self.role:
            raise forbidden()
        return payload


require_admin = RequireRole(ADMIN_ROLE)
