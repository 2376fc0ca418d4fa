"""Encoding and decoding of the ``auth_token`` cookie.

Tokens are HMAC-signed JWTs whose ``sub`` claim holds the user ID as a
string, as RFC 7519 asks. The username travels alongside for display.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from board.config import AuthSettings


class TokenClaims(BaseModel):
    """Claims carried by an auth token."""

    sub: int
    name: str
    exp: datetime


class JWTError(Exception):
    """Raised when an auth token cannot be trusted."""


def encode_token(user_id: int, username: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` that expires after the configured days."""
    expires_at = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    claims = {"sub": str(user_id), "name": username, "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: AuthSettings) -> TokenClaims:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is expired, tampered with or malformed
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.PyJWTError as e:
        raise JWTError(f"Invalid token: {e}") from e

    try:
        return TokenClaims.model_validate(claims)
    except ValueError as e:
        raise JWTError("Token claims are malformed") from e
