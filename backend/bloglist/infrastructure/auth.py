"""Credential Primitives — Argon2 password hashing and signed JWT bearer tokens.

Invariants:
    - Raw passwords never leave this module in any form except an Argon2id hash
    - verify_password never raises on a mismatch or a malformed hash; it returns False
    - decode_access_token raises AuthenticationError for every invalid token
      (bad signature, expired, malformed, missing claims)

Design Decisions:
    - argon2-cffi default parameters: OWASP-aligned Argon2id, no pepper
    - PyJWT with an explicit algorithm whitelist; 'none' never accepted
    - Secret/algorithm/ttl passed in by the caller, not read from settings here
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from bloglist.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

_hasher = PasswordHasher()


def hash_password(raw: str) -> str:
    return _hasher.hash(raw)


def verify_password(password_hash: str, raw: str) -> bool:
    try:
        return _hasher.verify(password_hash, raw)
    except (VerificationError, InvalidHashError):
        return False


def create_access_token(
    user_id: UUID,
    username: str,
    secret: str,
    algorithm: str = "HS256",
    ttl_minutes: int = 60,
) -> str:
    """Sign a bearer token identifying the user."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "username": username,
        "iat": now,
        "exp": now + timedelta(minutes=ttl_minutes),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> dict:
    """Verify signature and expiry; return the claims."""
    try:
        claims = jwt.decode(
            token, secret, algorithms=[algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired", "TOKEN_INVALID")
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise AuthenticationError("Token invalid", "TOKEN_INVALID")
    try:
        claims["sub"] = UUID(claims["sub"])
    except (ValueError, TypeError, AttributeError):
        raise AuthenticationError("Token invalid", "TOKEN_INVALID")
    return claims
