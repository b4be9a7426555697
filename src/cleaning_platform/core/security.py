"""Password hashing and access-token utilities."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from cleaning_platform.core.errors import AuthError
from cleaning_platform.core.settings import settings
from cleaning_platform.models.user import Role


def hash_password(password: str) -> str:
    """Return a bcrypt hash of ``password``."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or an over-long password.
        return False


def create_access_token(
    subject: str,
    extra_claims: dict[str, str] | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT for ``subject``.

    Args:
        subject: Stringified user identifier placed in the ``sub`` claim.
        extra_claims: Additional string claims such as ``email`` and ``role``.
        expires_delta: Lifetime override; defaults to the configured expiry.
    """
    to_encode: dict[str, Any] = {"sub": subject}
    if extra_claims:
        to_encode.update(extra_claims)
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(UTC) + lifetime
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify ``token`` and return its claims.

    Raises:
        AuthError: If the signature is invalid or the token has expired.
    """
    try:
        claims: dict[str, Any] = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise AuthError("Invalid or expired token") from err
    return claims


@dataclass(frozen=True)
class AuthContext:
    """Verified identity of the caller, as carried by the access token."""

    user_id: uuid.UUID
    email: str
    role: Role


def issue_token_for(user_id: uuid.UUID, email: str, role: Role) -> str:
    """Create an access token carrying the caller's id, email and role."""
    return create_access_token(str(user_id), {"email": email, "role": role.value})


def auth_context_from_token(token: str) -> AuthContext:
    """Decode ``token`` into an ``AuthContext``.

    The role is taken from the token as-is and not re-read from the profile
    table.

    Raises:
        AuthError: If the token is invalid, expired or missing claims.
    """
    claims = decode_access_token(token)
    subject = claims.get("sub")
    if subject is None:
        raise AuthError()
    try:
        return AuthContext(
            user_id=uuid.UUID(subject),
            email=str(claims.get("email", "")),
            role=Role(claims.get("role")),
        )
    except ValueError as err:
        raise AuthError() from err
