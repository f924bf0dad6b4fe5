"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt
from pydantic import ValidationError

from musica_api.core.errors import InvalidTokenError
from musica_api.schemas.auth import TokenClaims

if TYPE_CHECKING:
    from musica_api.core.config import Settings

# Bcrypt cost (rounds). Hashing blocks the worker thread for the duration.
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Digest checked when the username is unknown, so both login failures cost one bcrypt round."""
    return hash_password("unknown-user-placeholder")


def create_access_token(claims: TokenClaims, settings: "Settings") -> str:
    """Create a JWT carrying user_id, username, role and iat. No exp is set."""
    payload: dict[str, Any] = {
        "user_id": claims.user_id,
        "username": claims.username,
        "role": claims.role.value,
        "iat": datetime.now(UTC),
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str | None, settings: "Settings") -> TokenClaims:
    """
    Decode and validate a JWT and return its claims.

    Raises InvalidTokenError for empty input, bad signature, malformed structure,
    missing claims, or an expired token (when an exp claim is present).
    """
    if not token or not isinstance(token, str):
        raise InvalidTokenError("Token is empty")
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
        )
    except jwt.PyJWTError as e:
        raise InvalidTokenError(f"Token rejected: {type(e).__name__}", cause=e) from e
    try:
        return TokenClaims.model_validate(payload)
    except ValidationError as e:
        raise InvalidTokenError("Token payload is missing required claims", cause=e) from e
