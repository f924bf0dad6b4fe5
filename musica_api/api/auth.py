"""Signup, login and the access control gate (get_current_claims, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.orm import Session

from musica_api.core.config import Settings, get_settings
from musica_api.core.database import get_db
from musica_api.core.errors import (
    AuthenticationError,
    InvalidTokenError,
    PermissionDeniedError,
)
from musica_api.core.security import (
    create_access_token,
    decode_access_token,
    dummy_password_hash,
    verify_password,
)
from musica_api.models.user import Role
from musica_api.repositories.users import UserRepository
from musica_api.schemas.auth import (
    LoginRequest,
    SignupRequest,
    TokenClaims,
    TokenResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()

TOKEN_NOT_PROVIDED = "Unauthorized: Token not provided"
TOKEN_INVALID = "Unauthorized: Invalid token"
INSUFFICIENT_PERMISSIONS = "Forbidden: Insufficient permissions"
BAD_CREDENTIALS = "Invalid username or password"

BEARER_PREFIX = "bearer "


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Register a user. The response never includes the password or its hash."""
    user = UserRepository(db).create(
        username=body.username,
        password=body.password,
        role=body.role,
    )
    logger.info("User created: username=%s role=%s", user.username, user.role)
    return UserResponse(id=user.id, username=user.username, role=Role.parse(user.role))


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a signed access token.
    Send the token as the raw value of the Authorization header.
    """
    user = UserRepository(db).find_by_username(body.username)
    stored_hash = user.password_hash if user is not None else dummy_password_hash()
    password_ok = verify_password(body.password, stored_hash)
    if user is None or not password_ok:
        logger.info("Login failed for username=%s", body.username)
        raise AuthenticationError(BAD_CREDENTIALS)
    claims = TokenClaims(user_id=user.id, username=user.username, role=Role.parse(user.role))
    return TokenResponse(token=create_access_token(claims, settings))


def get_current_claims(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Dependency: require a valid token in the Authorization header. Raises 401 if missing or invalid."""
    token = (authorization or "").strip()
    if not token:
        raise AuthenticationError(TOKEN_NOT_PROVIDED)
    if token.lower().startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):].strip()
    try:
        return decode_access_token(token, settings)
    except InvalidTokenError as e:
        logger.info("Rejected token: %s", e.message)
        raise AuthenticationError(TOKEN_INVALID, cause=e) from e


def require_admin(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
) -> TokenClaims:
    """Dependency: require a token whose role is Admin. Raises 403 otherwise."""
    if claims.role is not Role.ADMIN:
        logger.warning(
            "Admin route refused for username=%s role=%s", claims.username, claims.role.value
        )
        raise PermissionDeniedError(INSUFFICIENT_PERMISSIONS)
    return claims
