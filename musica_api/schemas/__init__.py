"""Pydantic request/response schemas."""

from musica_api.schemas.auth import (
    LoginRequest,
    SignupRequest,
    TokenClaims,
    TokenResponse,
    UserResponse,
)
from musica_api.schemas.catalog import (
    ListParams,
    MembershipCreate,
    MembershipResponse,
    MessageResponse,
    PlaylistCreate,
    PlaylistResponse,
    TrackCreate,
    TrackResponse,
)
from musica_api.schemas.health import HealthResponse

__all__ = [
    "HealthResponse",
    "ListParams",
    "LoginRequest",
    "MembershipCreate",
    "MembershipResponse",
    "MessageResponse",
    "PlaylistCreate",
    "PlaylistResponse",
    "SignupRequest",
    "TokenClaims",
    "TokenResponse",
    "TrackCreate",
    "TrackResponse",
    "UserResponse",
]
