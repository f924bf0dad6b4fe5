"""Typed repositories, one per entity."""

from musica_api.repositories.catalog import (
    MembershipRepository,
    PlaylistRepository,
    TrackRepository,
)
from musica_api.repositories.users import UserRepository

__all__ = [
    "MembershipRepository",
    "PlaylistRepository",
    "TrackRepository",
    "UserRepository",
]
