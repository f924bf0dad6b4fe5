"""SQLAlchemy ORM models."""

from musica_api.models.base import Base
from musica_api.models.catalog import Playlist, PlaylistTrack, Track
from musica_api.models.user import Role, User

__all__ = ["Base", "Playlist", "PlaylistTrack", "Role", "Track", "User"]
