"""Pydantic schemas for tracks, playlists and playlist membership."""

from typing import Literal

from pydantic import BaseModel, Field

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 2_000

SortOrder = Literal["asc", "desc"]


class TrackCreate(BaseModel):
    """Body for creating or updating a track."""

    titulo: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Track title")
    artista: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Artist name")


class TrackResponse(BaseModel):
    id: int
    titulo: str
    artista: str

    class Config:
        from_attributes = True


class PlaylistCreate(BaseModel):
    """Body for creating a playlist. criador is taken as given, not from the token."""

    nome: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Playlist name")
    descricao: str | None = Field(
        default=None, max_length=DESCRIPTION_MAX_LENGTH, description="Free-text description"
    )
    criador: str | None = Field(
        default=None, max_length=TITLE_MAX_LENGTH, description="Creator name"
    )


class PlaylistResponse(BaseModel):
    id: int
    nome: str
    descricao: str | None = None
    criador: str | None = None

    class Config:
        from_attributes = True


class MembershipCreate(BaseModel):
    """Body for adding a track to a playlist."""

    musica_id: int = Field(..., description="Id of the track to add")


class MembershipResponse(BaseModel):
    playlist_id: int
    musica_id: int

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    """Confirmation for update/delete operations."""

    message: str


class ListParams(BaseModel):
    """Normalized listing options shared by every list endpoint."""

    filter: str | None = None
    page: int = 1
    limit: int = 10
    order: SortOrder | None = "asc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
