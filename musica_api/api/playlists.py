"""Playlist endpoints: create, list, membership add/list/remove and track update."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from musica_api.api.auth import get_current_claims, require_admin
from musica_api.api.deps import get_list_params
from musica_api.core.database import get_db
from musica_api.repositories.catalog import (
    MembershipRepository,
    PlaylistRepository,
    TrackRepository,
)
from musica_api.schemas.auth import TokenClaims
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

logger = logging.getLogger(__name__)
router = APIRouter()

TRACK_UPDATED = "Música atualizada com sucesso."
TRACK_REMOVED = "Música deletada da playlist com sucesso."


@router.post("/playlist", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
def create_playlist(
    body: PlaylistCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[TokenClaims, Depends(require_admin)],
) -> PlaylistResponse:
    """Create a playlist. criador is stored exactly as sent."""
    playlist = PlaylistRepository(db).create(
        nome=body.nome,
        descricao=body.descricao,
        criador=body.criador,
    )
    return PlaylistResponse.model_validate(playlist)


@router.post(
    "/playlist/{playlist_id}/musica",
    response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_track_to_playlist(
    playlist_id: int,
    body: MembershipCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[TokenClaims, Depends(require_admin)],
) -> MembershipResponse:
    row = MembershipRepository(db).add(playlist_id=playlist_id, musica_id=body.musica_id)
    return MembershipResponse.model_validate(row)


@router.get("/playlists", response_model=list[PlaylistResponse])
def list_playlists(
    params: Annotated[ListParams, Depends(get_list_params)],
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[TokenClaims, Depends(get_current_claims)],
) -> list[PlaylistResponse]:
    """List playlists filtered and ordered by name."""
    return [PlaylistResponse.model_validate(p) for p in PlaylistRepository(db).list_page(params)]


@router.get("/playlist/{playlist_id}/musicas", response_model=list[TrackResponse])
def list_playlist_tracks(
    playlist_id: int,
    params: Annotated[ListParams, Depends(get_list_params)],
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[TokenClaims, Depends(get_current_claims)],
) -> list[TrackResponse]:
    """List the tracks of one playlist, filtered and ordered by title."""
    tracks = MembershipRepository(db).list_tracks(playlist_id, params)
    return [TrackResponse.model_validate(t) for t in tracks]


@router.put("/playlist/{playlist_id}/musica/{musica_id}", response_model=MessageResponse)
def update_playlist_track(
    playlist_id: int,
    musica_id: int,
    body: TrackCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[TokenClaims, Depends(require_admin)],
) -> MessageResponse:
    """
    Update the title and artist of track musica_id.

    The track row itself is changed, so the edit shows in every playlist that
    holds it. playlist_id only scopes the URL.
    """
    updated = TrackRepository(db).update(musica_id, titulo=body.titulo, artista=body.artista)
    logger.info(
        "Track update: playlist_id=%s musica_id=%s rows=%s", playlist_id, musica_id, updated
    )
    return MessageResponse(message=TRACK_UPDATED)


@router.delete("/playlist/{playlist_id}/musica/{musica_id}", response_model=MessageResponse)
def remove_track_from_playlist(
    playlist_id: int,
    musica_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[TokenClaims, Depends(require_admin)],
) -> MessageResponse:
    removed = MembershipRepository(db).remove(playlist_id=playlist_id, musica_id=musica_id)
    logger.info(
        "Playlist membership removed: playlist_id=%s musica_id=%s rows=%s",
        playlist_id,
        musica_id,
        removed,
    )
    return MessageResponse(message=TRACK_REMOVED)
