"""Track endpoints: create (Admin) and list (any authenticated user)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from musica_api.api.auth import get_current_claims, require_admin
from musica_api.api.deps import get_list_params
from musica_api.core.database import get_db
from musica_api.repositories.catalog import TrackRepository
from musica_api.schemas.auth import TokenClaims
from musica_api.schemas.catalog import ListParams, TrackCreate, TrackResponse

router = APIRouter()


@router.post("/musica", response_model=TrackResponse, status_code=status.HTTP_201_CREATED)
def create_track(
    body: TrackCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[TokenClaims, Depends(require_admin)],
) -> TrackResponse:
    track = TrackRepository(db).create(titulo=body.titulo, artista=body.artista)
    return TrackResponse.model_validate(track)


@router.get("/musicas", response_model=list[TrackResponse])
def list_tracks(
    params: Annotated[ListParams, Depends(get_list_params)],
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[TokenClaims, Depends(get_current_claims)],
) -> list[TrackResponse]:
    """List tracks, optionally filtered by a substring of the title, ordered by title and paginated."""
    return [TrackResponse.model_validate(t) for t in TrackRepository(db).list_page(params)]
