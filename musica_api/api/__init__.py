"""HTTP routes."""

from fastapi import APIRouter

from musica_api.api import auth, health, musicas, playlists

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(musicas.router, tags=["musicas"])
router.include_router(playlists.router, tags=["playlists"])
