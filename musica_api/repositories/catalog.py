"""Resource repositories for tracks, playlists and playlist membership."""

from musica_api.models.catalog import Playlist, PlaylistTrack, Track
from musica_api.repositories.base import Repository
from musica_api.repositories.listing import apply_listing
from musica_api.schemas.catalog import ListParams


class TrackRepository(Repository):
    def create(self, titulo: str, artista: str) -> Track:
        track = Track(titulo=titulo, artista=artista)
        with self._store_errors("insert track"):
            self.session.add(track)
            self.session.commit()
            self.session.refresh(track)
        return track

    def list_page(self, params: ListParams) -> list[Track]:
        """Tracks filtered and ordered on titulo."""
        with self._store_errors("list tracks"):
            query = apply_listing(self.session.query(Track), Track.titulo, params)
            return query.all()

    def update(self, track_id: int, titulo: str, artista: str) -> int:
        """Overwrite title and artist; returns the number of rows touched (0 if no such track)."""
        with self._store_errors("update track"):
            updated = (
                self.session.query(Track)
                .filter(Track.id == track_id)
                .update({"titulo": titulo, "artista": artista}, synchronize_session=False)
            )
            self.session.commit()
        return updated


class PlaylistRepository(Repository):
    def create(self, nome: str, descricao: str | None, criador: str | None) -> Playlist:
        playlist = Playlist(nome=nome, descricao=descricao, criador=criador)
        with self._store_errors("insert playlist"):
            self.session.add(playlist)
            self.session.commit()
            self.session.refresh(playlist)
        return playlist

    def list_page(self, params: ListParams) -> list[Playlist]:
        """Playlists filtered and ordered on nome."""
        with self._store_errors("list playlists"):
            query = apply_listing(self.session.query(Playlist), Playlist.nome, params)
            return query.all()


class MembershipRepository(Repository):
    def add(self, playlist_id: int, musica_id: int) -> PlaylistTrack:
        """Insert a membership row. Unknown ids fail on the foreign keys and surface as StoreError."""
        row = PlaylistTrack(playlist_id=playlist_id, musica_id=musica_id)
        with self._store_errors("insert playlist membership"):
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        return row

    def list_tracks(self, playlist_id: int, params: ListParams) -> list[Track]:
        """Tracks joined through membership for one playlist, filtered and ordered on titulo."""
        with self._store_errors("list playlist tracks"):
            query = (
                self.session.query(Track)
                .join(PlaylistTrack, PlaylistTrack.musica_id == Track.id)
                .filter(PlaylistTrack.playlist_id == playlist_id)
            )
            return apply_listing(query, Track.titulo, params).all()

    def remove(self, playlist_id: int, musica_id: int) -> int:
        """Delete every membership row matching both ids; returns the count removed."""
        with self._store_errors("delete playlist membership"):
            deleted = (
                self.session.query(PlaylistTrack)
                .filter(
                    PlaylistTrack.playlist_id == playlist_id,
                    PlaylistTrack.musica_id == musica_id,
                )
                .delete(synchronize_session=False)
            )
            self.session.commit()
        return deleted
