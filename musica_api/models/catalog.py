"""ORM models for the music catalog: tracks, playlists and playlist membership."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from musica_api.models.base import Base


class Track(Base):
    """A song in the catalog."""

    __tablename__ = "musica"

    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String(255), nullable=False, index=True)
    artista = Column(String(255), nullable=False)


class Playlist(Base):
    """
    Named collection of tracks.

    criador is free text supplied by the caller; it is not tied to a user row.
    """

    __tablename__ = "playlist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False, index=True)
    descricao = Column(Text, nullable=True)
    criador = Column(String(255), nullable=True)


class PlaylistTrack(Base):
    """Membership row linking a playlist to a track. Duplicates are allowed."""

    __tablename__ = "playlist_musica"

    id = Column(Integer, primary_key=True, autoincrement=True)
    playlist_id = Column(Integer, ForeignKey("playlist.id"), nullable=False, index=True)
    musica_id = Column(Integer, ForeignKey("musica.id"), nullable=False, index=True)
