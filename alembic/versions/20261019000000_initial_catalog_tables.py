"""Initial tables: users, musica, playlist, playlist_musica.

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="Standard"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "musica",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("titulo", sa.String(length=255), nullable=False),
        sa.Column("artista", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_musica_titulo"), "musica", ["titulo"], unique=False)

    op.create_table(
        "playlist",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nome", sa.String(length=255), nullable=False),
        sa.Column("descricao", sa.Text(), nullable=True),
        sa.Column("criador", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_playlist_nome"), "playlist", ["nome"], unique=False)

    op.create_table(
        "playlist_musica",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("playlist_id", sa.Integer(), nullable=False),
        sa.Column("musica_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["playlist_id"], ["playlist.id"]),
        sa.ForeignKeyConstraint(["musica_id"], ["musica.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_playlist_musica_playlist_id"), "playlist_musica", ["playlist_id"], unique=False
    )
    op.create_index(
        op.f("ix_playlist_musica_musica_id"), "playlist_musica", ["musica_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_playlist_musica_musica_id"), table_name="playlist_musica")
    op.drop_index(op.f("ix_playlist_musica_playlist_id"), table_name="playlist_musica")
    op.drop_table("playlist_musica")
    op.drop_index(op.f("ix_playlist_nome"), table_name="playlist")
    op.drop_table("playlist")
    op.drop_index(op.f("ix_musica_titulo"), table_name="musica")
    op.drop_table("musica")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
