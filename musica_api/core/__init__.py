"""Core app configuration, database, security and errors."""

from musica_api.core.config import get_settings
from musica_api.core.database import get_db

__all__ = ["get_settings", "get_db"]
