"""Shared plumbing for repositories: session handling and store error mapping."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from musica_api.core.errors import StoreError

logger = logging.getLogger(__name__)

STORE_ERROR_MESSAGE = "Internal Server Error"


class Repository:
    """Base class holding the request-scoped session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        """Roll back and re-raise any SQLAlchemy failure as StoreError; the cause is logged only."""
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Store operation failed: %s", action)
            raise StoreError(STORE_ERROR_MESSAGE, cause=e) from e
