"""Credential store: lookup and creation of users."""

import logging

from sqlalchemy.exc import IntegrityError

from musica_api.core.errors import DuplicateUsernameError
from musica_api.core.security import hash_password
from musica_api.models.user import Role, User
from musica_api.repositories.base import Repository

logger = logging.getLogger(__name__)

USERNAME_TAKEN_MESSAGE = "Username already exists"


class UserRepository(Repository):
    def find_by_username(self, username: str) -> User | None:
        with self._store_errors("find user by username"):
            return self.session.query(User).filter(User.username == username).first()

    def create(self, username: str, password: str, role: Role) -> User:
        """
        Insert a user after an existence check. The password is hashed only
        once the username is known to be free.

        The unique index on username catches a concurrent signup that passed
        the check; both paths raise DuplicateUsernameError.
        """
        if self.find_by_username(username) is not None:
            raise DuplicateUsernameError(USERNAME_TAKEN_MESSAGE)
        user = User(username=username, password_hash=hash_password(password), role=role.value)
        with self._store_errors("insert user"):
            self.session.add(user)
            try:
                self.session.commit()
            except IntegrityError as e:
                self.session.rollback()
                logger.info("Signup lost insert race for username=%s", username)
                raise DuplicateUsernameError(USERNAME_TAKEN_MESSAGE, cause=e) from e
            self.session.refresh(user)
        return user
