"""ORM model for application users (auth and RBAC)."""

from enum import Enum

from sqlalchemy import Column, Integer, String

from musica_api.models.base import Base


class Role(str, Enum):
    """Closed role set. Only ADMIN grants write access to the catalog."""

    ADMIN = "Admin"
    STANDARD = "Standard"

    @classmethod
    def parse(cls, value: object) -> "Role":
        """Map a stored or claimed role string to a Role; unknown values are non-privileged."""
        if isinstance(value, cls):
            return value
        if value == cls.ADMIN.value:
            return cls.ADMIN
        return cls.STANDARD


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'Admin' or 'Standard'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=Role.STANDARD.value)
