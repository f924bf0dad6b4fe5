"""Request/response schemas for auth endpoints and token claims."""

from pydantic import BaseModel, Field, field_validator

from musica_api.models.user import Role

USERNAME_MAX_LEN = 255
PASSWORD_MAX_LEN = 128


class SignupRequest(BaseModel):
    """New account: username, password and role."""

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LEN, description="Username")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")
    role: Role = Field(default=Role.STANDARD, description="Admin or Standard")


class LoginRequest(BaseModel):
    """Credentials for login. No length rules: any mismatch is a plain 401."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class TokenResponse(BaseModel):
    """Signed token returned after successful login; send it as the Authorization header."""

    token: str = Field(..., description="JWT access token")


class UserResponse(BaseModel):
    """Created user (no password)."""

    id: int
    username: str
    role: Role

    class Config:
        from_attributes = True


class TokenClaims(BaseModel):
    """Identity carried inside an access token."""

    user_id: int
    username: str
    role: Role

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, v: object) -> Role:
        return Role.parse(v)
