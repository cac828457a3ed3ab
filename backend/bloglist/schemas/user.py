"""User & Login Schemas — registration, public user view, credentials, token.

Invariants:
    - UserCreate.username >= 3 chars, stripped; password >= 3 chars
    - LoginRequest.username stripped the same way, so login matches registration
    - UserResponse never carries password or password_hash
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bloglist.core.domain_types import (
    USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH, PASSWORD_MIN_LENGTH, NAME_MAX_LENGTH,
)


class UserCreate(BaseModel):
    username: str = Field(
        min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH,
    )
    name: str = Field("", max_length=NAME_MAX_LENGTH)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=1024)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < USERNAME_MIN_LENGTH:
            raise ValueError(
                f"username must be at least {USERNAME_MIN_LENGTH} characters",
            )
        return v


class UserPost(BaseModel):
    """Post summary embedded in a user response."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str
    posts: list[UserPost] = []


class LoginRequest(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip()


class TokenResponse(BaseModel):
    token: str
    username: str
    name: str
