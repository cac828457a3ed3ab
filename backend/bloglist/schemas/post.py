"""Post Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - PostCreate: title, author, url required, stripped, non-empty
    - likes is an integer in [0, LIKES_MAX], 0 when absent
    - PostUpdate: every field optional, same constraints when present
    - PostResponse never exposes owner credentials (only id, username, name)
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bloglist.core.domain_types import (
    TITLE_MAX_LENGTH, AUTHOR_MAX_LENGTH, URL_MAX_LENGTH, LIKES_MAX,
)


def _strip_non_empty(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


class PostCreate(BaseModel):
    """Post creation — title and url are mandatory."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    author: str = Field(min_length=1, max_length=AUTHOR_MAX_LENGTH)
    url: str = Field(min_length=1, max_length=URL_MAX_LENGTH)
    likes: int = Field(0, ge=0, le=LIKES_MAX)

    @field_validator("title", "author", "url")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_non_empty(v)


class PostUpdate(BaseModel):
    """Post update — partial; unset fields keep their stored value."""
    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    author: str | None = Field(None, min_length=1, max_length=AUTHOR_MAX_LENGTH)
    url: str | None = Field(None, min_length=1, max_length=URL_MAX_LENGTH)
    likes: int | None = Field(None, ge=0, le=LIKES_MAX)

    @field_validator("title", "author", "url")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_non_empty(v)


class PostOwner(BaseModel):
    """Owner summary embedded in a post response."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str


class PostResponse(BaseModel):
    """Post response — public-facing post data with its owner."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int
    user: PostOwner | None = None
