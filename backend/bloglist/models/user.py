"""User ORM — registered account that owns posts.

Invariants:
    - id is UUID primary key (client-side default)
    - username is unique and non-nullable
    - password_hash holds an Argon2 hash, never the raw password
    - posts ordered by creation time

Design Decisions:
    - cascade delete for posts: a user's posts go with the account
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bloglist.core.domain_types import USERNAME_MAX_LENGTH, NAME_MAX_LENGTH
from bloglist.db.base import Base


class User(Base):
    """User entity — owns a list of posts."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False, unique=True, index=True,
    )
    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=False, default="",
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="user",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Post.created_at",
    )
