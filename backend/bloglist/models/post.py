"""Post ORM — a shared reference to an external article.

Invariants:
    - title, author, url are non-nullable
    - likes is non-negative (CHECK constraint), defaults to 0
    - user_id references the owning user; NULL only for rows imported without owner

Design Decisions:
    - user relationship eager-loaded (selectin): every post response embeds its owner
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Integer, DateTime, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bloglist.core.domain_types import (
    TITLE_MAX_LENGTH, AUTHOR_MAX_LENGTH, URL_MAX_LENGTH,
)
from bloglist.db.base import Base


class Post(Base):
    """Post entity — title, author, url, like count, owner."""
    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_posts_likes_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    author: Mapped[str] = mapped_column(String(AUTHOR_MAX_LENGTH), nullable=False)
    url: Mapped[str] = mapped_column(String(URL_MAX_LENGTH), nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User | None"] = relationship(
        "User", back_populates="posts", lazy="selectin",
    )
