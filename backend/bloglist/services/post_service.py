"""Post Service — persistence operations for posts and their ownership link.

Invariants:
    - Every created post is linked to its owner (user_id + owner.posts)
    - Only the owner may delete a post
    - Unknown ids raise ResourceNotFoundError (404), never return None to routes

Design Decisions:
    - Service owns the commit: routes stay free of transaction handling
    - Updates are partial (exclude_unset): a likes-only PUT keeps the other fields
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.core.domain_types import PostId
from bloglist.core.errors import (
    ErrorContext, InvalidInputError, PermissionDeniedError, ResourceNotFoundError,
)
from bloglist.models.post import Post
from bloglist.models.user import User
from bloglist.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)


class PostService:
    """Post store operations over one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_posts(self) -> list[Post]:
        result = await self.db.execute(
            select(Post).order_by(Post.created_at),
        )
        return list(result.scalars().all())

    async def get_post_or_404(self, post_id: PostId) -> Post:
        result = await self.db.execute(
            select(Post).where(Post.id == post_id),
        )
        post = result.scalar_one_or_none()
        if not post:
            raise ResourceNotFoundError(
                "Post", str(post_id), ErrorContext(post_id=str(post_id)),
            )
        return post

    async def create_post(self, data: PostCreate, owner: User) -> Post:
        post = Post(
            title=data.title,
            author=data.author,
            url=data.url,
            likes=data.likes,
            user=owner,
        )
        self.db.add(post)
        await self.db.commit()
        logger.info(
            "Post created",
            extra={"post_id": post.id, "user_id": owner.id},
        )
        return post

    async def update_post(self, post_id: PostId, data: PostUpdate) -> Post:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise InvalidInputError(
                "Update must change at least one field", "body",
                ErrorContext(post_id=str(post_id)),
            )
        post = await self.get_post_or_404(post_id)
        for field_name, value in changes.items():
            setattr(post, field_name, value)
        await self.db.commit()
        logger.info(
            f"Post updated: {', '.join(sorted(changes))}",
            extra={"post_id": post.id},
        )
        return post

    async def delete_post(self, post_id: PostId, user: User) -> None:
        post = await self.get_post_or_404(post_id)
        if post.user_id != user.id:
            raise PermissionDeniedError(
                "Only the creator can delete a post",
                ErrorContext(post_id=str(post_id), user_id=str(user.id)),
            )
        await self.db.delete(post)
        await self.db.commit()
        logger.info(
            "Post deleted", extra={"post_id": post_id, "user_id": user.id},
        )
