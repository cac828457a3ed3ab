"""Post Routes — list, create, update, delete shared blog posts.

Invariants:
    - GET is public; POST/PUT/DELETE require a bearer token (get_current_user)
    - POST returns 201 with the stored post; DELETE returns 204 with no body
    - Malformed post ids fail path validation (400 via the validation handler)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.api.deps import get_current_user
from bloglist.core.domain_types import PostId
from bloglist.infrastructure.database import get_db
from bloglist.models.user import User
from bloglist.schemas.post import PostCreate, PostResponse, PostUpdate
from bloglist.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(db: AsyncSession = Depends(get_db)):
    """List every post with its owner."""
    return await PostService(db).list_posts()


@router.post(
    "", response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return await PostService(db).create_post(body, user)


@router.put(
    "/{post_id}", response_model=PostResponse,
    dependencies=[Depends(get_current_user)],
)
async def update_post(
    post_id: UUID,
    body: PostUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update fields of a post. Any authenticated user may (e.g. to like it)."""
    return await PostService(db).update_post(PostId(post_id), body)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Delete a post. Only its creator may."""
    await PostService(db).delete_post(PostId(post_id), user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
