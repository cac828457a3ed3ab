"""User Routes — registration and public user listing."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.infrastructure.database import get_db
from bloglist.schemas.user import UserCreate, UserResponse
from bloglist.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List users with the posts each one owns."""
    return await UserService(db).list_users()


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    return await UserService(db).create_user(body)
