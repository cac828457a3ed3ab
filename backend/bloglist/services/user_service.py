"""User Service — registration, lookup, and credential checks.

Invariants:
    - Usernames are unique; a duplicate raises UsernameTakenError, whether the
      lookup catches it or the unique index does on commit
    - Passwords stored only as hashes (infrastructure/auth.py)
    - authenticate() gives the same error for unknown user and wrong password
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.core.domain_types import UserId
from bloglist.core.errors import AuthenticationError, UsernameTakenError
from bloglist.infrastructure.auth import hash_password, verify_password
from bloglist.models.user import User
from bloglist.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """User store operations over one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self) -> list[User]:
        result = await self.db.execute(
            select(User).order_by(User.created_at),
        )
        return list(result.scalars().all())

    async def get_by_id(self, user_id: UserId) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def create_user(self, data: UserCreate) -> User:
        if await self.get_by_username(data.username):
            logger.warning(
                "Registration rejected: username taken",
                extra={"username": data.username},
            )
            raise UsernameTakenError(data.username)
        user = User(
            username=data.username,
            name=data.name,
            password_hash=hash_password(data.password),
            posts=[],
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            logger.warning(
                "Registration rejected: username taken on commit",
                extra={"username": data.username},
            )
            raise UsernameTakenError(data.username) from exc
        logger.info(
            "User created", extra={"user_id": user.id, "username": user.username},
        )
        return user

    async def authenticate(self, username: str, password: str) -> User:
        user = await self.get_by_username(username)
        if user is None or not verify_password(user.password_hash, password):
            logger.info("Login failed", extra={"username": username})
            raise AuthenticationError(
                "Invalid username or password", "INVALID_CREDENTIALS",
            )
        return user
