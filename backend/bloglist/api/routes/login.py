"""Login Route — exchanges username/password for a signed bearer token.

Invariants:
    - Wrong password and unknown username both return 401 INVALID_CREDENTIALS
    - Token lifetime and signing key come from settings
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.config import Settings, get_settings
from bloglist.infrastructure.auth import create_access_token
from bloglist.infrastructure.database import get_db
from bloglist.schemas.user import LoginRequest, TokenResponse
from bloglist.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/login", tags=["auth"])


@router.post("", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = await UserService(db).authenticate(body.username, body.password)
    token = create_access_token(
        user.id, user.username,
        settings.secret_key,
        settings.token_algorithm,
        settings.token_ttl_minutes,
    )
    logger.info("User logged in", extra={"user_id": user.id})
    return TokenResponse(token=token, username=user.username, name=user.name)
