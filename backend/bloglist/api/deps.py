"""Route Dependencies — bearer-token authentication for mutating routes.

Invariants:
    - Missing Authorization header or non-bearer scheme -> 401 TOKEN_MISSING
    - Bad signature, expired token, or deleted user -> 401 TOKEN_INVALID
    - Returns a User ORM row attached to the request's session

Design Decisions:
    - HTTPBearer(auto_error=False): the 401 envelope comes from BloglistError,
      not FastAPI's default 403 body
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.config import Settings, get_settings
from bloglist.core.domain_types import UserId
from bloglist.core.errors import AuthenticationError
from bloglist.infrastructure.auth import decode_access_token
from bloglist.infrastructure.database import get_db
from bloglist.models.user import User
from bloglist.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """Resolve the bearer token to its user or raise 401."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Token missing", "TOKEN_MISSING")
    claims = decode_access_token(
        credentials.credentials, settings.secret_key, settings.token_algorithm,
    )
    user = await UserService(db).get_by_id(UserId(claims["sub"]))
    if user is None:
        raise AuthenticationError("Token invalid", "TOKEN_INVALID")
    return user
