"""Stats Route — reporting endpoint backed by core/list_helper.py.

Invariants:
    - Read-only, public
    - Empty store: total_likes 0, every other field null
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.infrastructure.database import get_db
from bloglist.schemas.stats import StatsResponse
from bloglist.services.stats_service import StatsService

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
async def get_stats(db: AsyncSession = Depends(get_db)):
    """Total likes, favorite post, most prolific and most liked author."""
    summary = await StatsService(db).summary()
    return StatsResponse.model_validate(summary, from_attributes=True)
