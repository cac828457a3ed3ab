"""Stats Service — loads the post snapshot and runs it through list_helper.

Invariants:
    - One read of all posts per call; the aggregator sees that snapshot only
    - No writes
"""

from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.core import list_helper
from bloglist.services.post_service import PostService


class StatsService:

    def __init__(self, db: AsyncSession):
        self.posts = PostService(db)

    async def summary(self) -> dict:
        posts = await self.posts.list_posts()
        return {
            "total_likes": list_helper.total_likes(posts),
            "favorite_blog": list_helper.favorite_blog(posts),
            "most_blogs": list_helper.most_blogs(posts),
            "most_likes": list_helper.most_likes(posts),
        }
