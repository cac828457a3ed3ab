"""Stats Schemas — response shape of the reporting endpoint."""

from pydantic import BaseModel

from bloglist.schemas.post import PostResponse


class AuthorBlogsResponse(BaseModel):
    author: str
    blogs: int


class AuthorLikesResponse(BaseModel):
    author: str
    likes: int


class StatsResponse(BaseModel):
    """Aggregates over every stored post; null fields mean no posts yet."""
    total_likes: int
    favorite_blog: PostResponse | None
    most_blogs: AuthorBlogsResponse | None
    most_likes: AuthorLikesResponse | None
