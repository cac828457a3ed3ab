"""List Helper — pure summary statistics over a collection of posts.

Invariants:
    - No IO, no DB, no mutation of the input sequence or its elements
    - Empty input: total_likes -> 0, every other statistic -> None (dummy -> 1)
    - Ties resolve to the FIRST candidate in input order (strictly-greater fold)
    - Grouping by author is insertion-ordered by first occurrence

Design Decisions:
    - Accepts any PostLike (ORM row, schema, dataclass) — only author/likes read
    - Accumulators are local to each call: safe to call from concurrent requests
    - most_likes shares the leftmost-wins tie-break of most_blogs
"""

from collections.abc import Callable, Sequence
from typing import TypedDict, TypeVar

from bloglist.core.repository_protocols import PostLike

P = TypeVar("P", bound=PostLike)
T = TypeVar("T")


class AuthorBlogs(TypedDict):
    author: str
    blogs: int


class AuthorLikes(TypedDict):
    author: str
    likes: int


def dummy(posts: Sequence[PostLike]) -> int:
    """Scaffold sanity check. Always 1, whatever the input."""
    return 1


def total_likes(posts: Sequence[PostLike]) -> int:
    return sum(post.likes for post in posts)


def favorite_blog(posts: Sequence[P]) -> P | None:
    """Post with the most likes; the earliest one wins a tie."""
    return _first_max(posts, key=lambda post: post.likes)


def most_blogs(posts: Sequence[PostLike]) -> AuthorBlogs | None:
    """Author with the most posts, as {"author", "blogs"}."""
    counts = _group_by_author(posts, lambda total, _post: total + 1)
    best = _first_max(list(counts.items()), key=lambda item: item[1])
    if best is None:
        return None
    author, blogs = best
    return {"author": author, "blogs": blogs}


def most_likes(posts: Sequence[PostLike]) -> AuthorLikes | None:
    """Author with the highest summed likes, as {"author", "likes"}."""
    sums = _group_by_author(posts, lambda total, post: total + post.likes)
    best = _first_max(list(sums.items()), key=lambda item: item[1])
    if best is None:
        return None
    author, likes = best
    return {"author": author, "likes": likes}


# ─── Helpers ────────────────────────────────────────────────────

def _first_max(items: Sequence[T], key: Callable[[T], int]) -> T | None:
    """Left fold keeping the current best unless a later item is strictly greater."""
    best: T | None = None
    for item in items:
        if best is None or key(item) > key(best):
            best = item
    return best


def _group_by_author(
    posts: Sequence[PostLike], step: Callable[[int, PostLike], int],
) -> dict[str, int]:
    """Single pass, author -> accumulated int, in first-occurrence order."""
    groups: dict[str, int] = {}
    for post in posts:
        groups[post.author] = step(groups.get(post.author, 0), post)
    return groups
