"""Statistics over a collection of blogs.

All functions accept any sequence of blog-like records: mappings with
``author``/``likes`` keys, or objects with those attributes (ORM rows,
response schemas). A missing or ``None`` like count counts as 0. Empty input
gives 0 for :func:`total_likes` and ``None`` for the others. Inputs are never
mutated.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypedDict


class AuthorBlogs(TypedDict):
    author: str | None
    blogs: int


class AuthorLikes(TypedDict):
    author: str | None
    likes: int


def _field(blog: Any, name: str) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name)
    return getattr(blog, name, None)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def total_likes(blogs: Iterable[Any]) -> int:
    """Sum of likes over all blogs."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Iterable[Any]) -> Any | None:
    """The blog with the most likes; the earliest one wins a tie."""
    favorite = None
    for blog in blogs:
        if favorite is None or _likes(blog) > _likes(favorite):
            favorite = blog
    return favorite


def _leader(blogs: Iterable[Any], weight) -> tuple[str | None, int] | None:
    """Author with the highest total, ties going to the author seen first.

    Totals are kept in order of each author's first appearance, so a strict
    comparison over them leaves the earliest author in front on equal totals.
    """
    totals: dict[str | None, int] = {}
    for blog in blogs:
        author = _field(blog, "author")
        totals[author] = totals.get(author, 0) + weight(blog)

    leader: tuple[str | None, int] | None = None
    for author, total in totals.items():
        if leader is None or total > leader[1]:
            leader = (author, total)
    return leader


def most_blogs(blogs: Iterable[Any]) -> AuthorBlogs | None:
    """The author with the most blogs, with that count."""
    leader = _leader(blogs, lambda blog: 1)
    if leader is None:
        return None
    author, count = leader
    return {"author": author, "blogs": count}


def most_likes(blogs: Iterable[Any]) -> AuthorLikes | None:
    """The author whose blogs have the most likes in total, with that total."""
    leader = _leader(blogs, _likes)
    if leader is None:
        return None
    author, likes = leader
    return {"author": author, "likes": likes}
