from typing import List, Sequence

from support_portal.schemas.post import PostSummary


def filter_posts(posts: Sequence[PostSummary], query: str) -> List[PostSummary]:
    """Case-insensitive substring match over a post's searchable fields."""
    q = (query or "").strip().lower()
    if not q:
        return list(posts)
    return [post for post in posts if q in searchable_text(post)]


def searchable_text(post: PostSummary) -> str:
    parts = [
        post.title,
        post.description,
        post.category,
        *post.tags,
        *post.keywords,
    ]
    return " ".join(part for part in parts if part).lower()
