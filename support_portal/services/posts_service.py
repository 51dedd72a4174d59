import datetime
import logging
from typing import List, Optional

from support_portal.repos.posts_repo import FilesystemPostsRepo, MalformedPostError
from support_portal.schemas.post import PostDetail, PostSummary, RenderedArticle
from support_portal.services.headings import extract_headings
from support_portal.services.markdown_renderer import MarkdownRenderer
from support_portal.services.search import filter_posts

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo: FilesystemPostsRepo, renderer: MarkdownRenderer):
        self.repo = repo
        self.renderer = renderer

    def list_posts(self) -> List[PostSummary]:
        posts = []
        for path in self.repo.list_post_files():
            slug = self.repo.slug_for(path)
            try:
                parsed = self.repo.load(path)
            except MalformedPostError as e:
                logger.warning(f"Skipping post {slug}: {e.reason}")
                continue
            posts.append(PostSummary(**parse_post_meta(parsed.metadata, slug)))

        # newest first; sort is stable so ties keep filename order
        posts.sort(key=lambda p: p.date, reverse=True)
        return posts

    def search_posts(self, query: str) -> List[PostSummary]:
        return filter_posts(self.list_posts(), query)

    def get_post(self, slug: str) -> Optional[PostDetail]:
        path = self.repo.find_post_file(slug)
        if not path:
            return None

        safe_slug = self.repo.slug_for(path)
        try:
            parsed = self.repo.load(path)
        except MalformedPostError as e:
            logger.warning(f"Failed to parse post {safe_slug}: {e.reason}")
            return None

        return PostDetail(
            **parse_post_meta(parsed.metadata, safe_slug), content=parsed.content
        )

    def get_article(self, slug: str) -> Optional[RenderedArticle]:
        post = self.get_post(slug)
        if not post:
            return None
        return RenderedArticle(
            post=post,
            html=self.renderer.render(post.content),
            headings=extract_headings(post.content),
        )


def parse_post_meta(metadata: dict, slug: str) -> dict:
    """Front matter -> PostSummary fields, substituting defaults for absent keys."""
    metadata = metadata or {}
    return {
        "slug": slug,
        "title": _optional_str(metadata.get("title")) or slug,
        "description": _optional_str(metadata.get("description")) or "",
        "date": _convert_date(metadata.get("date"), slug),
        "tags": _normalize_list(metadata.get("tags")),
        "category": _optional_str(metadata.get("category")),
        "thumbnail": _optional_str(metadata.get("thumbnail")),
        "keywords": _normalize_list(metadata.get("keywords")),
    }


def _optional_str(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _normalize_list(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]


def _convert_date(value, slug: str = "") -> datetime.datetime:
    now = datetime.datetime.now(datetime.timezone.utc)
    if value is None or value == "":
        return now

    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime.combine(value, datetime.time.min)
    else:
        try:
            parsed = datetime.datetime.fromisoformat(str(value).strip())
        except ValueError:
            logger.warning(f"Unparseable date {value!r} for post {slug}, using now")
            return now

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed
