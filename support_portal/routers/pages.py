import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from support_portal import dependencies as deps
from support_portal.services.posts_service import PostsService
from support_portal.services.scroll_tracker import ScrollTracker
from support_portal.services.search import filter_posts
from support_portal.settings import Settings
from support_portal.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()


def server_urls() -> dict:
    """URL helpers for pages served by the app (the static export uses relative ones)."""
    return {
        "static_root": "/static",
        "home_url": "/",
        "article_url": lambda slug: f"/support/{quote(slug, safe='')}",
    }


def branding(current_settings: Settings) -> dict:
    return {
        "portal_title": current_settings.PORTAL_TITLE,
        "org_name": current_settings.ORG_NAME,
    }


def listing_context(service: PostsService, query: str = "") -> dict:
    posts = service.list_posts()
    results = filter_posts(posts, query)
    return {
        "posts": posts,
        "results": results,
        "result_slugs": {post.slug for post in results},
        "query": query.strip(),
    }


def article_context(service: PostsService, slug: str, lookahead: int) -> dict | None:
    article = service.get_article(slug)
    if not article:
        return None
    tracker = ScrollTracker(article.headings, lookahead=lookahead)
    return {
        "article": article,
        "post": article.post,
        "headings": article.headings,
        "active_id": tracker.active_id,
        "lookahead": tracker.lookahead,
    }


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    q: str = "",
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    context = {
        **server_urls(),
        **branding(current_settings),
        **listing_context(service, q),
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/support/{slug}", response_class=HTMLResponse)
def article(
    request: Request,
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    page = {**server_urls(), **branding(current_settings)}
    context = article_context(service, slug, current_settings.SCROLL_LOOKAHEAD)
    if context is None:
        return templates.TemplateResponse(
            request, "not_found.html", page, status_code=404
        )
    return templates.TemplateResponse(request, "article.html", {**page, **context})
