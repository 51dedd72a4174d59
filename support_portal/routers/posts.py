import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from support_portal import dependencies as deps
from support_portal.schemas.post import PostSummary, RenderedArticle
from support_portal.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=List[PostSummary])
def list_posts(
    q: str = "",
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts metadata, optionally filtered by a search query."""
    try:
        return service.search_posts(q)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=RenderedArticle)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, rendered, with its table of contents."""
    try:
        article = service.get_article(slug)
        if not article:
            raise HTTPException(status_code=404, detail="Post not found")
        return article
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
