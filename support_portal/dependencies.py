from functools import lru_cache

from fastapi import Depends

from support_portal.repos.posts_repo import FilesystemPostsRepo
from support_portal.services.markdown_renderer import MarkdownRenderer
from support_portal.services.posts_service import PostsService
from support_portal.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.content_path)


@lru_cache
def get_markdown_renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


def get_posts_service(
    repo=Depends(get_posts_repo),
    renderer=Depends(get_markdown_renderer),
):
    return PostsService(repo=repo, renderer=renderer)
