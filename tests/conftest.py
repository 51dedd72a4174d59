import textwrap
from pathlib import Path

import pytest

from support_portal.repos.posts_repo import FilesystemPostsRepo
from support_portal.services.markdown_renderer import MarkdownRenderer
from support_portal.services.posts_service import PostsService


def write_post(content_dir: Path, filename: str, raw: str) -> Path:
    """Write a dedented markdown file into the content directory."""
    content_dir.mkdir(parents=True, exist_ok=True)
    path = content_dir / filename
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path) -> Path:
    return tmp_path / "content"


@pytest.fixture
def service(content_dir) -> PostsService:
    return PostsService(
        repo=FilesystemPostsRepo(content_dir), renderer=MarkdownRenderer()
    )


@pytest.fixture
def sample_posts(content_dir):
    write_post(
        content_dir,
        "a.md",
        """
        ---
        title: Alpha
        date: 2024-01-01
        tags: [setup]
        ---
        Alpha body.
        """,
    )
    write_post(
        content_dir,
        "b.mdx",
        """
        ---
        title: Beta
        description: Diagnose a login failure
        date: 2024-06-01
        category: Authentication
        keywords: [sso]
        ---
        # Beta

        ## Steps

        Run `whoami`.
        """,
    )
    return content_dir


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, search_posts_return=None, get_article_return=None):
        self._search_posts_return = search_posts_return or []
        self._get_article_return = get_article_return
        self.queries = []

    def list_posts(self):
        return self._search_posts_return

    def search_posts(self, query: str):
        self.queries.append(query)
        return self._search_posts_return

    def get_article(self, slug: str):
        return self._get_article_return
