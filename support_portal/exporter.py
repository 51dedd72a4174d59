import logging
import shutil
from pathlib import Path
from typing import List
from urllib.parse import quote

from support_portal.routers.pages import article_context, branding, listing_context
from support_portal.services.posts_service import PostsService
from support_portal.settings import Settings, settings
from support_portal.templating import STATIC_DIR, templates

logger = logging.getLogger(__name__)


def export_site(
    output_dir: Path,
    service: PostsService,
    current_settings: Settings = settings,
) -> List[Path]:
    """
    Render the listing and every article to static HTML under output_dir.

    Layout mirrors the served routes: index.html, support/<slug>/index.html
    and static/. Returns the written HTML files.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    shutil.copytree(STATIC_DIR, output_dir / "static", dirs_exist_ok=True)

    written = []
    brand = branding(current_settings)
    listing = listing_context(service)
    index_path = output_dir / "index.html"
    _write(index_path, "index.html", {**_relative_urls(depth=0), **brand, **listing})
    written.append(index_path)

    for post in listing["posts"]:
        context = article_context(
            service, post.slug, current_settings.SCROLL_LOOKAHEAD
        )
        if context is None:
            # removed between listing and render
            logger.warning(f"Skipping export of {post.slug}: no longer available")
            continue
        page_path = output_dir / "support" / post.slug / "index.html"
        page_path.parent.mkdir(parents=True, exist_ok=True)
        _write(
            page_path, "article.html", {**_relative_urls(depth=2), **brand, **context}
        )
        written.append(page_path)

    logger.info(f"Exported {len(written)} pages to {output_dir}")
    return written


def _relative_urls(depth: int) -> dict:
    root = "../" * depth
    return {
        "static_root": f"{root}static",
        "home_url": f"{root}index.html",
        "article_url": lambda slug: f"{root}support/{quote(slug, safe='')}/index.html",
    }


def _write(path: Path, template_name: str, context: dict) -> None:
    html = templates.get_template(template_name).render(**context)
    path.write_text(html, encoding="utf-8")
