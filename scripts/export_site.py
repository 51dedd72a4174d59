import argparse
import logging
from pathlib import Path

from support_portal.exporter import export_site
from support_portal.repos.posts_repo import FilesystemPostsRepo
from support_portal.services.markdown_renderer import MarkdownRenderer
from support_portal.services.posts_service import PostsService
from support_portal.settings import settings

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the support portal to static HTML.")
    parser.add_argument("--output", type=Path, default=Path("dist"), help="Output directory")
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=settings.content_path,
        help="Directory of .md/.mdx articles",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = parse_args()
    service = PostsService(
        repo=FilesystemPostsRepo(args.content_dir), renderer=MarkdownRenderer()
    )
    try:
        export_site(args.output, service)
        logger.info("Export completed successfully.")
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        raise SystemExit(1)
