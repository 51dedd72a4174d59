import logging
import re
from pathlib import Path
from typing import List, Optional

import frontmatter
import yaml

logger = logging.getLogger(__name__)

# Probe order for lookups: the richer extension wins
POST_EXTENSIONS = (".mdx", ".md")
_EXTENSION_RE = re.compile(r"\.mdx?$")


class MalformedPostError(ValueError):
    """Raised when a content file cannot be split into front matter and body."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path.name}: {reason}")
        self.path = path
        self.reason = reason


class FilesystemPostsRepo:
    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            logger.debug(f"Content directory {self.content_dir} does not exist yet")
            return []
        by_slug = {}
        for path in sorted(self.content_dir.iterdir()):
            if not (path.is_file() and path.name.endswith(POST_EXTENSIONS)):
                continue
            slug = self.slug_for(path)
            shadowed = by_slug.get(slug)
            if shadowed is not None:
                # same probe order as find_post_file
                keep, drop = sorted(
                    (shadowed, path), key=lambda p: POST_EXTENSIONS.index(p.suffix)
                )
                logger.warning(f"{drop.name} is shadowed by {keep.name}")
                path = keep
            by_slug[slug] = path
        return sorted(by_slug.values())

    def find_post_file(self, slug: str) -> Optional[Path]:
        safe_slug = sanitize_slug(slug)
        if not safe_slug:
            return None

        for ext in POST_EXTENSIONS:
            path = self.content_dir / f"{safe_slug}{ext}"
            if path.is_file():
                return path

        logger.warning(f"No file for slug: {safe_slug}")
        return None

    def load(self, path: Path) -> frontmatter.Post:
        try:
            return frontmatter.loads(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise MalformedPostError(path, f"invalid front matter ({e})") from e
        except UnicodeDecodeError as e:
            raise MalformedPostError(path, "file is not valid UTF-8") from e

    @staticmethod
    def slug_for(path: Path) -> str:
        # e.g. "troubleshoot-login-failures.mdx" -> "troubleshoot-login-failures"
        return _EXTENSION_RE.sub("", path.name)


def sanitize_slug(slug: Optional[str]) -> str:
    if not slug:
        return ""
    return re.sub(r"[/\\]", "", slug).strip()
