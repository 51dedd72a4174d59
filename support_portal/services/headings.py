import re
from typing import Dict, List, Set, Tuple

from support_portal.schemas.post import Heading

_PUNCTUATION_RE = re.compile(r"""[`~!@#$%^&*()+=<>?,./:;"'|\[\]\\{}]""")
_WHITESPACE_RE = re.compile(r"\s+")
# Same line breaks markdown-it normalizes, so line numbers agree with token.map
_LINE_BREAK_RE = re.compile(r"\r\n?|\n")
_CLOSING_SEQUENCE_RE = re.compile(r"(?:^|\s+)#+\s*$")
_FENCE_OPEN_RE = re.compile(r"^(`{3,}|~{3,})(.*)$")
MAX_TOC_LEVEL = 3


def slugify(text: str) -> str:
    """Anchor id for a heading: lowercase, punctuation removed, spaces to hyphens."""
    text = _PUNCTUATION_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub("-", text).strip()


class HeadingSlugger:
    """Hands out unique anchor ids, suffixing repeats with -1, -2, ..."""

    def __init__(self):
        self.seen: Set[str] = set()

    def slug(self, text: str) -> str:
        base = slugify(text)
        candidate = base
        suffix = 1
        while candidate in self.seen:
            candidate = f"{base}-{suffix}"
            suffix += 1
        self.seen.add(candidate)
        return candidate


def scan_headings(markdown: str) -> List[Tuple[int, Heading]]:
    """
    Return (line number, heading) pairs for every #, ## and ### heading
    outside fenced code blocks.
    """
    slugger = HeadingSlugger()
    found = []
    fence = ""

    for line_no, line in enumerate(_LINE_BREAK_RE.split(markdown or "")):
        if fence:
            if _closes_fence(line, fence):
                fence = ""
            continue

        fence = _opening_fence(line)
        if fence:
            continue

        level = _heading_level(line)
        if not level:
            continue

        text = _CLOSING_SEQUENCE_RE.sub("", line[level:].strip()).strip()
        found.append(
            (line_no, Heading(level=level, text=text, id=slugger.slug(text)))
        )

    return found


def extract_headings(markdown: str) -> List[Heading]:
    return [heading for _, heading in scan_headings(markdown)]


def headings_by_line(markdown: str) -> Dict[int, Heading]:
    return dict(scan_headings(markdown))


def _heading_level(line: str) -> int:
    for level in range(1, MAX_TOC_LEVEL + 1):
        if line.startswith("#" * level + " "):
            return level
    return 0


def _opening_fence(line: str) -> str:
    """The fence marker a line opens (e.g. "````" or "~~~"), or ""."""
    match = _FENCE_OPEN_RE.match(line.strip())
    if not match:
        return ""
    marker, info = match.groups()
    # a backtick fence's info string may not contain backticks (inline code)
    if marker[0] == "`" and "`" in info:
        return ""
    return marker


def _closes_fence(line: str, fence: str) -> bool:
    stripped = line.strip()
    return (
        len(stripped) >= len(fence)
        and stripped[0] == fence[0]
        and stripped == fence[0] * len(stripped)
    )
