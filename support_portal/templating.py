from datetime import datetime
from pathlib import Path

from fastapi.templating import Jinja2Templates

from support_portal.services.search import searchable_text

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

# "Try ..." chips on the listing page: (label, query)
SEARCH_SUGGESTIONS = [
    ("provisioning delay", "provisioning"),
    ("login failure", "login failure"),
]

TOC_INDENT = {1: "0.75rem", 2: "1.5rem", 3: "2.25rem"}


def format_date(value: datetime) -> str:
    return value.strftime("%b %d, %Y")


def pluralize(count: int, singular: str, plural: str = "") -> str:
    return singular if count == 1 else (plural or f"{singular}s")


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["searchable_text"] = searchable_text
templates.env.globals.update(
    pluralize=pluralize,
    toc_indent=TOC_INDENT,
    search_suggestions=SEARCH_SUGGESTIONS,
)
