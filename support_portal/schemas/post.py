from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    slug: str
    title: str
    description: str = ""
    date: datetime
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    thumbnail: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class PostDetail(PostSummary):
    content: str  # Markdown body without front matter


class Heading(BaseModel):
    level: Literal[1, 2, 3]
    text: str
    id: str


class RenderedArticle(BaseModel):
    post: PostDetail
    html: str
    headings: List[Heading] = Field(default_factory=list)
