import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PostRecord(BaseModel):
    """A validated content entry. Immutable for the lifetime of a build."""

    model_config = ConfigDict(frozen=True)

    path: str
    slug: str
    source: str
    title: str
    description: str
    date: datetime.datetime
    updatedDate: Optional[datetime.datetime] = None
    tags: List[str]
    isDraft: bool = False
    featuredImage: Optional[str] = None
    imageDescription: Optional[str] = None
    content: str = ""


class TagBadge(BaseModel):
    name: str
    icon: str = ""
    href: str


class PostSummary(BaseModel):
    path: str
    title: str
    description: str
    date: str
    displayDate: str
    tags: List[TagBadge] = Field(default_factory=list)
    featuredImage: Optional[str] = None
    imageDescription: Optional[str] = None
    readingTime: Optional[str] = None
    isDraft: bool = False


class ShareLinks(BaseModel):
    facebook: str
    linkedin: str
    reddit: str
    twitter: str


class PostDetail(PostSummary):
    content: str  # Markdown content without frontmatter
    html: str
    updatedDate: Optional[str] = None
    share: Optional[ShareLinks] = None


class PageWindow(BaseModel):
    path: str
    skip: int
    limit: int
    numPages: int
    currentPage: int  # 1-based
    previousPath: Optional[str] = None
    nextPath: Optional[str] = None


class PaginationPlan(BaseModel):
    totalPosts: int
    postsPerPage: int
    numPages: int
    pages: List[PageWindow] = Field(default_factory=list)


class BlogPage(BaseModel):
    pager: PageWindow
    featured: Optional[PostSummary] = None
    posts: List[PostSummary] = Field(default_factory=list)


class CategoryPage(BaseModel):
    category: str
    path: str
    posts: List[PostSummary] = Field(default_factory=list)
