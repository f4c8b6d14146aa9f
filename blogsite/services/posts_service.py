import logging
from typing import List, Optional

from blogsite.consts import TAGS
from blogsite.schemas.blog import (
    BlogPage,
    CategoryPage,
    PaginationPlan,
    PostDetail,
    PostRecord,
    PostSummary,
)
from blogsite.services.content_parser import render_html
from blogsite.services.icon_service import tag_badges
from blogsite.services.pagination import paginate, plan_pages
from blogsite.services.share_service import build_share_links
from blogsite.services.validation import (
    category_slug,
    ensure_unique_paths,
    is_published,
    normalize_route,
)
from blogsite.utils import calculate_reading_time, format_display_date

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        repo,
        parser,
        posts_per_page: int = 5,
        development: bool = False,
        blog_path: str = "/blog/",
        categories_path: str = "/categories/",
        site_url: str = "",
    ):
        self.repo = repo
        self.parser = parser
        self.posts_per_page = posts_per_page
        self.development = development
        self.blog_path = blog_path
        self.categories_path = categories_path
        self.site_url = site_url

    def load_posts(self) -> List[PostRecord]:
        """Parse and validate every post, newest first. Any bad post raises."""
        posts = [self.parser.parse(f) for f in self.repo.list_post_files()]
        ensure_unique_paths(posts)
        posts.sort(key=lambda p: p.date, reverse=True)
        return posts

    def eligible_posts(self, posts: Optional[List[PostRecord]] = None) -> List[PostRecord]:
        if posts is None:
            posts = self.load_posts()
        eligible = []
        for post in posts:
            if not is_published(post, self.development):
                logger.info(f"SKIPPING (DRAFT): {post.path}")
                continue
            eligible.append(post)
        return eligible

    def pagination_plan(self, posts: Optional[List[PostRecord]] = None) -> PaginationPlan:
        if posts is None:
            posts = self.eligible_posts()
        return plan_pages(len(posts), self.posts_per_page, self.blog_path)

    def list_page(self, page_number: int = 1) -> Optional[BlogPage]:
        posts = self.eligible_posts()
        plan = self.pagination_plan(posts)
        return paginate(posts, plan, page_number, summarize=self.summarize)

    def category_posts(self, category: str) -> Optional[CategoryPage]:
        if category not in TAGS:
            return None
        posts = [p for p in self.eligible_posts() if category in p.tags]
        return CategoryPage(
            category=category,
            path=f"{self.categories_path.rstrip('/')}/{category_slug(category)}",
            posts=[self.summarize(p) for p in posts],
        )

    def get_post(self, path: str) -> Optional[PostDetail]:
        wanted = normalize_route(path)
        post = next((p for p in self.eligible_posts() if p.path == wanted), None)
        if not post:
            return None
        summary = self.summarize(post)
        return PostDetail(
            **summary.model_dump(),
            content=post.content,
            html=render_html(post.content),
            updatedDate=post.updatedDate.isoformat() if post.updatedDate else None,
            share=(
                build_share_links(self.site_url, post.path, post.title, post.description)
                if self.site_url
                else None
            ),
        )

    def summarize(self, post: PostRecord) -> PostSummary:
        return PostSummary(
            path=post.path,
            title=post.title,
            description=post.description,
            date=post.date.isoformat(),
            displayDate=format_display_date(post.date),
            tags=tag_badges(post.tags, self.categories_path),
            featuredImage=post.featuredImage,
            imageDescription=post.imageDescription,
            readingTime=calculate_reading_time(post.content),
            isDraft=post.isDraft,
        )
