import logging
import math
from typing import Callable, Optional, Sequence

from blogsite.schemas.blog import BlogPage, PageWindow, PaginationPlan

logger = logging.getLogger(__name__)


def page_path(index: int, base_path: str = "/blog/") -> str:
    """Route of the 0-indexed listing page: `/blog/`, `/blog/2`, `/blog/3`, ..."""
    root = "/" + base_path.strip("/")
    if index == 0:
        return root.rstrip("/") + "/"
    return f"{root.rstrip('/')}/{index + 1}"


def plan_pages(
    total_posts: int, posts_per_page: int, base_path: str = "/blog/"
) -> PaginationPlan:
    if posts_per_page <= 0:
        raise ValueError("posts_per_page must be positive")
    if total_posts < 0:
        raise ValueError("total_posts cannot be negative")

    num_pages = math.ceil(total_posts / posts_per_page)
    pages = []
    for i in range(num_pages):
        pages.append(
            PageWindow(
                path=page_path(i, base_path),
                skip=i * posts_per_page,
                limit=posts_per_page,
                numPages=num_pages,
                currentPage=i + 1,
                previousPath=page_path(i - 1, base_path) if i > 0 else None,
                nextPath=page_path(i + 1, base_path) if i + 1 < num_pages else None,
            )
        )

    logger.debug(f"Planned {num_pages} pages for {total_posts} posts")
    return PaginationPlan(
        totalPosts=total_posts,
        postsPerPage=posts_per_page,
        numPages=num_pages,
        pages=pages,
    )


def paginate(
    posts: Sequence,
    plan: PaginationPlan,
    page_number: int,
    summarize: Optional[Callable] = None,
) -> Optional[BlogPage]:
    """
    Build the 1-based listing page from date-sorted posts. The first page
    promotes its most recent post to the featured slot.
    """
    if page_number < 1 or page_number > plan.numPages:
        return None

    window = plan.pages[page_number - 1]
    selected = list(posts[window.skip : window.skip + window.limit])
    if summarize:
        selected = [summarize(post) for post in selected]

    featured = selected.pop(0) if page_number == 1 and selected else None
    return BlogPage(pager=window, featured=featured, posts=selected)
