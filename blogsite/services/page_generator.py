import json
import logging
from pathlib import Path
from typing import List, Sequence

from blogsite.consts import ROUTES_FILE, SEARCH_INDEX_FILE, TAGS
from blogsite.schemas.blog import PostRecord
from blogsite.schemas.site import Route, RouteKind, SiteManifest
from blogsite.services.index_builder import build_search_index, write_search_index
from blogsite.services.pagination import plan_pages
from blogsite.services.validation import category_slug, is_published

logger = logging.getLogger(__name__)


def generate_site(
    posts: Sequence[PostRecord],
    posts_per_page: int = 5,
    development: bool = False,
    blog_path: str = "/blog/",
    categories_path: str = "/categories/",
) -> SiteManifest:
    """
    Compute every route of the site from validated posts.

    `posts` must already be sorted newest first; listing and category pages
    keep that order.
    """
    eligible = []
    for post in posts:
        if not is_published(post, development):
            logger.info(f"SKIPPING (DRAFT): {post.path}")
            continue
        eligible.append(post)

    routes: List[Route] = []
    routes.extend(_listing_routes(eligible, posts_per_page, blog_path))
    routes.extend(
        Route(
            path=post.path,
            kind=RouteKind.POST,
            context={"source": post.source, "slug": post.slug},
        )
        for post in eligible
    )
    routes.extend(_category_routes(eligible, categories_path))

    search_index = build_search_index(eligible, development=development)
    logger.info(
        f"Generated {len(routes)} routes from {len(eligible)} of {len(posts)} posts"
    )
    return SiteManifest(routes=routes, searchIndex=search_index)


def _listing_routes(posts, posts_per_page: int, blog_path: str) -> List[Route]:
    plan = plan_pages(len(posts), posts_per_page, blog_path)
    routes = []
    for window in plan.pages:
        page_posts = [p.path for p in posts[window.skip : window.skip + window.limit]]
        featured = None
        if window.currentPage == 1 and page_posts:
            featured = page_posts.pop(0)
        context = window.model_dump(exclude={"path"})
        context["posts"] = page_posts
        context["featured"] = featured
        routes.append(Route(path=window.path, kind=RouteKind.LISTING, context=context))
    return routes


def _category_routes(posts, categories_path: str) -> List[Route]:
    base = categories_path.rstrip("/")
    return [
        Route(
            path=f"{base}/{category_slug(tag)}",
            kind=RouteKind.CATEGORY,
            context={
                "category": tag,
                "posts": [p.path for p in posts if tag in p.tags],
            },
        )
        for tag in TAGS
    ]


def build_site(service, output_dir) -> SiteManifest:
    """
    Run a full build: load and validate every post, then write the route
    manifest and the search index. A content error raises before anything
    is written.
    """
    posts = service.load_posts()
    manifest = generate_site(
        posts,
        posts_per_page=service.posts_per_page,
        development=service.development,
        blog_path=service.blog_path,
        categories_path=service.categories_path,
    )

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    routes_payload = [route.model_dump(mode="json") for route in manifest.routes]
    (output_dir / ROUTES_FILE).write_text(
        json.dumps(routes_payload, indent=2), encoding="utf-8"
    )
    write_search_index(manifest.searchIndex, output_dir / SEARCH_INDEX_FILE)
    logger.info(f"Build written to {output_dir}")
    return manifest


def load_routes(path) -> List[Route]:
    path = Path(path)
    if not path.exists():
        logger.warning(f"Route manifest {path} not found")
        return []
    return [Route(**item) for item in json.loads(path.read_text(encoding="utf-8"))]
