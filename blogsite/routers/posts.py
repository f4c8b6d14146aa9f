import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blogsite import dependencies as deps
from blogsite.exceptions import ContentError
from blogsite.schemas.blog import BlogPage, CategoryPage, PostDetail
from blogsite.schemas.site import Route
from blogsite.services.page_generator import load_routes
from blogsite.services.posts_service import PostsService
from blogsite.services.validation import category_from_slug
from blogsite.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/blog", response_model=BlogPage)
def first_blog_page(service: PostsService = Depends(deps.get_posts_service)):
    """Get the first listing page, with the featured post."""
    return _get_page(service, 1)


@router.get("/blog/{page}", response_model=BlogPage)
def blog_page(page: int, service: PostsService = Depends(deps.get_posts_service)):
    """Get a listing page by its 1-based number."""
    return _get_page(service, page)


@router.get("/categories/{category}", response_model=CategoryPage)
def category_page(
    category: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts of a category, newest first."""
    try:
        tag = category_from_slug(category)
        result = service.category_posts(tag) if tag else None
        if not result:
            raise HTTPException(status_code=404, detail="Category not found")
        return result
    except HTTPException:
        raise
    except ContentError as e:
        logger.error(f"Content error building category {category}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error building category {category}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve category")


@router.get("/posts/{path:path}", response_model=PostDetail)
def get_post(
    path: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by its route path."""
    try:
        post = service.get_post(path)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except ContentError as e:
        logger.error(f"Content error retrieving post {path}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {path}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/routes", response_model=List[Route])
def list_routes():
    """Get the route manifest of the last build."""
    return load_routes(settings.routes_path)


def _get_page(service: PostsService, page: int) -> BlogPage:
    try:
        result = service.list_page(page)
        if not result:
            raise HTTPException(status_code=404, detail="Page not found")
        return result
    except HTTPException:
        raise
    except ContentError as e:
        logger.error(f"Content error listing page {page}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error listing page {page}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
