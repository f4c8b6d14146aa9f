from typing import List

from fastapi import Depends

from blogsite.repos.posts_repo import FilesystemPostsRepo
from blogsite.schemas.search import SearchRecord
from blogsite.services.content_parser import ContentParser
from blogsite.services.index_builder import load_search_index
from blogsite.services.posts_service import PostsService
from blogsite.settings import settings


def get_posts_repo():
    return FilesystemPostsRepo(settings.CONTENT_DIR)


def get_content_parser():
    return ContentParser(blog_path=settings.BLOG_PATH)


def get_posts_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
):
    return PostsService(
        repo=repo,
        parser=parser,
        posts_per_page=settings.POSTS_PER_PAGE,
        development=settings.is_development,
        blog_path=settings.BLOG_PATH,
        categories_path=settings.CATEGORIES_PATH,
        site_url=settings.SITE_URL,
    )


def get_search_index() -> List[SearchRecord]:
    return load_search_index(settings.search_index_path)
