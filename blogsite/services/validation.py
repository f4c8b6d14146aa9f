from collections import defaultdict
from pathlib import PurePosixPath
from typing import Iterable, List, Optional

from blogsite.consts import TAGS
from blogsite.exceptions import (
    DuplicatePathError,
    InvalidTagError,
    MissingTagsError,
    SlugMismatchError,
)


def normalize_route(path: str) -> str:
    """Collapse a route to a leading slash and no trailing slash."""
    stripped = path.strip().strip("/")
    return f"/{stripped}" if stripped else "/"


def derive_slug(source: str, blog_path: str) -> str:
    """
    Derive the route of a post from its location under the content dir.
    `2023/hello.md` -> `/blog/2023/hello`, `hello/index.mdx` -> `/blog/hello`.
    """
    relative = PurePosixPath(source).with_suffix("")
    if relative.name == "index":
        relative = relative.parent
    base = normalize_route(blog_path).rstrip("/")
    rel = relative.as_posix().strip("/")
    if rel in ("", "."):
        return normalize_route(base)
    return f"{base}/{rel}"


def validate_tags(
    tags, source: Optional[str] = None, valid_tags: Iterable[str] = TAGS
) -> List[str]:
    if not isinstance(tags, (list, tuple)) or not tags:
        raise MissingTagsError(source)

    allowed = set(valid_tags)
    for tag in tags:
        if not isinstance(tag, str) or tag not in allowed:
            raise InvalidTagError(str(tag), source)
    return list(tags)


def validate_path(declared: str, derived: str, source: Optional[str] = None) -> str:
    if normalize_route(declared) != normalize_route(derived):
        raise SlugMismatchError(declared, derived, source)
    return normalize_route(declared)


def ensure_unique_paths(posts) -> None:
    by_path = defaultdict(list)
    for post in posts:
        by_path[post.path].append(post.source)
    for path, sources in by_path.items():
        if len(sources) > 1:
            raise DuplicatePathError(path, tuple(sources))


def is_published(post, development: bool) -> bool:
    # In development everything is visible, drafts included
    return development or not post.isDraft


def category_slug(tag: str) -> str:
    return tag.replace("/", "-")


def category_from_slug(slug: str, valid_tags: Iterable[str] = TAGS) -> Optional[str]:
    for tag in valid_tags:
        if category_slug(tag) == slug:
            return tag
    return None
