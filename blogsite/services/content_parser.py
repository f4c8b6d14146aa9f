import datetime
import logging
from typing import Optional

import frontmatter
import markdown
import yaml
from pydantic import ValidationError

from blogsite.exceptions import InvalidFrontmatterError
from blogsite.schemas.blog import PostRecord
from blogsite.services.validation import derive_slug, validate_path, validate_tags

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]


class ContentParser:
    def __init__(self, blog_path: str = "/blog/"):
        self.blog_path = blog_path

    def parse(self, post_file: dict) -> PostRecord:
        """
        Turn a raw content file into a validated PostRecord.
        Raises a ContentError subclass when the file cannot be published.
        """
        source = post_file["source"]
        try:
            parsed = frontmatter.loads(post_file.get("raw") or "")
        except yaml.YAMLError as e:
            raise InvalidFrontmatterError(f"unreadable frontmatter ({e})", source)
        metadata = parsed.metadata or {}

        tags = validate_tags(metadata.get("tags"), source)

        slug = derive_slug(source, self.blog_path)
        declared = metadata.get("path") or slug
        if not isinstance(declared, str):
            raise InvalidFrontmatterError("path must be a string", source)
        path = validate_path(declared, slug, source)

        try:
            return PostRecord(
                path=path,
                slug=slug,
                source=source,
                title=metadata.get("title"),
                description=metadata.get("description"),
                date=_convert_date(metadata.get("date") or metadata.get("pubDate")),
                updatedDate=_convert_date(metadata.get("updatedDate")),
                tags=tags,
                isDraft=metadata.get("draft") or False,
                featuredImage=_resolve_image(
                    metadata.get("featuredImage") or metadata.get("heroImage"), path
                ),
                imageDescription=metadata.get("imageDescription"),
                content=parsed.content,
            )
        except (ValidationError, ValueError) as e:
            raise InvalidFrontmatterError(str(e), source)


def render_html(content: str) -> str:
    return markdown.markdown(content, extensions=MARKDOWN_EXTENSIONS)


def _convert_date(value) -> Optional[datetime.datetime]:
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.datetime.fromisoformat(value.strip())
    elif isinstance(value, datetime.date) and not isinstance(
        value, datetime.datetime
    ):
        value = datetime.datetime.combine(value, datetime.time.min)
    if isinstance(value, datetime.datetime) and value.tzinfo is None:
        # Naive dates sort alongside aware ones as UTC
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value


def _resolve_image(image_path, post_path: str) -> Optional[str]:
    """Relative image references live next to the post they belong to."""
    if not image_path or not isinstance(image_path, str):
        return None
    if image_path.startswith(("/", "http://", "https://")):
        return image_path
    filename = image_path.removeprefix("./")
    return f"{post_path.rstrip('/')}/{filename}"
