from typing import List

from blogsite.consts import TAG_ICONS, TAGS
from blogsite.schemas.blog import TagBadge
from blogsite.services.validation import category_slug


def icon_for_tag(tag: str) -> str:
    """Icon identifier for a tag, or an empty string when there is none."""
    return TAG_ICONS.get(tag.lower(), "")


def tag_badges(tags, categories_path: str = "/categories/") -> List[TagBadge]:
    """Badges for the tags of a post that belong to a known category."""
    base = categories_path.rstrip("/")
    return [
        TagBadge(
            name=tag.lower(),
            icon=icon_for_tag(tag),
            href=f"{base}/{category_slug(tag)}",
        )
        for tag in tags
        if tag in TAGS
    ]
