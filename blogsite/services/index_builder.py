import json
import logging
from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from blogsite.schemas.search import SearchRecord

logger = logging.getLogger(__name__)


def build_search_index(posts: Iterable, development: bool = False) -> List[SearchRecord]:
    """
    Flatten posts into search records, keeping their order.
    Development builds publish drafts, so nothing is flagged as a draft there.
    """
    return [
        SearchRecord(
            path=post.path,
            title=post.title,
            description=post.description,
            isDraft=False if development else post.isDraft,
        )
        for post in posts
    ]


def write_search_index(records: Iterable[SearchRecord], path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [record.model_dump() for record in records]
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info(f"Wrote {len(payload)} search records to {path}")
    return path


def load_search_index(path) -> List[SearchRecord]:
    """Read the built index. A missing or broken index means no records."""
    path = Path(path)
    if not path.exists():
        logger.warning(f"Search index {path} not found, searching nothing")
        return []

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return [SearchRecord(**item) for item in payload]
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.warning(f"Could not read search index {path}: {e}")
        return []
