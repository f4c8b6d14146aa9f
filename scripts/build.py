import logging
import sys

from blogsite import dependencies as deps
from blogsite.exceptions import ContentError
from blogsite.services.page_generator import build_site
from blogsite.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    service = deps.get_posts_service(
        repo=deps.get_posts_repo(), parser=deps.get_content_parser()
    )
    try:
        manifest = build_site(service, settings.OUTPUT_DIR)
    except ContentError as e:
        logger.error(f"Build failed: {e}")
        return 1
    logger.info(
        f"Build completed: {len(manifest.routes)} routes, "
        f"{len(manifest.searchIndex)} search records"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
