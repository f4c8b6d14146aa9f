import logging
from pathlib import Path
from typing import List

from blogsite.exceptions import InvalidFrontmatterError

logger = logging.getLogger(__name__)

POST_EXTENSIONS = (".md", ".mdx")


class FilesystemPostsRepo:
    def __init__(self, content_dir):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[dict]:
        if not self.content_dir.is_dir():
            logger.warning(f"Content directory {self.content_dir} does not exist")
            return []

        files = []
        for file_path in sorted(self.content_dir.rglob("*")):
            if not self._is_post_file(file_path):
                continue
            relative = file_path.relative_to(self.content_dir).as_posix()
            try:
                raw = file_path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise InvalidFrontmatterError(f"not valid UTF-8 ({e})", relative)
            files.append({"source": relative, "raw": raw})
        logger.debug(f"Found {len(files)} post files in {self.content_dir}")
        return files

    def _is_post_file(self, file_path: Path) -> bool:
        relative_parts = file_path.relative_to(self.content_dir).parts
        return (
            file_path.is_file()
            and file_path.suffix.lower() in POST_EXTENSIONS
            and not any(part.startswith((".", "_")) for part in relative_parts)
        )
