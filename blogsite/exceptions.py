from typing import Optional


class ContentError(Exception):
    """Base class for content problems that must halt a build."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class InvalidFrontmatterError(ContentError):
    pass


class MissingTagsError(ContentError):
    def __init__(self, source: Optional[str] = None):
        super().__init__("tags must be a non-empty list", source)


class InvalidTagError(ContentError):
    def __init__(self, tag: str, source: Optional[str] = None):
        self.tag = tag
        super().__init__(f"invalid tag '{tag}'", source)


class SlugMismatchError(ContentError):
    def __init__(self, declared: str, derived: str, source: Optional[str] = None):
        self.declared = declared
        self.derived = derived
        super().__init__(
            f"declared path '{declared}' does not match file slug '{derived}'",
            source,
        )


class DuplicatePathError(ContentError):
    def __init__(self, path: str, sources: tuple):
        self.path = path
        self.sources = sources
        super().__init__(f"path '{path}' is declared by {', '.join(sources)}")
