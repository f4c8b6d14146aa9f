import datetime
import textwrap

from blogsite.schemas.blog import PostRecord


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, files):
        self.files = files

    def list_post_files(self):
        return list(self.files)


def post_file(source: str, raw: str) -> dict:
    """Content file dict as returned by the repo, with dedented frontmatter."""
    return {"source": source, "raw": textwrap.dedent(raw).lstrip()}


def make_post(
    name: str,
    date: str = "2023-01-01",
    tags=("docker",),
    draft: bool = False,
    title: str | None = None,
    description: str | None = None,
    content: str = "Some content.",
) -> dict:
    """Valid post file living at `<name>.md`, routed at `/blog/<name>`."""
    tag_list = ", ".join(f'"{t}"' for t in tags)
    title = title or name.replace("-", " ").title()
    description = description or f"About {name}"
    draft_flag = "true" if draft else "false"
    return post_file(
        f"{name}.md",
        f"""
        ---
        title: {title}
        description: {description}
        date: {date}
        path: /blog/{name}
        tags: [{tag_list}]
        draft: {draft_flag}
        ---
        {content}
        """,
    )


def make_record(
    path: str,
    title: str = "Title",
    description: str = "Description",
    date: datetime.datetime | None = None,
    tags=("docker",),
    draft: bool = False,
) -> PostRecord:
    return PostRecord(
        path=path,
        slug=path,
        source=f"{path.rsplit('/', 1)[-1]}.md",
        title=title,
        description=description,
        date=date or datetime.datetime(2023, 1, 1, tzinfo=datetime.timezone.utc),
        tags=list(tags),
        isDraft=draft,
    )


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_page_return=None,
        get_post_return=None,
        category_return=None,
        raises=None,
    ):
        self._list_page_return = list_page_return
        self._get_post_return = get_post_return
        self._category_return = category_return
        self._raises = raises
        self.calls = []

    def list_page(self, page_number: int = 1):
        self.calls.append(("list_page", page_number))
        if self._raises:
            raise self._raises
        return self._list_page_return

    def get_post(self, path: str):
        self.calls.append(("get_post", path))
        if self._raises:
            raise self._raises
        return self._get_post_return

    def category_posts(self, category: str):
        self.calls.append(("category_posts", category))
        if self._raises:
            raise self._raises
        return self._category_return
