import json

from fastapi import FastAPI
from fastapi.testclient import TestClient

from blogsite import dependencies as deps
from blogsite.exceptions import InvalidTagError
from blogsite.routers import posts
from blogsite.schemas.blog import (
    BlogPage,
    CategoryPage,
    PageWindow,
    PostDetail,
    PostSummary,
)
from blogsite.settings import Settings
from tests.conftest import FakePostsService


def make_app(fake_service: FakePostsService):
    app = FastAPI()
    app.dependency_overrides[deps.get_posts_service] = lambda: fake_service
    app.include_router(posts.router)
    return app


def summary(path: str, title: str) -> PostSummary:
    return PostSummary(
        path=path,
        title=title,
        description=f"{title} description",
        date="2023-01-01T00:00:00+00:00",
        displayDate="01/01/2023",
    )


def test_first_blog_page_returns_featured_and_grid():
    page = BlogPage(
        pager=PageWindow(
            path="/blog/", skip=0, limit=5, numPages=2, currentPage=1, nextPath="/blog/2"
        ),
        featured=summary("/blog/new", "New"),
        posts=[summary("/blog/old", "Old")],
    )
    fake = FakePostsService(list_page_return=page)
    client = TestClient(make_app(fake))

    res = client.get("/blog")

    assert res.status_code == 200
    body = res.json()
    assert body["featured"]["path"] == "/blog/new"
    assert [p["path"] for p in body["posts"]] == ["/blog/old"]
    assert body["pager"]["nextPath"] == "/blog/2"
    assert fake.calls == [("list_page", 1)]


def test_blog_page_by_number():
    page = BlogPage(
        pager=PageWindow(path="/blog/3", skip=10, limit=5, numPages=3, currentPage=3)
    )
    fake = FakePostsService(list_page_return=page)
    client = TestClient(make_app(fake))

    res = client.get("/blog/3")

    assert res.status_code == 200
    assert res.json()["pager"]["currentPage"] == 3
    assert fake.calls == [("list_page", 3)]


def test_blog_page_out_of_range_is_404():
    client = TestClient(make_app(FakePostsService(list_page_return=None)))

    assert client.get("/blog/9").status_code == 404


def test_blog_page_content_error_is_500_with_reason():
    fake = FakePostsService(raises=InvalidTagError("rust", "rusty.md"))
    client = TestClient(make_app(fake))

    res = client.get("/blog")

    assert res.status_code == 500
    assert "rust" in res.json()["detail"]


def test_unexpected_error_is_generic_500():
    fake = FakePostsService(raises=RuntimeError("disk on fire"))
    client = TestClient(make_app(fake))

    res = client.get("/blog")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve posts"


def test_get_post_success_with_nested_path():
    detail = PostDetail(
        **summary("/blog/2023/hello", "Hello").model_dump(),
        content="# Hello",
        html="<h1>Hello</h1>",
    )
    fake = FakePostsService(get_post_return=detail)
    client = TestClient(make_app(fake))

    res = client.get("/posts/blog/2023/hello")

    assert res.status_code == 200
    assert res.json()["html"] == "<h1>Hello</h1>"
    assert fake.calls == [("get_post", "blog/2023/hello")]


def test_get_post_missing_is_404():
    client = TestClient(make_app(FakePostsService(get_post_return=None)))

    res = client.get("/posts/blog/missing")

    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found"


def test_category_page_resolves_category_slug():
    fake = FakePostsService(
        category_return=CategoryPage(
            category="ci/cd", path="/categories/ci-cd", posts=[summary("/blog/a", "A")]
        )
    )
    client = TestClient(make_app(fake))

    res = client.get("/categories/ci-cd")

    assert res.status_code == 200
    assert res.json()["category"] == "ci/cd"
    assert fake.calls == [("category_posts", "ci/cd")]


def test_unknown_category_is_404_without_loading_posts():
    fake = FakePostsService()
    client = TestClient(make_app(fake))

    res = client.get("/categories/rust")

    assert res.status_code == 404
    assert fake.calls == []


def test_list_routes_reads_manifest(tmp_path, monkeypatch):
    (tmp_path / "routes.json").write_text(
        json.dumps([{"path": "/blog/", "kind": "listing", "context": {"skip": 0}}]),
        encoding="utf-8",
    )
    monkeypatch.setattr(posts, "settings", Settings(OUTPUT_DIR=str(tmp_path)))
    client = TestClient(make_app(FakePostsService()))

    res = client.get("/routes")

    assert res.status_code == 200
    assert res.json() == [{"path": "/blog/", "kind": "listing", "context": {"skip": 0}}]
