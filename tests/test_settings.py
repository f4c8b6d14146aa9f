from pathlib import Path

import pytest
from pydantic import ValidationError

from blogsite.settings import Settings, choose_env_file


def test_is_development_reads_environment():
    assert Settings(ENVIRONMENT="development").is_development is True
    assert Settings(ENVIRONMENT="Development").is_development is True
    assert Settings(ENVIRONMENT="production").is_development is False


def test_artifact_paths_live_in_output_dir():
    s = Settings(OUTPUT_DIR="dist")

    assert s.search_index_path == Path("dist") / "search-index.json"
    assert s.routes_path == Path("dist") / "routes.json"


def test_defaults():
    s = Settings()

    assert s.POSTS_PER_PAGE == 5
    assert s.BLOG_PATH == "/blog/"
    assert s.CATEGORIES_PATH == "/categories/"


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"


@pytest.mark.parametrize("value", [0, -3])
def test_posts_per_page_must_be_positive(value):
    with pytest.raises(ValidationError):
        Settings(POSTS_PER_PAGE=value)
