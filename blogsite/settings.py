from pathlib import Path

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogsite.consts import ROUTES_FILE, SEARCH_INDEX_FILE


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content/blog"
    OUTPUT_DIR: str = "public"

    # Build
    ENVIRONMENT: str = "production"
    POSTS_PER_PAGE: PositiveInt = 5
    BUILD_ON_STARTUP: bool = False

    # Routes
    BLOG_PATH: str = "/blog/"
    CATEGORIES_PATH: str = "/categories/"

    # Site
    SITE_TITLE: str = "harrisoncramer.me"
    SITE_URL: str = "https://www.harrisoncramer.me"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def search_index_path(self) -> Path:
        return Path(self.OUTPUT_DIR) / SEARCH_INDEX_FILE

    @property
    def routes_path(self) -> Path:
        return Path(self.OUTPUT_DIR) / ROUTES_FILE


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
