from functools import lru_cache
from typing import Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings

GITHUB_API_BASE = "https://api.github.com"
SEARCH_ENDPOINT = "/search/repositories"


class Settings(BaseSettings):
    github_base_url: HttpUrl = Field(default=GITHUB_API_BASE, alias="GITHUB_BASE_URL")
    github_proxy: Optional[str] = Field(default=None, alias="GITHUB_PROXY")
    # None keeps a request open until the server answers
    github_timeout_seconds: Optional[float] = Field(default=None, alias="GITHUB_TIMEOUT_SECONDS")
    user_agent: str = Field(default="repo-search", alias="GITHUB_USER_AGENT")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"  # ignore unrelated env vars to avoid validation errors


@lru_cache
def get_settings() -> Settings:
    return Settings()
