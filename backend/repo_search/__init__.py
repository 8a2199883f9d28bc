from .datasources.github_adapter import GitHubAdapter, search_repositories
from .errors import (
    GitHubSearchError,
    InvalidQueryError,
    NetworkError,
    RateLimitedError,
    SearchErrorKind,
    UpstreamError,
)
from .schemas import SearchResult, Timeframe
from .services.trending import build_trending_query, get_trending_repositories

__all__ = [
    "GitHubAdapter",
    "GitHubSearchError",
    "InvalidQueryError",
    "NetworkError",
    "RateLimitedError",
    "SearchErrorKind",
    "SearchResult",
    "Timeframe",
    "UpstreamError",
    "build_trending_query",
    "get_trending_repositories",
    "search_repositories",
]
