from enum import Enum


class SearchErrorKind(str, Enum):
    RATE_LIMITED = "rate_limited"
    INVALID_QUERY = "invalid_query"
    UPSTREAM = "upstream"
    NETWORK = "network"


RATE_LIMIT_MESSAGE = "API rate limit exceeded. Please try again later."
INVALID_QUERY_MESSAGE = "Invalid search query. Please check your search terms."
NETWORK_MESSAGE = "Network error. Please check your internet connection."


class GitHubSearchError(RuntimeError):
    """Base for every failure the search client reports to its caller."""

    kind: SearchErrorKind


class RateLimitedError(GitHubSearchError):
    kind = SearchErrorKind.RATE_LIMITED

    def __init__(self):
        super().__init__(RATE_LIMIT_MESSAGE)


class InvalidQueryError(GitHubSearchError):
    kind = SearchErrorKind.INVALID_QUERY

    def __init__(self):
        super().__init__(INVALID_QUERY_MESSAGE)


class UpstreamError(GitHubSearchError):
    kind = SearchErrorKind.UPSTREAM

    def __init__(self, status_code: int, reason_phrase: str):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        super().__init__(f"GitHub API error: {status_code} {reason_phrase}")


class NetworkError(GitHubSearchError):
    kind = SearchErrorKind.NETWORK

    def __init__(self):
        super().__init__(NETWORK_MESSAGE)


def error_for_status(status_code: int, reason_phrase: str) -> GitHubSearchError:
    if status_code == 403:
        return RateLimitedError()
    if status_code == 422:
        return InvalidQueryError()
    return UpstreamError(status_code, reason_phrase)
