from typing import Protocol

from ..schemas import SearchResult


class RepositorySearchSource(Protocol):
    async def search_repositories(self, query: str, page: int = 1, per_page: int = 10) -> SearchResult:
        ...
