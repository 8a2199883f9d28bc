from typing import Any, Dict, Optional

import httpx
from loguru import logger

from ..config import SEARCH_ENDPOINT, Settings, get_settings
from ..errors import NetworkError, error_for_status
from ..schemas import SearchResult
from .base import RepositorySearchSource


class GitHubAdapter(RepositorySearchSource):
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.settings.user_agent,
        }
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        client_kwargs: Dict[str, Any] = {
            "base_url": str(self.settings.github_base_url),
            "headers": self.headers,
            "timeout": self.settings.github_timeout_seconds,
            "follow_redirects": True,
        }
        if self.transport is not None:
            client_kwargs["transport"] = self.transport
        elif self.settings.github_proxy:
            client_kwargs["proxy"] = self.settings.github_proxy
        return httpx.AsyncClient(**client_kwargs)

    async def search_repositories(self, query: str, page: int = 1, per_page: int = 10) -> SearchResult:
        # results are always ranked by stars, most starred first
        params = {
            "q": query,
            "page": page,
            "per_page": per_page,
            "sort": "stars",
            "order": "desc",
        }
        logger.debug(f"[search] GET {SEARCH_ENDPOINT} q={query!r} page={page} per_page={per_page}")
        try:
            async with self._client() as client:
                resp = await client.get(SEARCH_ENDPOINT, params=params)
        except httpx.TransportError as exc:
            raise NetworkError() from exc

        if not resp.is_success:
            raise error_for_status(resp.status_code, resp.reason_phrase)

        result = SearchResult.from_payload(resp.json())
        logger.debug(
            f"[search] status={resp.status_code} items={len(result.items)} total_count={result.total_count}"
        )
        return result


async def search_repositories(query: str, page: int = 1, per_page: int = 10) -> SearchResult:
    return await GitHubAdapter().search_repositories(query, page=page, per_page=per_page)
