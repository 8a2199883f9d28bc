from datetime import datetime, timedelta
from typing import Optional, Union

from loguru import logger

from ..datasources.base import RepositorySearchSource
from ..datasources.github_adapter import GitHubAdapter
from ..schemas import DEFAULT_TIMEFRAME_DAYS, TIMEFRAME_DAYS, SearchResult, Timeframe


def timeframe_days(timeframe: Optional[Union[Timeframe, str]]) -> int:
    return TIMEFRAME_DAYS.get(timeframe or "", DEFAULT_TIMEFRAME_DAYS)


def build_trending_query(
    language: str = "",
    timeframe: Optional[Union[Timeframe, str]] = "weekly",
    now: Optional[datetime] = None,
) -> str:
    """Query for repositories created within ``timeframe`` of ``now``.

    ``now`` defaults to the local wall clock. Only its calendar date is used.
    """
    today = (now or datetime.now()).date()
    cutoff = today - timedelta(days=timeframe_days(timeframe))
    query = f"created:>{cutoff.isoformat()}"
    if language:
        query += f" language:{language}"
    return query


async def get_trending_repositories(
    language: str = "",
    timeframe: Optional[Union[Timeframe, str]] = "weekly",
    now: Optional[datetime] = None,
    source: Optional[RepositorySearchSource] = None,
) -> SearchResult:
    query = build_trending_query(language, timeframe, now)
    logger.debug(f"[trending] language={language!r} timeframe={timeframe!r} query={query!r}")
    source = source or GitHubAdapter()
    return await source.search_repositories(query, page=1, per_page=10)
