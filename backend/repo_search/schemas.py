from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

Timeframe = Literal["daily", "weekly", "monthly"]

TIMEFRAME_DAYS: Dict[str, int] = {
    "daily": 1,
    "weekly": 7,
    "monthly": 30,
}
DEFAULT_TIMEFRAME_DAYS = 7


class SearchResult(BaseModel):
    """One page of repository search results.

    ``items`` holds the upstream repository records untouched.
    """

    items: List[Any] = Field(default_factory=list)
    total_count: int = 0
    incomplete_results: bool = False

    @classmethod
    def from_payload(cls, data: Any) -> "SearchResult":
        if not isinstance(data, dict):
            return cls()
        # null and missing upstream fields both fall back to the defaults
        return cls(
            items=data.get("items") or [],
            total_count=data.get("total_count") or 0,
            incomplete_results=data.get("incomplete_results") or False,
        )
