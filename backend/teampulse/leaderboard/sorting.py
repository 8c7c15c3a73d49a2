"""Client-side ordering of leaderboard entries for table views."""

from collections.abc import Callable
from typing import Any

from .models import LeaderboardEntry, SortConfig, SortDirection, SortField

_SORT_KEYS: dict[SortField, Callable[[LeaderboardEntry], Any]] = {
    SortField.RANK: lambda e: e.rank,
    SortField.ACTIVITY_SCORE: lambda e: e.activity_score,
    SortField.TOTAL_LINES_ADDED: lambda e: e.metrics.total_lines_added,
    SortField.TOTAL_ACCEPTS: lambda e: e.metrics.total_accepts,
    SortField.TOTAL_APPLIES: lambda e: e.metrics.total_applies,
    SortField.CHAT_REQUESTS: lambda e: e.metrics.chat_requests,
    SortField.COMPOSER_REQUESTS: lambda e: e.metrics.composer_requests,
    SortField.NAME: lambda e: e.name.casefold(),
}


def sort_entries(
    entries: list[LeaderboardEntry], config: SortConfig | None = None
) -> list[LeaderboardEntry]:
    """Return a new list ordered by ``config``; ranks are left untouched.

    Ties fall back to rank order in either direction.
    """
    config = config or SortConfig()
    by_rank = sorted(entries, key=lambda e: e.rank)
    return sorted(
        by_rank,
        key=_SORT_KEYS[config.field],
        reverse=config.direction == SortDirection.DESC,
    )
