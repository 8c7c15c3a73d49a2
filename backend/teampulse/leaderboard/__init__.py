"""Synthetic team usage leaderboard."""

from .config import DEFAULT_MEMBER_NAMES, RosterConfig
from .exceptions import InvalidTimeFilterError, LeaderboardError, RosterConfigError
from .generator import (
    LeaderboardGenerator,
    RandomSource,
    generate_leaderboard,
    period_duration_ms,
    resolve_time_filter,
)
from .metrics import calculate_activity_score, generate_metrics, time_filter_multiplier
from .models import (
    LeaderboardEntry,
    LeaderboardPeriod,
    LeaderboardResponse,
    MemberMetrics,
    MemberRole,
    SortConfig,
    SortDirection,
    SortField,
    TimeFilter,
)
from .sorting import sort_entries

__all__ = [
    "LeaderboardGenerator",
    "generate_leaderboard",
    "resolve_time_filter",
    "period_duration_ms",
    "RandomSource",
    "generate_metrics",
    "calculate_activity_score",
    "time_filter_multiplier",
    "sort_entries",
    "RosterConfig",
    "DEFAULT_MEMBER_NAMES",
    "LeaderboardError",
    "InvalidTimeFilterError",
    "RosterConfigError",
    "TimeFilter",
    "MemberRole",
    "MemberMetrics",
    "LeaderboardEntry",
    "LeaderboardPeriod",
    "LeaderboardResponse",
    "SortField",
    "SortDirection",
    "SortConfig",
]
