"""Type-safe Pydantic models for leaderboard responses.

Models serialize with camelCase aliases (``model_dump(by_alias=True)``) so the
output matches the shape the leaderboard UI consumes. Snake_case field names
are accepted on input.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MemberRole = Literal["owner", "member"]


class TimeFilter(StrEnum):
    """Time window a leaderboard covers."""

    SEVEN_DAYS = "7d"
    THIRTY_DAYS = "30d"
    NINETY_DAYS = "90d"
    ALL = "all"


class SortField(StrEnum):
    """Columns the leaderboard table can be ordered by."""

    RANK = "rank"
    ACTIVITY_SCORE = "activityScore"
    TOTAL_LINES_ADDED = "totalLinesAdded"
    TOTAL_ACCEPTS = "totalAccepts"
    TOTAL_APPLIES = "totalApplies"
    CHAT_REQUESTS = "chatRequests"
    COMPOSER_REQUESTS = "composerRequests"
    NAME = "name"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MemberMetrics(CamelModel):
    """Usage counters for one member over the requested window."""

    # Code edit volume
    total_lines_added: int = Field(ge=0)
    total_lines_deleted: int = Field(ge=0)
    accepted_lines_added: int = Field(ge=0)
    accepted_lines_deleted: int = Field(ge=0)

    # Suggestion interaction
    total_applies: int = Field(ge=0)
    total_accepts: int = Field(ge=0)
    total_rejects: int = Field(ge=0)
    total_tabs_shown: int = Field(ge=0)
    total_tabs_accepted: int = Field(ge=0)

    # Feature usage
    composer_requests: int = Field(ge=0)
    chat_requests: int = Field(ge=0)
    agent_requests: int = Field(ge=0)
    cmdk_usages: int = Field(ge=0)
    bugbot_usages: int = Field(ge=0)

    # Request quota usage
    subscription_included_reqs: int = Field(ge=0)
    api_key_reqs: int = Field(ge=0)
    usage_based_reqs: int = Field(ge=0)


class LeaderboardEntry(CamelModel):
    """One ranked member. ``rank`` is 0 until ranking is applied."""

    rank: int = Field(default=0, ge=0)
    name: str
    email: str
    role: MemberRole = "member"
    metrics: MemberMetrics
    activity_score: float = Field(description="Weighted score used for ranking")


class LeaderboardPeriod(CamelModel):
    """Window bounds as epoch milliseconds."""

    start_date: int
    end_date: int

    @property
    def start(self) -> datetime:
        return datetime.fromtimestamp(self.start_date / 1000, tz=timezone.utc)

    @property
    def end(self) -> datetime:
        return datetime.fromtimestamp(self.end_date / 1000, tz=timezone.utc)

    @property
    def duration_ms(self) -> int:
        return self.end_date - self.start_date


class LeaderboardResponse(CamelModel):
    """Ranked entries plus the window they cover."""

    entries: list[LeaderboardEntry]
    period: LeaderboardPeriod
    total_members: int = Field(ge=0)


class SortConfig(CamelModel):
    """Table ordering requested by the UI."""

    field: SortField = SortField.RANK
    direction: SortDirection = SortDirection.ASC
