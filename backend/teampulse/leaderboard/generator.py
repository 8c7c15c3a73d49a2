"""Synthetic leaderboard builder.

Fabricates a team roster, draws metrics for every member, scores and ranks
them, and wraps the result with the reporting window.

Randomness and the clock are injected so a seeded ``random.Random`` and a
fixed ``now`` reproduce a leaderboard exactly.
"""

import logging
import random
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol

from .config import RosterConfig
from .exceptions import InvalidTimeFilterError, RosterConfigError
from .metrics import calculate_activity_score, generate_metrics
from .models import (
    LeaderboardEntry,
    LeaderboardPeriod,
    LeaderboardResponse,
    MemberRole,
    TimeFilter,
)

logger = logging.getLogger(__name__)

MS_PER_DAY = 24 * 60 * 60 * 1000

# "all" is reported as the trailing year
PERIOD_DAYS: dict[TimeFilter, int] = {
    TimeFilter.SEVEN_DAYS: 7,
    TimeFilter.THIRTY_DAYS: 30,
    TimeFilter.NINETY_DAYS: 90,
    TimeFilter.ALL: 365,
}


class RandomSource(Protocol):
    """Subset of ``random.Random`` the generator draws from."""

    def uniform(self, a: float, b: float) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_time_filter(value: TimeFilter | str | None) -> TimeFilter:
    """Normalize a caller-supplied filter; ``None`` means the 7-day window."""
    if value is None:
        return TimeFilter.SEVEN_DAYS
    if isinstance(value, TimeFilter):
        return value
    if isinstance(value, str):
        try:
            return TimeFilter(value.strip().lower())
        except ValueError:
            pass
    raise InvalidTimeFilterError(value)


def period_duration_ms(time_filter: TimeFilter) -> int:
    """Length of the reporting window in milliseconds."""
    return PERIOD_DAYS[resolve_time_filter(time_filter)] * MS_PER_DAY


class LeaderboardGenerator:
    """Builds randomized, ranked leaderboards for a synthetic team."""

    def __init__(
        self,
        roster: RosterConfig | None = None,
        rng: RandomSource | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.roster = roster or RosterConfig()
        self.rng = rng or random.Random()
        self.clock = clock or _utc_now

    @classmethod
    def seeded(cls, seed: int, roster: RosterConfig | None = None) -> "LeaderboardGenerator":
        return cls(roster=roster, rng=random.Random(seed))

    def build_roster(self, member_count: int) -> list[tuple[str, str, MemberRole]]:
        """First ``member_count`` names in list order as (name, email, role)."""
        names = self.roster.member_names
        if not 1 <= member_count <= len(names):
            raise RosterConfigError(
                f"Cannot build a roster of {member_count} from {len(names)} names"
            )

        return [
            (name, self.roster.email_for(name), "owner" if index == 0 else "member")
            for index, name in enumerate(names[:member_count])
        ]

    def compute_period(
        self, time_filter: TimeFilter, now: datetime | None = None
    ) -> LeaderboardPeriod:
        """Window ending at ``now`` and reaching back the filter's duration."""
        now = now or self.clock()
        end_ms = int(now.timestamp() * 1000)
        return LeaderboardPeriod(
            start_date=end_ms - period_duration_ms(time_filter),
            end_date=end_ms,
        )

    @staticmethod
    def rank_entries(entries: list[LeaderboardEntry]) -> list[LeaderboardEntry]:
        """Sort by score descending and assign dense 1-based ranks.

        The sort is stable, so tied scores keep roster order.
        """
        ranked = sorted(entries, key=lambda entry: entry.activity_score, reverse=True)
        for position, entry in enumerate(ranked):
            entry.rank = position + 1
        return ranked

    def generate(
        self, time_filter: TimeFilter | str | None = TimeFilter.SEVEN_DAYS
    ) -> LeaderboardResponse:
        """Generate a complete ranked leaderboard for one window."""
        time_filter = resolve_time_filter(time_filter)

        member_count = self.rng.randint(self.roster.min_members, self.roster.max_members)

        entries: list[LeaderboardEntry] = []
        for name, email, role in self.build_roster(member_count):
            member_multiplier = self.rng.uniform(
                self.roster.min_member_multiplier, self.roster.max_member_multiplier
            )
            metrics = generate_metrics(time_filter, member_multiplier, self.rng)
            activity_score = calculate_activity_score(metrics)
            logger.debug(
                f"Generated metrics for {name} "
                f"(multiplier={member_multiplier:.2f}, score={activity_score:.1f})"
            )
            entries.append(
                LeaderboardEntry(
                    name=name,
                    email=email,
                    role=role,
                    metrics=metrics,
                    activity_score=activity_score,
                )
            )

        ranked = self.rank_entries(entries)
        period = self.compute_period(time_filter)

        logger.info(
            f"Generated {time_filter.value} leaderboard with {len(ranked)} members"
        )

        return LeaderboardResponse(
            entries=ranked,
            period=period,
            total_members=len(ranked),
        )


def generate_leaderboard(
    time_filter: TimeFilter | str | None = TimeFilter.SEVEN_DAYS,
    *,
    seed: int | None = None,
    roster: RosterConfig | None = None,
) -> LeaderboardResponse:
    """Generate a leaderboard with a fresh generator.

    Args:
        time_filter: Window to report, defaults to the last 7 days
        seed: Fixed seed for reproducible metrics and roster size
        roster: Roster override, defaults to the built-in team
    """
    rng = random.Random(seed)
    return LeaderboardGenerator(roster=roster, rng=rng).generate(time_filter)
