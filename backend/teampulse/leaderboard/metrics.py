"""Randomized per-member usage metrics and the activity score.

Base counters scale with the window multiplier, the member's activity
multiplier and a 70-130% variance draw. Dependent counters (deleted lines,
accepted lines, accepts, accepted tabs) are bounded fractions of their parent,
so a subset never exceeds its total.
"""

import math
from typing import Protocol

from .models import MemberMetrics, TimeFilter

TIME_FILTER_MULTIPLIERS: dict[TimeFilter, float] = {
    TimeFilter.SEVEN_DAYS: 1.0,
    TimeFilter.THIRTY_DAYS: 4.2,
    TimeFilter.NINETY_DAYS: 12.5,
    TimeFilter.ALL: 50.0,
}

VARIANCE_RANGE = (0.7, 1.3)

# Per-window baselines at a 1.0x multiplier
BASE_LINES_ADDED = 500
BASE_APPLIES = 50
BASE_TABS_SHOWN = 200
BASE_COMPOSER_REQUESTS = 30
BASE_CHAT_REQUESTS = 80
BASE_AGENT_REQUESTS = 10
BASE_CMDK_USAGES = 40
BASE_BUGBOT_USAGES = 5
BASE_SUBSCRIPTION_INCLUDED_REQS = 150
BASE_API_KEY_REQS = 20
BASE_USAGE_BASED_REQS = 10

# Fraction of the parent counter, upper bound exclusive
LINES_DELETED_RATIO = (0.4, 0.7)
ACCEPTED_LINES_ADDED_RATIO = (0.65, 0.85)
ACCEPTED_LINES_DELETED_RATIO = (0.7, 0.9)
ACCEPTS_RATIO = (0.75, 0.9)
TABS_ACCEPTED_RATIO = (0.8, 0.95)

ACTIVITY_SCORE_WEIGHTS: dict[str, float] = {
    "total_accepts": 2.0,
    "total_applies": 1.5,
    "chat_requests": 1.2,
    "composer_requests": 1.5,
    "agent_requests": 2.0,
    "accepted_lines_added": 0.1,
    "cmdk_usages": 0.5,
}


class UniformSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


def time_filter_multiplier(time_filter: TimeFilter) -> float:
    """Volume multiplier for a window, relative to 7 days."""
    return TIME_FILTER_MULTIPLIERS[TimeFilter(time_filter)]


def _fraction_of(total: int, ratio: tuple[float, float], rng: UniformSource) -> int:
    return math.floor(total * rng.uniform(*ratio))


def generate_metrics(
    time_filter: TimeFilter,
    member_multiplier: float,
    rng: UniformSource,
) -> MemberMetrics:
    """Generate one member's metrics bundle.

    Args:
        time_filter: Window being reported, sets the overall volume
        member_multiplier: Activity level of this member (0.3-2.0 in practice)
        rng: Source of uniform draws, consumed in a fixed order so a seeded
            source always yields the same bundle
    """
    if member_multiplier < 0:
        raise ValueError(f"Member multiplier must be non-negative, got {member_multiplier}")

    multiplier = time_filter_multiplier(time_filter) * member_multiplier

    def scaled(base: int) -> int:
        return math.floor(base * multiplier * rng.uniform(*VARIANCE_RANGE))

    total_lines_added = scaled(BASE_LINES_ADDED)
    total_lines_deleted = _fraction_of(total_lines_added, LINES_DELETED_RATIO, rng)
    accepted_lines_added = _fraction_of(total_lines_added, ACCEPTED_LINES_ADDED_RATIO, rng)
    accepted_lines_deleted = _fraction_of(
        total_lines_deleted, ACCEPTED_LINES_DELETED_RATIO, rng
    )
    total_applies = scaled(BASE_APPLIES)
    total_accepts = _fraction_of(total_applies, ACCEPTS_RATIO, rng)
    total_tabs_shown = scaled(BASE_TABS_SHOWN)
    total_tabs_accepted = _fraction_of(total_tabs_shown, TABS_ACCEPTED_RATIO, rng)

    return MemberMetrics(
        total_lines_added=total_lines_added,
        total_lines_deleted=total_lines_deleted,
        accepted_lines_added=accepted_lines_added,
        accepted_lines_deleted=accepted_lines_deleted,
        total_applies=total_applies,
        total_accepts=total_accepts,
        total_rejects=total_applies - total_accepts,
        total_tabs_shown=total_tabs_shown,
        total_tabs_accepted=total_tabs_accepted,
        composer_requests=scaled(BASE_COMPOSER_REQUESTS),
        chat_requests=scaled(BASE_CHAT_REQUESTS),
        agent_requests=scaled(BASE_AGENT_REQUESTS),
        cmdk_usages=scaled(BASE_CMDK_USAGES),
        bugbot_usages=scaled(BASE_BUGBOT_USAGES),
        subscription_included_reqs=scaled(BASE_SUBSCRIPTION_INCLUDED_REQS),
        api_key_reqs=scaled(BASE_API_KEY_REQS),
        usage_based_reqs=scaled(BASE_USAGE_BASED_REQS),
    )


def calculate_activity_score(metrics: MemberMetrics) -> float:
    """Weighted sum of the engagement counters used for ranking."""
    return (
        metrics.total_accepts * ACTIVITY_SCORE_WEIGHTS["total_accepts"]
        + metrics.total_applies * ACTIVITY_SCORE_WEIGHTS["total_applies"]
        + metrics.chat_requests * ACTIVITY_SCORE_WEIGHTS["chat_requests"]
        + metrics.composer_requests * ACTIVITY_SCORE_WEIGHTS["composer_requests"]
        + metrics.agent_requests * ACTIVITY_SCORE_WEIGHTS["agent_requests"]
        + metrics.accepted_lines_added * ACTIVITY_SCORE_WEIGHTS["accepted_lines_added"]
        + metrics.cmdk_usages * ACTIVITY_SCORE_WEIGHTS["cmdk_usages"]
    )
