"""Custom exceptions for leaderboard generation."""


class LeaderboardError(Exception):
    """Base exception for leaderboard errors."""

    pass


class InvalidTimeFilterError(LeaderboardError, ValueError):
    """Time filter is not one of the supported windows."""

    def __init__(self, value: object):
        super().__init__(
            f"Invalid time filter {value!r}; expected one of: 7d, 30d, 90d, all"
        )
        self.value = value


class RosterConfigError(LeaderboardError, ValueError):
    """Roster cannot supply the requested number of members."""

    pass
