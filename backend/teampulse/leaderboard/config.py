"""Configuration for the synthetic leaderboard roster."""

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_MEMBER_NAMES = [
    "Alex Chen",
    "Sam Rodriguez",
    "Jordan Kim",
    "Morgan Taylor",
    "Casey Williams",
    "Riley Martinez",
    "Avery Johnson",
    "Quinn Brown",
    "Sage Davis",
    "River Anderson",
    "Phoenix Wilson",
    "Blake Thompson",
    "Skylar Garcia",
    "Rowan Miller",
    "Emery Moore",
]


class RosterConfig(BaseModel):
    """Synthetic team roster. The first name listed is the team owner."""

    member_names: list[str] = Field(default_factory=lambda: list(DEFAULT_MEMBER_NAMES))
    email_domain: str = "company.com"
    min_members: int = 12
    max_members: int = 14
    min_member_multiplier: float = 0.3
    max_member_multiplier: float = 2.0

    @field_validator("member_names")
    @classmethod
    def strip_names(cls, v: list[str]) -> list[str]:
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError("Member names must not be blank")
        return names

    @model_validator(mode="after")
    def check_bounds(self) -> "RosterConfig":
        if self.min_members < 1:
            raise ValueError(f"min_members must be at least 1, got {self.min_members}")
        if self.min_members > self.max_members:
            raise ValueError(
                f"min_members ({self.min_members}) exceeds max_members ({self.max_members})"
            )
        if self.max_members > len(self.member_names):
            raise ValueError(
                f"max_members ({self.max_members}) exceeds the {len(self.member_names)} "
                "configured member names"
            )
        if not 0 <= self.min_member_multiplier <= self.max_member_multiplier:
            raise ValueError("Member multiplier range must satisfy 0 <= min <= max")
        return self

    def email_for(self, name: str) -> str:
        """Derive ``first.last@domain`` from a display name."""
        local_part = ".".join(name.lower().split())
        return f"{local_part}@{self.email_domain}"
