"""Domain models for goals and the resolved goal profile."""

from dataclasses import dataclass
from datetime import date

INSUFFICIENT_PROFILE_MESSAGE = "Set your weight goal in Profile to see progress."


@dataclass(frozen=True)
class GoalRow:
    """Goal row as stored upstream, values not yet validated."""

    start_date: date | None = None
    weekly_change_rate: object = None
    daily_calories: object = None
    protein_g: object = None
    is_active: bool = False


@dataclass(frozen=True)
class UserProfileRow:
    """User profile fields the goal profile is built from."""

    starting_weight: object = None
    goal_weight: object = None
    weight_unit: str | None = None
    maintenance_calories: object = None
    created_at: date | None = None


@dataclass(frozen=True)
class GoalProfileCandidates:
    """Everything upstream knows about a user's goal."""

    active: GoalRow | None = None
    most_recent: GoalRow | None = None
    user: UserProfileRow | None = None


@dataclass(frozen=True)
class GoalProfile:
    """Validated goal profile, weights in pounds."""

    start_date: date
    start_weight: float
    goal_weight: float
    weekly_change_rate: float
    daily_calorie_target: float
    daily_protein_target: float


@dataclass(frozen=True)
class InsufficientProfileData:
    """Returned when required profile fields are missing or invalid."""

    reason: str
    message: str = INSUFFICIENT_PROFILE_MESSAGE
