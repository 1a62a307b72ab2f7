"""Goal profile resolution from upstream goal and user rows."""

import logging
import math
from datetime import date

from progress_tracker.domain.goals import (
    GoalProfile,
    GoalProfileCandidates,
    GoalRow,
    InsufficientProfileData,
)
from progress_tracker.services.numbers import parse_finite
from progress_tracker.services.units import resolve_unit, to_pounds

DEFAULT_WEEKLY_CHANGE_RATE = 1.0
DEFAULT_DAILY_CALORIES = 2000.0
DEFAULT_DAILY_PROTEIN_G = 150.0

_logger = logging.getLogger(__name__)


def select_goal_row(candidates: GoalProfileCandidates) -> GoalRow | None:
    """Prefer the active goal, then the most recent goal of any state."""
    if candidates.active is not None:
        return candidates.active
    return candidates.most_recent


def resolve_start_date(
    goal: GoalRow | None, account_created: date | None, today: date
) -> date:
    """Pick the journey start: goal start date, then account creation, then today."""
    if goal is not None and goal.start_date is not None:
        return goal.start_date
    if account_created is not None:
        return account_created
    return today


def resolve_goal_profile(
    candidates: GoalProfileCandidates, today: date
) -> GoalProfile | InsufficientProfileData:
    """Build a validated goal profile or report what is missing."""
    user = candidates.user
    if user is None:
        return InsufficientProfileData(reason="missing_user_profile")

    raw_start = parse_finite(user.starting_weight)
    if raw_start is None or raw_start <= 0:
        _logger.info("Starting weight missing or invalid: %r", user.starting_weight)
        return InsufficientProfileData(reason="invalid_starting_weight")
    raw_goal = parse_finite(user.goal_weight)
    if raw_goal is None or raw_goal <= 0:
        _logger.info("Goal weight missing or invalid: %r", user.goal_weight)
        return InsufficientProfileData(reason="invalid_goal_weight")

    unit = resolve_unit(user.weight_unit)
    goal_row = select_goal_row(candidates)
    weekly_change_rate = _first_nonzero(
        goal_row.weekly_change_rate if goal_row else None,
        default=DEFAULT_WEEKLY_CHANGE_RATE,
    )
    daily_calories = _first_nonzero(
        goal_row.daily_calories if goal_row else None,
        user.maintenance_calories,
        default=DEFAULT_DAILY_CALORIES,
    )
    daily_protein = _first_nonzero(
        goal_row.protein_g if goal_row else None,
        default=DEFAULT_DAILY_PROTEIN_G,
    )

    profile = GoalProfile(
        start_date=resolve_start_date(goal_row, user.created_at, today),
        start_weight=to_pounds(raw_start, unit),
        goal_weight=to_pounds(raw_goal, unit),
        weekly_change_rate=weekly_change_rate,
        daily_calorie_target=daily_calories,
        daily_protein_target=daily_protein,
    )
    problem = profile_problem(profile)
    if problem is not None:
        return InsufficientProfileData(reason=problem)
    return profile


def profile_problem(profile: GoalProfile) -> str | None:
    """Return why a profile violates its invariants, or None when valid."""
    checks = (
        ("invalid_starting_weight", profile.start_weight),
        ("invalid_goal_weight", profile.goal_weight),
        ("invalid_weekly_change_rate", profile.weekly_change_rate),
    )
    for reason, value in checks:
        if not math.isfinite(value) or value <= 0:
            return reason
    if not math.isfinite(profile.daily_calorie_target):
        return "invalid_daily_calorie_target"
    if not math.isfinite(profile.daily_protein_target):
        return "invalid_daily_protein_target"
    return None


def _first_nonzero(*raw_values: object, default: float) -> float:
    for raw in raw_values:
        value = parse_finite(raw)
        if value:
            return value
    return default
