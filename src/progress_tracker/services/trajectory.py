"""Planned and calorie-adjusted weight trajectories."""

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from itertools import accumulate

from progress_tracker.domain.goals import GoalProfile
from progress_tracker.domain.logs import DailyLog, WeightObservation
from progress_tracker.domain.progress import (
    EngineError,
    ProjectionPoint,
    WeightProgress,
)

# Energy equivalent of one pound of body mass.
KCAL_PER_LB = 3500.0
DAYS_PER_WEEK = 7
# Longest journey the projector will lay out, one point per day.
MAX_PROJECTION_DAYS = 100 * 366

_logger = logging.getLogger(__name__)


def total_days(profile: GoalProfile) -> int | EngineError:
    """Number of days from the start date to the goal date."""
    rate = profile.weekly_change_rate
    if not math.isfinite(rate) or rate <= 0:
        return EngineError(reason="invalid_weekly_change_rate")
    if not (math.isfinite(profile.start_weight) and math.isfinite(profile.goal_weight)):
        return EngineError(reason="invalid_weight")

    total_change = abs(profile.goal_weight - profile.start_weight)
    if total_change == 0:
        return 0
    days = (total_change / rate) * DAYS_PER_WEEK
    if not math.isfinite(days) or days < 0:
        return EngineError(reason="invalid_total_days")
    horizon = min(MAX_PROJECTION_DAYS, (date.max - profile.start_date).days)
    if math.ceil(days) > horizon:
        _logger.warning("Goal is %.0f days away, beyond the projection horizon", days)
        return EngineError(reason="invalid_total_days")
    return math.ceil(days)


def goal_date(profile: GoalProfile) -> date | EngineError:
    """Date the planned line reaches the goal weight."""
    days = total_days(profile)
    if isinstance(days, EngineError):
        return days
    return profile.start_date + timedelta(days=days)


def planned_weights(profile: GoalProfile) -> list[float] | EngineError:
    """Linear planned weight for each day from start to goal, inclusive."""
    days = total_days(profile)
    if isinstance(days, EngineError):
        return days
    if days == 0:
        return [profile.start_weight]
    change = profile.goal_weight - profile.start_weight
    return [profile.start_weight + change * i / days for i in range(days + 1)]


def project_trajectory(
    profile: GoalProfile,
    daily_logs: Mapping[date, DailyLog],
    weight_observations: Iterable[WeightObservation],
    today: date,
) -> list[ProjectionPoint] | EngineError:
    """Project the weight curve adjusted by actual calorie intake.

    Every tracked day up to and including ``today`` moves the projection by
    ``(calories - target) / 3500`` pounds. Untracked days and days after
    ``today`` carry the accumulated deviation forward unchanged.
    """
    if not math.isfinite(profile.daily_calorie_target):
        return EngineError(reason="invalid_daily_calorie_target")
    planned = planned_weights(profile)
    if isinstance(planned, EngineError):
        _logger.warning("Trajectory disabled: %s", planned.reason)
        return planned

    days = [profile.start_date + timedelta(days=i) for i in range(len(planned))]
    deltas = [
        _calorie_delta(daily_logs.get(day), profile.daily_calorie_target)
        if day <= today
        else 0.0
        for day in days
    ]
    cumulative_kcal = list(accumulate(deltas))
    actual = {item.day: item.weight for item in weight_observations}

    _logger.debug(
        "Projecting %s days: planned deficit %.1f kcal/day, final deviation %.3f lb",
        len(days),
        profile.weekly_change_rate * KCAL_PER_LB / DAYS_PER_WEEK,
        cumulative_kcal[-1] / KCAL_PER_LB,
    )
    return [
        ProjectionPoint(
            day=day,
            planned_weight=planned_weight,
            projected_weight=planned_weight + kcal / KCAL_PER_LB,
            actual_weight=actual.get(day),
        )
        for day, planned_weight, kcal in zip(days, planned, cumulative_kcal)
    ]


def summarize_weight_progress(
    profile: GoalProfile, observations: list[WeightObservation]
) -> WeightProgress | None:
    """Compare the first and latest check-ins against the goal weight."""
    if not observations:
        return None
    first = observations[0].weight
    latest = observations[-1].weight
    needed = first - profile.goal_weight
    percent = (first - latest) / needed * 100 if needed != 0 else 0.0
    return WeightProgress(
        first_weight=first,
        latest_weight=latest,
        weight_change=first - latest,
        percent_complete=percent,
    )


def _calorie_delta(log: DailyLog | None, target: float) -> float:
    if log is None or not log.has_entries:
        return 0.0
    return log.calories_consumed - target
