"""Consistency score over a date range.

Each day in the range gets three sub-scores:

- tracking (0 or 40): the day has at least one logged item;
- streak (0-35): a saturating curve of the current run of tracked days,
  ``35 * (1 - e^(-0.1 * streak))``; an untracked day resets the run to 0;
- protein (0-25): how close logged protein is to the daily target.

Averages are taken only over tracked days, so gaps break the streak without
diluting the other sub-scores.
"""

import logging
import math
from collections.abc import Mapping
from datetime import date, timedelta

from progress_tracker.domain.goals import GoalProfile
from progress_tracker.domain.logs import DailyLog
from progress_tracker.domain.progress import ConsistencyResult, DailyScore
from progress_tracker.services.calendar import DateRange
from progress_tracker.services.numbers import round_half_up

TRACKING_POINTS = 40
STREAK_POINTS = 35
PROTEIN_POINTS = 25
STREAK_GROWTH = 0.1
MAX_TOTAL = 100
# Ranges of at most this many days are scored even when nothing was logged.
EMPTY_RANGE_GRACE_DAYS = 2

_logger = logging.getLogger(__name__)


def streak_curve(streak_days: int) -> float:
    """Unrounded streak points for a run of tracked days."""
    if streak_days <= 0:
        return 0.0
    return STREAK_POINTS * -math.expm1(-STREAK_GROWTH * streak_days)


def streak_score(streak_days: int) -> int:
    """Streak points for a run of tracked days."""
    return round_half_up(streak_curve(streak_days))


def protein_score(protein_consumed: float, protein_target: float) -> int:
    """Protein accuracy points for one day."""
    if protein_target == 0:
        return 0
    pct = 100 * protein_consumed / protein_target
    if 95 <= pct <= 105:
        return PROTEIN_POINTS
    if 80 <= pct < 95:
        return 20
    if 60 <= pct < 80:
        return 15
    if 40 <= pct < 60:
        return 10
    if pct < 40:
        return round_half_up(pct / 40 * 5)
    penalty = min(10.0, (pct - 105) / 5)
    # Any overshoot scores below an on-target day.
    return min(PROTEIN_POINTS - 1, max(15, round_half_up(PROTEIN_POINTS - penalty)))


def score_days(
    daily_logs: Mapping[date, DailyLog],
    protein_target: float,
    date_range: DateRange,
) -> list[DailyScore]:
    """Score every day of the range in order, carrying the streak forward."""
    scores = []
    current_streak = 0
    for day in date_range:
        log = daily_logs.get(day)
        tracked = log is not None and log.has_entries
        current_streak = current_streak + 1 if tracked else 0
        protein = log.protein_consumed if log is not None else 0.0
        scores.append(
            DailyScore(
                day=day,
                tracking_score=TRACKING_POINTS if tracked else 0,
                streak_score=streak_score(current_streak),
                protein_score=protein_score(protein, protein_target),
                streak_days=current_streak,
            )
        )
    return scores


def score_consistency(
    profile: GoalProfile,
    daily_logs: Mapping[date, DailyLog],
    range_start: date,
    range_end: date,
    today: date | None = None,
) -> ConsistencyResult:
    """Compute the 0-100 consistency score for an inclusive date range."""
    date_range = DateRange(range_start, range_end)
    protein_target = profile.daily_protein_target
    has_logged_today = bool(
        today is not None
        and today in date_range
        and today in daily_logs
        and daily_logs[today].has_entries
    )

    logged_in_range = [day for day in daily_logs if day in date_range]
    if len(date_range) > EMPTY_RANGE_GRACE_DAYS and not logged_in_range:
        _logger.debug("No logs between %s and %s", range_start, range_end)
        return _zero_result(protein_target, len(date_range))

    scores = score_days(daily_logs, protein_target, date_range)
    tracked = [score for score in scores if score.tracking_score > 0]
    if not tracked:
        return _zero_result(protein_target, len(date_range), tuple(scores))

    count = len(tracked)
    avg_tracking = sum(score.tracking_score for score in tracked) / count
    avg_streak = sum(score.streak_score for score in tracked) / count
    avg_protein = sum(score.protein_score for score in tracked) / count
    total = round_half_up(avg_tracking + avg_streak + avg_protein)

    protein_days = [
        daily_logs[day].protein_consumed
        for day in logged_in_range
        if daily_logs[day].protein_consumed > 0
    ]
    avg_protein_logged = (
        sum(protein_days) / len(protein_days) if protein_days else 0.0
    )

    return ConsistencyResult(
        daily_tracking_avg=round_half_up(avg_tracking),
        streak_avg=round_half_up(avg_streak),
        protein_avg=round_half_up(avg_protein),
        total=min(MAX_TOTAL, max(0, total)),
        longest_streak=max(score.streak_days for score in scores),
        avg_protein_logged=avg_protein_logged,
        protein_target=protein_target,
        days_in_range=len(date_range),
        days_with_data=count,
        has_logged_today=has_logged_today,
        daily_scores=tuple(scores),
    )


def current_day_streak(
    daily_logs: Mapping[date, DailyLog], today: date, since: date | None = None
) -> int:
    """Count consecutive tracked days ending at ``today``."""
    streak = 0
    day = today
    while since is None or day >= since:
        log = daily_logs.get(day)
        if log is None or not log.has_entries:
            break
        streak += 1
        day -= timedelta(days=1)
    return streak


def _zero_result(
    protein_target: float,
    days_in_range: int,
    daily_scores: tuple[DailyScore, ...] = (),
) -> ConsistencyResult:
    return ConsistencyResult(
        daily_tracking_avg=0,
        streak_avg=0,
        protein_avg=0,
        total=0,
        longest_streak=0,
        avg_protein_logged=0.0,
        protein_target=protein_target,
        days_in_range=days_in_range,
        days_with_data=0,
        daily_scores=daily_scores,
    )
