"""Tests for the consistency scorer."""

from datetime import date, timedelta

import pytest

from progress_tracker.domain.logs import DailyLog
from progress_tracker.services.consistency import (
    current_day_streak,
    protein_score,
    score_consistency,
    streak_curve,
    streak_score,
)
from tests.conftest import make_profile

START = date(2024, 1, 1)


def _log(day: date, protein: float = 0.0, has_entries: bool = True) -> DailyLog:
    return DailyLog(
        day=day,
        calories_consumed=1800.0,
        protein_consumed=protein,
        has_entries=has_entries,
    )


def _day(offset: int) -> date:
    return START + timedelta(days=offset)


@pytest.mark.parametrize(
    ("consumed", "expected"),
    [
        (94.9, 20),
        (95.0, 25),
        (100.0, 25),
        (105.0, 25),
        (80.0, 20),
        (79.9, 15),
        (60.0, 15),
        (59.9, 10),
        (40.0, 10),
        (20.0, 3),
        (0.0, 0),
        (150.0, 16),
        (300.0, 15),
    ],
)
def test_protein_tiers(consumed: float, expected: int) -> None:
    assert protein_score(consumed, 100.0) == expected


def test_protein_just_over_target_scores_below_full() -> None:
    score = protein_score(105.1, 100.0)

    assert 15 <= score < 25


def test_protein_against_150g_target() -> None:
    assert protein_score(150.0, 150.0) == 25
    assert protein_score(0.0, 150.0) == 0


def test_protein_zero_target_scores_zero() -> None:
    assert protein_score(120.0, 0.0) == 0


def test_streak_score_values() -> None:
    assert streak_score(0) == 0
    assert streak_score(1) == 3
    assert streak_score(7) == 18
    assert streak_score(14) == 26


def test_streak_curve_is_increasing_and_bounded() -> None:
    values = [streak_curve(n) for n in range(1, 300)]

    assert all(later > earlier for earlier, later in zip(values, values[1:]))
    assert all(value < 35 for value in values)


def test_rounded_streak_score_never_decreases() -> None:
    scores = [streak_score(n) for n in range(0, 120)]

    assert scores == sorted(scores)
    assert max(scores) <= 35


def test_mixed_range_averages_over_tracked_days_only() -> None:
    logs = {
        _day(0): _log(_day(0), protein=100),
        _day(1): _log(_day(1), protein=100),
        _day(3): _log(_day(3), protein=50),
    }

    result = score_consistency(make_profile(), logs, _day(0), _day(4))

    assert result.daily_tracking_avg == 40
    assert result.streak_avg == 4
    assert result.protein_avg == 20
    assert result.total == 64
    assert result.longest_streak == 2
    assert result.avg_protein_logged == pytest.approx(250 / 3)
    assert result.protein_target == 100.0
    assert result.days_in_range == 5
    assert result.days_with_data == 3
    assert [score.streak_days for score in result.daily_scores] == [1, 2, 0, 1, 0]


def test_missed_day_resets_streak() -> None:
    logs = {_day(i): _log(_day(i), protein=100) for i in (0, 1, 2, 4, 5)}

    result = score_consistency(make_profile(), logs, _day(0), _day(5))

    streaks = [score.streak_score for score in result.daily_scores]
    assert streaks == [3, 6, 9, 0, 3, 6]
    assert result.longest_streak == 3


def test_range_without_logs_scores_zero() -> None:
    result = score_consistency(make_profile(), {}, _day(0), _day(4))

    assert result.total == 0
    assert result.daily_tracking_avg == 0
    assert result.streak_avg == 0
    assert result.protein_avg == 0
    assert result.longest_streak == 0
    assert result.protein_target == 100.0


def test_short_range_without_tracked_days_scores_zero() -> None:
    logs = {_day(0): _log(_day(0), has_entries=False)}

    result = score_consistency(make_profile(), logs, _day(0), _day(1))

    assert result.total == 0
    assert result.days_with_data == 0
    assert len(result.daily_scores) == 2


def test_logs_outside_range_are_ignored() -> None:
    logs = {_day(10): _log(_day(10), protein=100)}

    result = score_consistency(make_profile(), logs, _day(0), _day(4))

    assert result.total == 0


def test_single_tracked_day() -> None:
    logs = {_day(0): _log(_day(0), protein=100)}

    result = score_consistency(make_profile(), logs, _day(0), _day(0), today=_day(0))

    assert result.total == 68
    assert result.longest_streak == 1
    assert result.has_logged_today is True


def test_reversed_range_scores_zero() -> None:
    logs = {_day(0): _log(_day(0), protein=100)}

    result = score_consistency(make_profile(), logs, _day(3), _day(0))

    assert result.total == 0
    assert result.days_in_range == 0


def test_total_stays_within_bounds_for_perfect_month() -> None:
    logs = {_day(i): _log(_day(i), protein=100) for i in range(60)}

    result = score_consistency(make_profile(), logs, _day(0), _day(59))

    assert 0 <= result.total <= 100
    assert result.daily_tracking_avg == 40
    assert result.protein_avg == 25
    assert result.longest_streak == 60


def test_scoring_is_idempotent() -> None:
    logs = {_day(i): _log(_day(i), protein=80 + i) for i in (0, 2, 3)}
    profile = make_profile()

    first = score_consistency(profile, logs, _day(0), _day(6), today=_day(6))
    second = score_consistency(profile, logs, _day(0), _day(6), today=_day(6))

    assert first == second


def test_avg_protein_logged_skips_days_without_protein() -> None:
    logs = {
        _day(0): _log(_day(0), protein=0),
        _day(1): _log(_day(1), protein=120),
    }

    result = score_consistency(make_profile(), logs, _day(0), _day(1))

    assert result.avg_protein_logged == 120


def test_current_day_streak_counts_back_from_today() -> None:
    logs = {_day(i): _log(_day(i)) for i in (0, 2, 3, 4)}

    assert current_day_streak(logs, today=_day(4)) == 3
    assert current_day_streak(logs, today=_day(4), since=_day(3)) == 2
    assert current_day_streak(logs, today=_day(5)) == 0
