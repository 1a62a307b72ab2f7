"""Reduction of raw log rows into per-day totals."""

import logging
from collections.abc import Iterable
from datetime import date

from progress_tracker.domain.logs import (
    DailyLog,
    LogEntry,
    RawWeightObservation,
    WeightObservation,
)
from progress_tracker.services.numbers import parse_finite
from progress_tracker.services.units import to_pounds

_logger = logging.getLogger(__name__)


def aggregate_daily_logs(entries: Iterable[LogEntry]) -> dict[date, DailyLog]:
    """Sum calories and protein per calendar day."""
    daily: dict[date, DailyLog] = {}
    for entry in entries:
        current = daily.get(entry.day)
        if current is None:
            current = DailyLog(
                day=entry.day,
                calories_consumed=0.0,
                protein_consumed=0.0,
                has_entries=False,
            )
        daily[entry.day] = DailyLog(
            day=entry.day,
            calories_consumed=current.calories_consumed
            + _contribution(entry.calories, "calories", entry.day),
            protein_consumed=current.protein_consumed
            + _contribution(entry.protein, "protein", entry.day),
            has_entries=current.has_entries or entry.has_items,
        )
    return daily


def validate_weight_observations(
    observations: Iterable[RawWeightObservation],
) -> list[WeightObservation]:
    """Drop unusable check-ins and convert the rest to pounds, ordered by day."""
    valid = []
    for observation in observations:
        weight = parse_finite(observation.weight)
        if observation.day is None or weight is None or weight <= 0:
            _logger.debug("Dropping weight observation: %r", observation)
            continue
        valid.append(
            WeightObservation(
                day=observation.day, weight=to_pounds(weight, observation.unit)
            )
        )
    return sorted(valid, key=lambda item: item.day)


def _contribution(raw: object, field_name: str, day: date) -> float:
    value = parse_finite(raw)
    if value is None or value < 0:
        if raw not in (None, ""):
            _logger.debug("Ignoring %s value %r on %s", field_name, raw, day)
        return 0.0
    return value
