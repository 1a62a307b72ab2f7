"""Domain models for food logs and weight check-ins."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LogEntry:
    """A logged item (or pre-summed day) with raw calorie/protein values."""

    day: date
    calories: object = 0.0
    protein: object = 0.0
    has_items: bool = True


@dataclass(frozen=True)
class DailyLog:
    """Per-day totals."""

    day: date
    calories_consumed: float
    protein_consumed: float
    has_entries: bool


@dataclass(frozen=True)
class RawWeightObservation:
    """Weight check-in as stored upstream."""

    day: date | None
    weight: object
    unit: str | None = None


@dataclass(frozen=True)
class WeightObservation:
    """Validated weight check-in in pounds."""

    day: date
    weight: float
