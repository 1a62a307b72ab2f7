"""Domain models for trajectory and consistency results."""

from dataclasses import dataclass, field
from datetime import date

from progress_tracker.domain.logs import WeightObservation

DISABLED_MESSAGE = "Progress projection is unavailable for this goal."


@dataclass(frozen=True)
class ProjectionPoint:
    """One day of the planned and calorie-adjusted weight curves."""

    day: date
    planned_weight: float
    projected_weight: float
    actual_weight: float | None = None


@dataclass(frozen=True)
class DailyScore:
    """Consistency sub-scores for a single day."""

    day: date
    tracking_score: int
    streak_score: int
    protein_score: int
    streak_days: int = 0


@dataclass(frozen=True)
class ConsistencyResult:
    """Consistency score over a date range."""

    daily_tracking_avg: int
    streak_avg: int
    protein_avg: int
    total: int
    longest_streak: int
    avg_protein_logged: float
    protein_target: float
    days_in_range: int = 0
    days_with_data: int = 0
    has_logged_today: bool = False
    daily_scores: tuple[DailyScore, ...] = ()


@dataclass(frozen=True)
class WeightProgress:
    """Progress toward the goal weight from check-ins."""

    first_weight: float
    latest_weight: float
    weight_change: float
    percent_complete: float


@dataclass(frozen=True)
class TrajectoryReport:
    """Projection series with the data it was built from."""

    points: list[ProjectionPoint]
    goal_date: date
    observations: list[WeightObservation] = field(default_factory=list)
    weight_progress: WeightProgress | None = None


@dataclass(frozen=True)
class EngineError:
    """Returned when a computation guard trips."""

    reason: str
    message: str = DISABLED_MESSAGE
