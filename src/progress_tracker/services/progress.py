"""Progress analytics service over upstream goal and log data."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from progress_tracker.domain.goals import (
    GoalProfile,
    GoalProfileCandidates,
    InsufficientProfileData,
)
from progress_tracker.domain.logs import LogEntry, RawWeightObservation
from progress_tracker.domain.progress import (
    ConsistencyResult,
    EngineError,
    TrajectoryReport,
)
from progress_tracker.services.aggregation import (
    aggregate_daily_logs,
    validate_weight_observations,
)
from progress_tracker.services.consistency import (
    current_day_streak,
    score_consistency,
)
from progress_tracker.services.goals import resolve_goal_profile
from progress_tracker.services.trajectory import (
    goal_date,
    project_trajectory,
    summarize_weight_progress,
)


class ProgressRepository(Protocol):
    """Read-only persistence interface for progress analytics."""

    def get_goal_profile_candidates(self, user_id: UUID) -> GoalProfileCandidates:
        """Return the active goal, most recent goal and user profile rows."""

    def list_log_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[LogEntry]:
        """Return logged items between two dates, inclusive."""

    def list_weight_observations(
        self, user_id: UUID, start: date, end: date
    ) -> list[RawWeightObservation]:
        """Return weight check-ins between two dates, inclusive."""


@dataclass
class ProgressService:
    """Service that fetches upstream rows and runs the analytics engine."""

    repository: ProgressRepository

    def resolve_profile(
        self, user_id: UUID, today: date
    ) -> GoalProfile | InsufficientProfileData:
        """Return the user's goal profile."""
        candidates = self.repository.get_goal_profile_candidates(user_id)
        return resolve_goal_profile(candidates, today)

    def get_trajectory(
        self, user_id: UUID, today: date
    ) -> TrajectoryReport | InsufficientProfileData | EngineError:
        """Return the planned and projected weight curves from journey start."""
        profile = self.resolve_profile(user_id, today)
        if isinstance(profile, InsufficientProfileData):
            return profile
        target_date = goal_date(profile)
        if isinstance(target_date, EngineError):
            return target_date

        entries = self.repository.list_log_entries(user_id, profile.start_date, today)
        raw_observations = self.repository.list_weight_observations(
            user_id, profile.start_date, today
        )
        daily_logs = aggregate_daily_logs(entries)
        observations = validate_weight_observations(raw_observations)
        points = project_trajectory(profile, daily_logs, observations, today)
        if isinstance(points, EngineError):
            return points
        return TrajectoryReport(
            points=points,
            goal_date=target_date,
            observations=observations,
            weight_progress=summarize_weight_progress(profile, observations),
        )

    def get_consistency(
        self,
        user_id: UUID,
        today: date,
        start: date | None = None,
        end: date | None = None,
    ) -> ConsistencyResult | InsufficientProfileData:
        """Return the consistency score, by default from journey start to today."""
        profile = self.resolve_profile(user_id, today)
        if isinstance(profile, InsufficientProfileData):
            return profile
        range_start = start or profile.start_date
        range_end = end or today
        if range_end < range_start:
            range_start, range_end = range_end, range_start

        entries = self.repository.list_log_entries(user_id, range_start, range_end)
        daily_logs = aggregate_daily_logs(entries)
        return score_consistency(profile, daily_logs, range_start, range_end, today)

    def get_day_streak(
        self, user_id: UUID, today: date
    ) -> int | InsufficientProfileData:
        """Return the number of consecutive tracked days ending today."""
        profile = self.resolve_profile(user_id, today)
        if isinstance(profile, InsufficientProfileData):
            return profile
        if today < profile.start_date:
            return 0
        entries = self.repository.list_log_entries(user_id, profile.start_date, today)
        return current_day_streak(
            aggregate_daily_logs(entries), today, since=profile.start_date
        )
