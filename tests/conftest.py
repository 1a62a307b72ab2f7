"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

import pytest

from progress_tracker.config import Settings
from progress_tracker.containers import AppContainer
from progress_tracker.domain.goals import (
    GoalProfile,
    GoalProfileCandidates,
    GoalRow,
    UserProfileRow,
)
from progress_tracker.domain.logs import LogEntry, RawWeightObservation
from progress_tracker.services.progress import ProgressRepository, ProgressService


@dataclass
class InMemoryProgressRepository(ProgressRepository):
    """In-memory progress repository for tests."""

    candidates: GoalProfileCandidates = field(default_factory=GoalProfileCandidates)
    entries: list[LogEntry] = field(default_factory=list)
    observations: list[RawWeightObservation] = field(default_factory=list)
    queried_ranges: list[tuple[date, date]] = field(default_factory=list)

    def get_goal_profile_candidates(self, user_id: UUID) -> GoalProfileCandidates:
        return self.candidates

    def list_log_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[LogEntry]:
        self.queried_ranges.append((start, end))
        return [entry for entry in self.entries if start <= entry.day <= end]

    def list_weight_observations(
        self, user_id: UUID, start: date, end: date
    ) -> list[RawWeightObservation]:
        return [
            observation
            for observation in self.observations
            if observation.day is not None and start <= observation.day <= end
        ]


def make_candidates(  # noqa: PLR0913
    starting_weight: object = "200",
    goal_weight: object = "180",
    weight_unit: str | None = "lbs",
    start_date: date | None = date(2024, 1, 1),
    weekly_change_rate: object = "1.0",
    daily_calories: object = 2000,
    protein_g: object = 150,
) -> GoalProfileCandidates:
    """Build profile candidates with an active goal."""
    return GoalProfileCandidates(
        active=GoalRow(
            start_date=start_date,
            weekly_change_rate=weekly_change_rate,
            daily_calories=daily_calories,
            protein_g=protein_g,
            is_active=True,
        ),
        user=UserProfileRow(
            starting_weight=starting_weight,
            goal_weight=goal_weight,
            weight_unit=weight_unit,
            maintenance_calories=2200,
            created_at=date(2023, 12, 1),
        ),
    )


def make_profile(**overrides: object) -> GoalProfile:
    """Build a valid goal profile, 200 lb to 180 lb at 1 lb/week."""
    values: dict[str, object] = {
        "start_date": date(2024, 1, 1),
        "start_weight": 200.0,
        "goal_weight": 180.0,
        "weekly_change_rate": 1.0,
        "daily_calorie_target": 2000.0,
        "daily_protein_target": 100.0,
    }
    values.update(overrides)
    return GoalProfile(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        api_token="api-token",
    )


@pytest.fixture
def repository() -> InMemoryProgressRepository:
    return InMemoryProgressRepository(candidates=make_candidates())


@pytest.fixture
def container(
    settings: Settings, repository: InMemoryProgressRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        progress_service=ProgressService(repository),
    )
