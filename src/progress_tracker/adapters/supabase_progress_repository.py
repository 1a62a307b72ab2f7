"""Supabase repository for progress analytics inputs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from progress_tracker.domain.goals import GoalProfileCandidates, GoalRow, UserProfileRow
from progress_tracker.domain.logs import LogEntry, RawWeightObservation
from progress_tracker.services.progress import ProgressRepository
from progress_tracker.services.units import MassUnit

_GOAL_COLUMNS = (
    "start_date, loss_rate_lbs_per_week, daily_calories, protein_g, is_active"
)
_USER_COLUMNS = (
    "starting_weight, goal_weight, weight_unit, maintenance_calories, created_at"
)
# Check-in weights are always stored in kilograms.
CHECK_IN_UNIT = MassUnit.KILOGRAMS.value


@dataclass
class SupabaseProgressRepository(ProgressRepository):
    """Supabase implementation for progress queries."""

    client: Client

    def get_goal_profile_candidates(self, user_id: UUID) -> GoalProfileCandidates:
        """Return the active goal, most recent goal and user profile rows."""
        active = self._latest_goal(user_id, active_only=True)
        most_recent = active or self._latest_goal(user_id, active_only=False)
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        user = _parse_user_row(response.data[0]) if response.data else None
        return GoalProfileCandidates(active=active, most_recent=most_recent, user=user)

    def list_log_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[LogEntry]:
        """Return one entry per meal item; empty meals yield an untracked entry."""
        response = (
            self.client.table("meals")
            .select("date, meal_items(calories, protein)")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        entries: list[LogEntry] = []
        for meal in response.data or []:
            day = _parse_date(meal.get("date"))
            if day is None:
                continue
            items = meal.get("meal_items") or []
            if not items:
                entries.append(LogEntry(day=day, has_items=False))
                continue
            entries.extend(
                LogEntry(
                    day=day,
                    calories=item.get("calories"),
                    protein=item.get("protein"),
                )
                for item in items
            )
        return entries

    def list_weight_observations(
        self, user_id: UUID, start: date, end: date
    ) -> list[RawWeightObservation]:
        """Return weight check-ins between two dates, inclusive."""
        response = (
            self.client.table("check_ins")
            .select("date, weight")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .not_.is_("weight", "null")
            .order("date", desc=False)
            .execute()
        )
        return [
            RawWeightObservation(
                day=_parse_date(row.get("date")),
                weight=row.get("weight"),
                unit=CHECK_IN_UNIT,
            )
            for row in response.data or []
        ]

    def _latest_goal(self, user_id: UUID, *, active_only: bool) -> GoalRow | None:
        query = (
            self.client.table("goals")
            .select(_GOAL_COLUMNS)
            .eq("user_id", str(user_id))
        )
        if active_only:
            query = query.eq("is_active", True)
        response = query.order("start_date", desc=True).limit(1).execute()
        if not response.data:
            return None
        return _parse_goal_row(response.data[0])


def _parse_goal_row(row: dict[str, object]) -> GoalRow:
    return GoalRow(
        start_date=_parse_date(row.get("start_date")),
        weekly_change_rate=row.get("loss_rate_lbs_per_week"),
        daily_calories=row.get("daily_calories"),
        protein_g=row.get("protein_g"),
        is_active=bool(row.get("is_active")),
    )


def _parse_user_row(row: dict[str, object]) -> UserProfileRow:
    weight_unit = row.get("weight_unit")
    return UserProfileRow(
        starting_weight=row.get("starting_weight"),
        goal_weight=row.get("goal_weight"),
        weight_unit=weight_unit if isinstance(weight_unit, str) else None,
        maintenance_calories=row.get("maintenance_calories"),
        created_at=_parse_date(row.get("created_at")),
    )


def _parse_date(raw: object) -> date | None:
    """Parse a date or timestamp string, keeping only the calendar date."""
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None
