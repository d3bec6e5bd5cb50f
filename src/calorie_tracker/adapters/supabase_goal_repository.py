"""Supabase repository for the daily calorie goal."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from calorie_tracker.services.entries import GoalRepository

_GOAL_KEY = "daily_goal"


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Stores the goal in the `app_settings` key-value table."""

    client: Client

    def get_daily_goal(self) -> int | None:
        """Return the stored goal."""
        response = (
            self.client.table("app_settings")
            .select("value")
            .eq("key", _GOAL_KEY)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    def set_daily_goal(self, goal: int) -> None:
        """Insert or update the stored goal."""
        self.client.table("app_settings").upsert(
            {
                "key": _GOAL_KEY,
                "value": str(goal),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
