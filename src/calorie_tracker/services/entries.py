"""Entry log: persisted meals and workouts, daily goal and summaries."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID, uuid4

from calorie_tracker.domain.entries import (
    DailySummary,
    EntryKind,
    LoggedEntry,
    PeriodSummary,
    ResolvedEntry,
)
from calorie_tracker.domain.errors import EntryNotFoundError
from calorie_tracker.services.resolver import EntryResolver


class EntryRepository(Protocol):
    """Persistence interface for logged entries."""

    def add_entry(self, entry: LoggedEntry) -> None:
        """Append an entry to the store."""

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry and return True if it existed."""

    def list_entries(self, start: date, end: date) -> list[LoggedEntry]:
        """Return entries with start <= day <= end in creation order."""


class GoalRepository(Protocol):
    """Persistence interface for the daily calorie goal."""

    def get_daily_goal(self) -> int | None:
        """Return the stored goal if set."""

    def set_daily_goal(self, goal: int) -> None:
        """Persist the goal."""


@dataclass
class EntryLogService:
    """Service for logging entries and summarizing them per day."""

    repository: EntryRepository
    goal_repository: GoalRepository
    resolver: EntryResolver
    default_goal: int = 2000

    def log_entry(self, entry: ResolvedEntry, day: date | None = None) -> LoggedEntry:
        """Assign an id and timestamp to an entry and store it."""
        now = datetime.now(tz=UTC)
        logged = LoggedEntry(
            id=uuid4(),
            day=day or now.date(),
            created_at=now,
            entry=entry,
        )
        self.repository.add_entry(logged)
        return logged

    async def log_from_text(self, text: object, day: date | None = None) -> LoggedEntry:
        """Resolve a free-text description and store the result."""
        entry = await self.resolver.resolve(text)
        return self.log_entry(entry, day)

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry or raise EntryNotFoundError."""
        if not self.repository.delete_entry(entry_id):
            raise EntryNotFoundError(str(entry_id))

    def list_entries(
        self, day: date, kind: EntryKind | None = None
    ) -> list[LoggedEntry]:
        """Return entries for a day, optionally limited to one kind."""
        entries = self.repository.list_entries(day, day)
        if kind is None:
            return entries
        return [logged for logged in entries if logged.entry.kind is kind]

    def get_daily_goal(self) -> int:
        """Return the stored goal or the configured default."""
        return self.goal_repository.get_daily_goal() or self.default_goal

    def set_daily_goal(self, goal: int) -> int:
        """Persist a positive daily goal."""
        if goal <= 0:
            raise ValueError("Daily goal must be positive")
        self.goal_repository.set_daily_goal(goal)
        return goal

    def daily_summary(self, day: date) -> DailySummary:
        """Return totals for a single day."""
        return self._summaries(day, day)[0]

    def weekly_summary(self, end: date) -> PeriodSummary:
        """Return totals for the 7 days ending on `end`."""
        start = end - timedelta(days=6)
        return PeriodSummary(start=start, end=end, days=self._summaries(start, end))

    def _summaries(self, start: date, end: date) -> list[DailySummary]:
        goal = self.get_daily_goal()
        totals: dict[date, dict[str, float]] = {}
        for logged in self.repository.list_entries(start, end):
            bucket = totals.setdefault(logged.day, _empty_totals())
            entry = logged.entry
            match entry.kind:
                case EntryKind.MEAL:
                    bucket["calories_in"] += entry.calories
                    bucket["protein"] += entry.protein or 0.0
                    bucket["fat"] += entry.fat or 0.0
                    bucket["carbs"] += entry.carbs or 0.0
                case EntryKind.WORKOUT:
                    bucket["calories_out"] += entry.calories

        summaries: list[DailySummary] = []
        current = start
        while current <= end:
            bucket = totals.get(current, _empty_totals())
            summaries.append(DailySummary(day=current, goal=goal, **bucket))
            current += timedelta(days=1)
        return summaries


def _empty_totals() -> dict[str, float]:
    return {
        "calories_in": 0.0,
        "calories_out": 0.0,
        "protein": 0.0,
        "fat": 0.0,
        "carbs": 0.0,
    }
