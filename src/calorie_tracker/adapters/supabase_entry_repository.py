"""Supabase repository for logged entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.entries import EntryKind, LoggedEntry, ResolvedEntry
from calorie_tracker.services.entries import EntryRepository

_COLUMNS = "id, day, created_at, kind, name, calories, protein, fat, carbs"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for the entry log."""

    client: Client

    def add_entry(self, entry: LoggedEntry) -> None:
        """Insert an entry row."""
        self.client.table("entries").insert(
            {
                "id": str(entry.id),
                "day": entry.day.isoformat(),
                "created_at": entry.created_at.isoformat(),
                "kind": entry.entry.kind.value,
                "name": entry.entry.name,
                "calories": entry.entry.calories,
                "protein": entry.entry.protein,
                "fat": entry.entry.fat,
                "carbs": entry.entry.carbs,
            }
        ).execute()

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry row and report whether one was removed."""
        response = (
            self.client.table("entries").delete().eq("id", str(entry_id)).execute()
        )
        return bool(response.data)

    def list_entries(self, start: date, end: date) -> list[LoggedEntry]:
        """Return entries in the day range, oldest first."""
        response = (
            self.client.table("entries")
            .select(_COLUMNS)
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> LoggedEntry:
    return LoggedEntry(
        id=UUID(str(row["id"])),
        day=date.fromisoformat(str(row["day"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        entry=ResolvedEntry(
            kind=EntryKind(row["kind"]),
            name=str(row["name"]),
            calories=float(row.get("calories") or 0.0),
            protein=_optional_float(row.get("protein")),
            fat=_optional_float(row.get("fat")),
            carbs=_optional_float(row.get("carbs")),
        ),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
