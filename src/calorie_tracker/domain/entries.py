"""Domain models for meal and workout entries."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EntryKind(StrEnum):
    """Closed set of entry kinds."""

    MEAL = "meal"
    WORKOUT = "workout"


class ResolvedEntry(BaseModel):
    """Normalized nutrition entry; `kind` travels as `type` on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: EntryKind = Field(alias="type")
    name: str
    calories: float
    protein: float | None = None
    fat: float | None = None
    carbs: float | None = None

    def to_wire(self) -> dict[str, object]:
        """Return the wire representation without absent macros."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


@dataclass(frozen=True)
class LoggedEntry:
    """Entry stored in the log with its identity and target day."""

    id: UUID
    day: date
    created_at: datetime
    entry: ResolvedEntry

    def to_wire(self) -> dict[str, object]:
        return {
            "id": str(self.id),
            "date": self.day.isoformat(),
            "created_at": self.created_at.isoformat(),
            **self.entry.to_wire(),
        }


@dataclass(frozen=True)
class DailySummary:
    """Calorie and macro totals for one day."""

    day: date
    calories_in: float
    calories_out: float
    protein: float
    fat: float
    carbs: float
    goal: int


@dataclass(frozen=True)
class PeriodSummary:
    """Daily summaries for a contiguous range of days."""

    start: date
    end: date
    days: list[DailySummary]
