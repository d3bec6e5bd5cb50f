"""Entry log endpoints: logging, listing, goal and summaries."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from calorie_tracker.api.responses import (
    bad_request,
    decode_json_body,
    error_response,
    parse_day,
    today,
)
from calorie_tracker.domain.entries import DailySummary, EntryKind
from calorie_tracker.domain.errors import (
    EntryNotFoundError,
    ResolutionError,
    ResolutionErrorKind,
)
from calorie_tracker.services.normalization import normalize_entry

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["entries"])


class GoalUpdate(BaseModel):
    """Request body for updating the daily goal."""

    goal: int = Field(gt=0)


@router.post("/entries", status_code=201, response_model=None)
async def create_entry(request: Request) -> dict[str, object] | JSONResponse:
    """Log a manually entered meal or workout."""
    container: AppContainer = request.app.state.container
    body = decode_json_body(await request.body())
    try:
        day = parse_day(body.get("date"))
        entry = normalize_entry(body)
    except ValueError:
        return bad_request("Invalid date")
    except ResolutionError:
        return bad_request("Invalid entry")
    logged = container.entry_log_service.log_entry(entry, day or today())
    return logged.to_wire()


@router.post("/entries/from-text", status_code=201, response_model=None)
async def create_entry_from_text(request: Request) -> dict[str, object] | JSONResponse:
    """Resolve a free-text description and log the result."""
    container: AppContainer = request.app.state.container
    body = decode_json_body(await request.body())
    try:
        day = parse_day(body.get("date"))
    except ValueError:
        return bad_request("Invalid date")
    try:
        logged = await container.entry_log_service.log_from_text(
            body.get("text"), day or today()
        )
    except ResolutionError as exc:
        if exc.kind is not ResolutionErrorKind.INVALID_INPUT:
            _logger.info("Logging from text failed: %s", exc.kind.value)
        return error_response(exc)
    return logged.to_wire()


@router.get("/entries")
async def list_entries(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    kind: EntryKind | None = Query(default=None, alias="type"),
) -> dict[str, object]:
    """Return the entries logged for a day."""
    container: AppContainer = request.app.state.container
    resolved_day = day or today()
    entries = container.entry_log_service.list_entries(resolved_day, kind)
    return {
        "date": resolved_day.isoformat(),
        "entries": [logged.to_wire() for logged in entries],
    }


@router.delete("/entries/{entry_id}", response_model=None)
async def delete_entry(
    entry_id: UUID, request: Request
) -> dict[str, str] | JSONResponse:
    """Delete a logged entry."""
    container: AppContainer = request.app.state.container
    try:
        container.entry_log_service.delete_entry(entry_id)
    except EntryNotFoundError as exc:
        return error_response(exc)
    return {"status": "deleted"}


@router.get("/goal")
async def get_goal(request: Request) -> dict[str, int]:
    """Return the daily calorie goal."""
    container: AppContainer = request.app.state.container
    return {"goal": container.entry_log_service.get_daily_goal()}


@router.put("/goal")
async def set_goal(update: GoalUpdate, request: Request) -> dict[str, int]:
    """Update the daily calorie goal."""
    container: AppContainer = request.app.state.container
    return {"goal": container.entry_log_service.set_daily_goal(update.goal)}


@router.get("/summary/daily")
async def daily_summary(
    request: Request, day: date | None = Query(default=None, alias="date")
) -> dict[str, object]:
    """Return calorie and macro totals for a day."""
    container: AppContainer = request.app.state.container
    summary = container.entry_log_service.daily_summary(day or today())
    return _summary_to_wire(summary)


@router.get("/summary/weekly")
async def weekly_summary(
    request: Request, end: date | None = None
) -> dict[str, object]:
    """Return daily totals for the 7 days ending on `end`."""
    container: AppContainer = request.app.state.container
    summary = container.entry_log_service.weekly_summary(end or today())
    return {
        "start": summary.start.isoformat(),
        "end": summary.end.isoformat(),
        "days": [_summary_to_wire(daily) for daily in summary.days],
    }


def _summary_to_wire(summary: DailySummary) -> dict[str, object]:
    data = asdict(summary)
    data["date"] = data.pop("day").isoformat()
    return data
