"""Request parsing and error response helpers shared by the API routes."""

import json
from datetime import UTC, date, datetime

from fastapi.responses import JSONResponse

from calorie_tracker.domain.errors import classify_error


def decode_json_body(raw: bytes) -> dict[str, object]:
    """Decode a JSON object body; anything else reads as an empty object.

    A body that is itself a JSON-encoded string is decoded a second time.
    """
    try:
        body: object = json.loads(raw or b"null")
        if isinstance(body, str):
            body = json.loads(body)
    except (ValueError, RecursionError):
        return {}
    return body if isinstance(body, dict) else {}


def parse_day(raw: object) -> date | None:
    """Parse an ISO date (or the date part of an ISO timestamp)."""
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValueError("date must be a string")
    return date.fromisoformat(raw.strip()[:10])


def today() -> date:
    return datetime.now(tz=UTC).date()


def error_response(exc: Exception) -> JSONResponse:
    """Return the fixed-shape error response for an exception."""
    classified = classify_error(exc)
    return JSONResponse(classified.to_wire(), status_code=classified.status_code)


def bad_request(message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=400)
