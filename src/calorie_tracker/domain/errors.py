"""Error taxonomy for entry resolution and the entry log."""

from dataclasses import dataclass
from enum import StrEnum


class ResolutionErrorKind(StrEnum):
    """Failure kinds that can occur while resolving a free-text entry."""

    INVALID_INPUT = "InvalidInput"
    MISSING_CREDENTIAL = "MissingCredential"
    DIRECTORY_UNAVAILABLE = "DirectoryUnavailable"
    CALL_FAILED = "CallFailed"
    EMPTY_REPLY = "EmptyReply"
    UNPARSABLE_OUTPUT = "UnparsableOutput"
    INVALID_JSON = "InvalidJSON"
    SCHEMA_VIOLATION = "SchemaViolation"


class ResolutionError(Exception):
    """Raised when an entry cannot be resolved.

    `detail` is operator-facing diagnostic text and is never returned to
    API callers.
    """

    def __init__(self, kind: ResolutionErrorKind, detail: str = "") -> None:
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
        self.kind = kind
        self.detail = detail


class EntryNotFoundError(LookupError):
    """Raised when a logged entry does not exist."""


@dataclass(frozen=True)
class ErrorResponse:
    """Public, fixed-shape error returned to callers."""

    status_code: int
    message: str

    def to_wire(self) -> dict[str, str]:
        return {"error": self.message}


INTERNAL_ERROR = ErrorResponse(500, "Internal server error")

_INVALID_OUTPUT = ErrorResponse(500, "Invalid AI output")

_RESPONSES: dict[ResolutionErrorKind, ErrorResponse] = {
    ResolutionErrorKind.INVALID_INPUT: ErrorResponse(400, "Missing text"),
    ResolutionErrorKind.MISSING_CREDENTIAL: ErrorResponse(500, "Missing API key"),
    ResolutionErrorKind.DIRECTORY_UNAVAILABLE: INTERNAL_ERROR,
    ResolutionErrorKind.CALL_FAILED: ErrorResponse(500, "Gemini API failed"),
    ResolutionErrorKind.EMPTY_REPLY: ErrorResponse(500, "Empty AI response"),
    ResolutionErrorKind.UNPARSABLE_OUTPUT: _INVALID_OUTPUT,
    ResolutionErrorKind.INVALID_JSON: _INVALID_OUTPUT,
    ResolutionErrorKind.SCHEMA_VIOLATION: _INVALID_OUTPUT,
}


def classify_error(exc: Exception) -> ErrorResponse:
    """Map any exception to the public error response."""
    if isinstance(exc, ResolutionError):
        return _RESPONSES[exc.kind]
    if isinstance(exc, EntryNotFoundError):
        return ErrorResponse(404, "Entry not found")
    return INTERNAL_ERROR
