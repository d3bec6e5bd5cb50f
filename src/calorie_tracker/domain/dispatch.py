"""Models for model discovery and call attempts."""

from dataclasses import dataclass
from enum import StrEnum


class CallOperation(StrEnum):
    """Invocation shapes a model may support."""

    GENERATE_CONTENT = "generateContent"
    GENERATE_MESSAGE = "generateMessage"
    GENERATE_TEXT = "generateText"


CALL_OPERATIONS: tuple[CallOperation, ...] = (
    CallOperation.GENERATE_CONTENT,
    CallOperation.GENERATE_MESSAGE,
    CallOperation.GENERATE_TEXT,
)


@dataclass(frozen=True)
class ModelCandidate:
    """Model entry from the backend directory."""

    identifier: str


@dataclass(frozen=True)
class CallOutcome:
    """Result of one (model, operation) attempt."""

    candidate: ModelCandidate
    operation: CallOperation
    reply: dict[str, object] | None = None
    failure: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None and self.reply is not None
