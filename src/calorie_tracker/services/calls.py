"""Single (model, operation) call attempts."""

import logging
from dataclasses import dataclass

import httpx

from calorie_tracker.adapters.gemini_client import GeminiClient
from calorie_tracker.domain.dispatch import CallOperation, CallOutcome, ModelCandidate

_logger = logging.getLogger(__name__)


def build_request_body(operation: CallOperation, prompt: str) -> dict[str, object]:
    """Return the request body shape expected by `operation`."""
    match operation:
        case CallOperation.GENERATE_CONTENT:
            return {"contents": [{"parts": [{"text": prompt}]}]}
        case CallOperation.GENERATE_MESSAGE:
            return {
                "messages": [
                    {"author": "user", "content": [{"type": "text", "text": prompt}]}
                ]
            }
        case CallOperation.GENERATE_TEXT:
            return {"text": prompt}


@dataclass
class CallExecutor:
    """Performs exactly one outbound call and reports the outcome as a value."""

    client: GeminiClient

    async def execute(
        self,
        api_key: str,
        candidate: ModelCandidate,
        operation: CallOperation,
        prompt: str,
    ) -> CallOutcome:
        """Invoke `operation` on `candidate`; failures are returned, not raised."""
        body = build_request_body(operation, prompt)
        try:
            reply = await self.client.invoke(
                api_key, candidate.identifier, operation.value, body
            )
        except httpx.HTTPStatusError as exc:
            return _failed(candidate, operation, f"HTTP {exc.response.status_code}")
        except Exception as exc:  # noqa: BLE001
            return _failed(candidate, operation, type(exc).__name__)

        if not isinstance(reply, dict):
            return _failed(candidate, operation, "reply is not an object")
        if "error" in reply:
            reason = f"embedded error: {_error_summary(reply['error'])}"
            return _failed(candidate, operation, reason)
        return CallOutcome(candidate=candidate, operation=operation, reply=reply)


def _failed(
    candidate: ModelCandidate, operation: CallOperation, reason: str
) -> CallOutcome:
    _logger.info(
        "Call failed: model=%s operation=%s reason=%s",
        candidate.identifier,
        operation.value,
        reason,
    )
    return CallOutcome(candidate=candidate, operation=operation, failure=reason)


def _error_summary(error: object) -> str:
    if isinstance(error, dict):
        return str(error.get("status") or error.get("code") or "unknown")
    return str(error)
