"""Cascade over ranked models and operations until one call succeeds."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from calorie_tracker.domain.dispatch import (
    CALL_OPERATIONS,
    CallOperation,
    CallOutcome,
    ModelCandidate,
)
from calorie_tracker.domain.errors import ResolutionError, ResolutionErrorKind
from calorie_tracker.services.calls import CallExecutor
from calorie_tracker.services.directory import ModelDirectory

_logger = logging.getLogger(__name__)


@dataclass
class CascadeDispatcher:
    """Tries ranked candidates in order, then one hardcoded fallback model.

    Attempts run one at a time and stop at the first success, so a query
    makes at most `len(candidates) * len(CALL_OPERATIONS) + 1` calls.
    """

    directory: ModelDirectory
    executor: CallExecutor
    fallback_model: str

    async def dispatch(self, api_key: str, prompt: str) -> CallOutcome:
        """Return the first successful outcome or raise CallFailed."""
        candidates = await self.directory.list_candidates(api_key)
        attempts = 0
        for candidate, operation in attempt_plan(candidates):
            attempts += 1
            outcome = await self.executor.execute(
                api_key, candidate, operation, prompt
            )
            if outcome.succeeded:
                return outcome

        _logger.info(
            "Falling back to %s after %s failed attempts", self.fallback_model, attempts
        )
        fallback = await self.executor.execute(
            api_key,
            ModelCandidate(identifier=self.fallback_model),
            CallOperation.GENERATE_CONTENT,
            prompt,
        )
        if fallback.succeeded:
            return fallback

        _logger.error(
            "Model cascade exhausted: candidates=%s attempts=%s last_failure=%s",
            len(candidates),
            attempts + 1,
            fallback.failure,
        )
        raise ResolutionError(
            ResolutionErrorKind.CALL_FAILED,
            f"{attempts + 1} attempts failed; last: {fallback.failure}",
        )


def attempt_plan(
    candidates: list[ModelCandidate],
) -> Iterator[tuple[ModelCandidate, CallOperation]]:
    """Yield (candidate, operation) pairs in dispatch order."""
    for candidate in candidates:
        for operation in CALL_OPERATIONS:
            yield candidate, operation
