"""Resolve free-text meal and workout descriptions into entries."""

import logging
from dataclasses import dataclass

from calorie_tracker.domain.entries import ResolvedEntry
from calorie_tracker.domain.errors import ResolutionError, ResolutionErrorKind
from calorie_tracker.services.dispatcher import CascadeDispatcher
from calorie_tracker.services.extraction import extract_json_object, reply_text
from calorie_tracker.services.normalization import normalize_entry

_logger = logging.getLogger(__name__)

_PROMPT_TEMPLATE = """\
You are a calorie tracking assistant.
The response needs to be very accurate.
Convert the user input into VALID JSON ONLY.
DO NOT add explanation, markdown, or text.
INPUT:
"{text}"

OUTPUT FORMAT (JSON ONLY):
{{
  "type": "meal" | "workout",
  "name": string,
  "calories": number,
  "protein": number,
  "fat": number,
  "carbs": number
}}
Include the quantity in grams in "name"; convert bowls and plates to grams.
"protein", "fat" and "carbs" are grams.
"""


def build_prompt(text: str) -> str:
    """Return the model prompt for a user description."""
    return _PROMPT_TEMPLATE.format(text=text)


@dataclass
class EntryResolver:
    """Validates a query, dispatches it and trusts only normalized output."""

    dispatcher: CascadeDispatcher
    api_key: str | None

    async def resolve(self, text: object) -> ResolvedEntry:
        """Resolve a free-text description into a ResolvedEntry."""
        if not isinstance(text, str) or not text.strip():
            raise ResolutionError(ResolutionErrorKind.INVALID_INPUT, "blank text")
        if not self.api_key:
            raise ResolutionError(
                ResolutionErrorKind.MISSING_CREDENTIAL, "GEMINI_API_KEY is not set"
            )

        outcome = await self.dispatcher.dispatch(self.api_key, build_prompt(text))
        raw = reply_text(outcome.reply)
        if raw is None:
            _logger.error(
                "Empty reply from model=%s operation=%s",
                outcome.candidate.identifier,
                outcome.operation.value,
            )
            raise ResolutionError(ResolutionErrorKind.EMPTY_REPLY, "no textual body")

        try:
            entry = normalize_entry(extract_json_object(raw))
        except ResolutionError as exc:
            _logger.warning("Invalid model output (%s): %r", exc, raw)
            raise
        _logger.info(
            "Resolved %s entry via model=%s operation=%s",
            entry.kind.value,
            outcome.candidate.identifier,
            outcome.operation.value,
        )
        return entry
