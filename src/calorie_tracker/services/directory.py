"""Discover and rank callable models."""

import logging
from dataclasses import dataclass

from calorie_tracker.adapters.gemini_client import GeminiClient
from calorie_tracker.domain.dispatch import ModelCandidate

_logger = logging.getLogger(__name__)


@dataclass
class ModelDirectory:
    """Lists models from the backend and orders them for dispatch."""

    client: GeminiClient
    preferred_marker: str = "gemini"

    async def list_candidates(self, api_key: str) -> list[ModelCandidate]:
        """Return ranked candidates, or an empty list when discovery fails."""
        try:
            listing = await self.client.list_models(api_key)
        except Exception as exc:  # noqa: BLE001
            _logger.warning("Model directory unavailable: %s", type(exc).__name__)
            return []

        candidates = parse_listing(listing)
        if not candidates:
            _logger.warning("Model directory returned no usable models")
        return rank_candidates(candidates, self.preferred_marker)


def parse_listing(listing: object) -> list[ModelCandidate]:
    """Return candidates for every listing entry with a string name."""
    if not isinstance(listing, dict):
        return []
    models = listing.get("models")
    if not isinstance(models, list):
        return []
    return [
        ModelCandidate(identifier=model["name"])
        for model in models
        if isinstance(model, dict) and isinstance(model.get("name"), str)
    ]


def rank_candidates(
    candidates: list[ModelCandidate], preferred_marker: str
) -> list[ModelCandidate]:
    """Move preferred-family models first, keeping listing order within a rank."""
    return sorted(
        candidates,
        key=lambda candidate: 0 if preferred_marker in candidate.identifier else 1,
    )
