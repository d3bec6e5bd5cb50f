"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.gemini_client import GeminiClient, HttpxGeminiClient
from calorie_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from calorie_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from calorie_tracker.config import Settings, resolve_api_key
from calorie_tracker.services.calls import CallExecutor
from calorie_tracker.services.directory import ModelDirectory
from calorie_tracker.services.dispatcher import CascadeDispatcher
from calorie_tracker.services.entries import EntryLogService
from calorie_tracker.services.resolver import EntryResolver


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gemini_client: GeminiClient
    entry_resolver: EntryResolver
    entry_log_service: EntryLogService
    close_resources: Callable[[], Awaitable[None]]


def build_resolver(settings: Settings, client: GeminiClient) -> EntryResolver:
    """Wire the model cascade and resolver around a Gemini client."""
    dispatcher = CascadeDispatcher(
        directory=ModelDirectory(
            client=client, preferred_marker=settings.gemini_preferred_marker
        ),
        executor=CallExecutor(client=client),
        fallback_model=settings.gemini_fallback_model,
    )
    return EntryResolver(
        dispatcher=dispatcher, api_key=resolve_api_key(settings.gemini_api_key)
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    gemini_client = HttpxGeminiClient.create(
        models_url=resolved_settings.gemini_models_url,
        api_base_url=resolved_settings.gemini_api_base_url,
        timeout_seconds=resolved_settings.gemini_timeout_seconds,
    )
    entry_resolver = build_resolver(resolved_settings, gemini_client)
    entry_log_service = EntryLogService(
        repository=SupabaseEntryRepository(supabase_client),
        goal_repository=SupabaseGoalRepository(supabase_client),
        resolver=entry_resolver,
        default_goal=resolved_settings.default_daily_goal,
    )

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        gemini_client=gemini_client,
        entry_resolver=entry_resolver,
        entry_log_service=entry_log_service,
        close_resources=close_resources,
    )
