"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_lookup.adapters.fdc_client import HttpFdcSearchClient, StubFdcSearchClient
from food_lookup.adapters.http_client import HttpxHttpClient
from food_lookup.adapters.off_client import HttpOffSearchClient, StubOffSearchClient
from food_lookup.config import Settings
from food_lookup.services.food_search import FoodSearchClient, FoodSearchService
from food_lookup.services.session_registry import SearchSessionRegistry


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    fdc_client: FoodSearchClient
    off_client: FoodSearchClient
    food_search_service: FoodSearchService
    session_registry: SearchSessionRegistry
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    http_client: HttpxHttpClient | None = None
    fdc_client: FoodSearchClient
    off_client: FoodSearchClient
    if resolved_settings.use_stub_providers:
        fdc_client = StubFdcSearchClient()
        off_client = StubOffSearchClient()
    else:
        http_client = HttpxHttpClient.create(
            timeout_seconds=resolved_settings.http_timeout_seconds,
            user_agent=resolved_settings.off_user_agent,
        )
        fdc_client = HttpFdcSearchClient(
            http_client=http_client,
            api_key=resolved_settings.fdc_api_key,
            base_url=resolved_settings.fdc_base_url,
            page_size=resolved_settings.search_page_size,
        )
        off_client = HttpOffSearchClient(
            http_client=http_client,
            base_url=resolved_settings.off_base_url,
            page_size=resolved_settings.search_page_size,
        )
    food_search_service = FoodSearchService(
        primary=fdc_client,
        secondary=off_client,
        debug=resolved_settings.debug,
    )
    session_registry = SearchSessionRegistry(
        searcher=food_search_service,
        max_sessions=resolved_settings.max_sessions,
    )

    async def close_resources() -> None:
        if http_client is not None:
            await http_client.close()

    return AppContainer(
        settings=resolved_settings,
        fdc_client=fdc_client,
        off_client=off_client,
        food_search_service=food_search_service,
        session_registry=session_registry,
        close_resources=close_resources,
    )
