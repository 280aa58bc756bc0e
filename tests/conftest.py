"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from food_lookup.config import Settings
from food_lookup.containers import AppContainer
from food_lookup.domain.foods import FoodSource, SearchResult
from food_lookup.services.food_search import FoodSearchClient, FoodSearchService
from food_lookup.services.session_registry import SearchSessionRegistry


def make_result(
    result_id: str, name: str = "Food", source: FoodSource = FoodSource.FDC
) -> SearchResult:
    return SearchResult(
        id=result_id,
        name=name,
        brand=None,
        calories_per_100g=52,
        protein_per_100g=0.3,
        carbs_per_100g=14,
        fat_per_100g=0.2,
        source=source,
    )


@dataclass
class StaticSearchClient(FoodSearchClient):
    """Provider double returning fixed results or raising a fixed error."""

    results: list[SearchResult] = field(default_factory=list)
    error: Exception | None = None
    calls: list[tuple[str, int]] = field(default_factory=list)

    async def search_foods(self, query: str, page: int) -> list[SearchResult]:
        self.calls.append((query, page))
        if self.error is not None:
            raise self.error
        return list(self.results)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@dataclass
class FakeFoodSearcher:
    """Aggregator double with per-page responses and optional gating."""

    pages: dict[int, list[SearchResult]] = field(default_factory=dict)
    errors: dict[int, Exception] = field(default_factory=dict)
    gates: dict[int, asyncio.Event] = field(default_factory=dict)
    calls: list[tuple[str, int]] = field(default_factory=list)

    async def search(self, query: str, page: int = 1) -> list[SearchResult]:
        self.calls.append((query, page))
        gate = self.gates.get(page)
        if gate is not None:
            await gate.wait()
        if page in self.errors:
            raise self.errors[page]
        return list(self.pages.get(page, []))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        fdc_base_url="https://fdc.test/v1",
        off_base_url="https://off.test",
        environment="test",
    )


@pytest.fixture
def fdc_client() -> StaticSearchClient:
    return StaticSearchClient(results=[make_result("fdc_1", "Apple")])


@pytest.fixture
def off_client() -> StaticSearchClient:
    return StaticSearchClient(
        results=[make_result("off_1", "Banana", source=FoodSource.OFF)]
    )


@pytest.fixture
def container(
    settings: Settings,
    fdc_client: StaticSearchClient,
    off_client: StaticSearchClient,
) -> AppContainer:
    food_search_service = FoodSearchService(primary=fdc_client, secondary=off_client)
    session_registry = SearchSessionRegistry(searcher=food_search_service)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        fdc_client=fdc_client,
        off_client=off_client,
        food_search_service=food_search_service,
        session_registry=session_registry,
        close_resources=close_resources,
    )
