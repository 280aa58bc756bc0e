"""Pydantic models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field

from food_lookup.domain.foods import FoodSource, SearchResult
from food_lookup.services.search_session import SearchSnapshot, SearchState


class SearchResultModel(BaseModel):
    """Serialized search result."""

    id: str
    name: str
    brand: str | None = None
    calories_per_100g: float | None = None
    protein_per_100g: float | None = None
    carbs_per_100g: float | None = None
    fat_per_100g: float | None = None
    source: FoodSource

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultModel":
        return cls(
            id=result.id,
            name=result.name,
            brand=result.brand,
            calories_per_100g=result.calories_per_100g,
            protein_per_100g=result.protein_per_100g,
            carbs_per_100g=result.carbs_per_100g,
            fat_per_100g=result.fat_per_100g,
            source=result.source,
        )


class FoodSearchResponse(BaseModel):
    """One page of aggregated search results."""

    query: str
    page: int
    results: list[SearchResultModel]


class SessionSearchRequest(BaseModel):
    """Body for starting a new search in a session."""

    query: str = Field(default="")


class SessionStateResponse(BaseModel):
    """Observable state of a search session."""

    session_id: UUID
    query: str
    page: int
    state: SearchState
    results: list[SearchResultModel]
    is_loading: bool
    error_message: str | None = None
    can_load_more: bool

    @classmethod
    def from_snapshot(
        cls, session_id: UUID, snapshot: SearchSnapshot
    ) -> "SessionStateResponse":
        return cls(
            session_id=session_id,
            query=snapshot.query,
            page=snapshot.current_page,
            state=snapshot.state,
            results=[SearchResultModel.from_result(r) for r in snapshot.results],
            is_loading=snapshot.is_loading,
            error_message=snapshot.error_message,
            can_load_more=snapshot.can_load_more,
        )
