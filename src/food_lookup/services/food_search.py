"""Food search across a primary and a fallback provider."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from food_lookup.domain.foods import SearchResult

_logger = logging.getLogger(__name__)


class FoodSearchClient(Protocol):
    """Interface for one upstream food search provider."""

    async def search_foods(self, query: str, page: int) -> list[SearchResult]:
        """Return one page of results for a trimmed, non-empty query."""


@dataclass
class FoodSearchService:
    """Searches the primary provider, falling back to the secondary on failure.

    Only one provider's batch is ever returned; results from the two
    providers are never merged.
    """

    primary: FoodSearchClient
    secondary: FoodSearchClient
    debug: bool = False

    async def search(self, query: str, page: int = 1) -> list[SearchResult]:
        """Search foods, returning an empty list for blank queries."""
        trimmed = query.strip()
        if not trimmed:
            return []
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        try:
            results = await self.primary.search_foods(trimmed, page)
            label = "primary"
        except Exception as exc:
            _logger.warning(
                "Primary food search failed, falling back: query=%s page=%s "
                "provider=%s error=%s",
                trimmed,
                page,
                getattr(exc, "provider", None) or "primary",
                exc,
            )
            results = await self.secondary.search_foods(trimmed, page)
            label = "secondary"

        unique = dedupe_results(results)
        if self.debug:
            _logger.info(
                "Food search: query=%s page=%s source=%s results=%s",
                trimmed,
                page,
                label,
                len(unique),
            )
        return unique


def dedupe_results(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Drop repeated ids, keeping the first occurrence in order."""
    seen: set[str] = set()
    unique: list[SearchResult] = []
    for item in results:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique
