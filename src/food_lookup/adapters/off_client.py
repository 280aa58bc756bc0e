"""Open Food Facts search client."""

from dataclasses import dataclass

from food_lookup.adapters.http_client import HttpClient, HttpRequest
from food_lookup.adapters.payloads import optional_float, optional_str, require_list
from food_lookup.domain.errors import ProviderError
from food_lookup.domain.foods import FoodSource, SearchResult
from food_lookup.services.food_search import FoodSearchClient


@dataclass
class HttpOffSearchClient(FoodSearchClient):
    """Secondary provider backed by the OFF ``search.pl`` endpoint."""

    http_client: HttpClient
    base_url: str
    page_size: int = 20

    async def search_foods(self, query: str, page: int) -> list[SearchResult]:
        """Search OFF products for one page of results."""
        request = HttpRequest(
            url=f"{self.base_url}/cgi/search.pl",
            params={
                "search_terms": query,
                "page": page,
                "page_size": self.page_size,
                "search_simple": 1,
                "action": "process",
                "json": 1,
            },
        )
        try:
            payload = await self.http_client.send(request)
        except ProviderError as exc:
            exc.provider = exc.provider or FoodSource.OFF.value
            raise
        products = require_list(payload, "products", FoodSource.OFF.value)
        return [
            result
            for result in (_to_search_result(product) for product in products)
            if result is not None
        ]


@dataclass
class StubOffSearchClient(FoodSearchClient):
    """Offline OFF stand-in returning one sample product per page."""

    async def search_foods(self, query: str, page: int) -> list[SearchResult]:
        """Return a deterministic sample result."""
        if not query.strip():
            return []
        return [
            SearchResult(
                id=f"off_stub_{page}",
                name="Sample OFF Food",
                brand="Open Food Facts",
                calories_per_100g=120,
                protein_per_100g=4,
                carbs_per_100g=22,
                fat_per_100g=2,
                source=FoodSource.OFF,
            )
        ]


def _to_search_result(product: object) -> SearchResult | None:
    if not isinstance(product, dict):
        return None
    raw_code = product.get("code")
    code = optional_str(str(raw_code)) if raw_code is not None else None
    if code is None:
        return None
    nutriments = product.get("nutriments")
    if not isinstance(nutriments, dict):
        nutriments = {}
    return SearchResult(
        id=f"off_{code}",
        name=optional_str(product.get("product_name"))
        or optional_str(product.get("generic_name"))
        or code,
        brand=_first_brand(product.get("brands")),
        calories_per_100g=optional_float(nutriments.get("energy-kcal_100g")),
        protein_per_100g=optional_float(nutriments.get("proteins_100g")),
        carbs_per_100g=optional_float(nutriments.get("carbohydrates_100g")),
        fat_per_100g=optional_float(nutriments.get("fat_100g")),
        source=FoodSource.OFF,
    )


def _first_brand(raw: object) -> str | None:
    """OFF lists brands as a comma-separated string."""
    brands = optional_str(raw)
    if brands is None:
        return None
    return optional_str(brands.split(",")[0])
