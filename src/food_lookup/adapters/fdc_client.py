"""USDA FoodData Central search client."""

from dataclasses import dataclass

from food_lookup.adapters.http_client import HttpClient, HttpMethod, HttpRequest
from food_lookup.adapters.payloads import optional_float, optional_str, require_list
from food_lookup.domain.errors import ProviderError
from food_lookup.domain.foods import FoodSource, SearchResult
from food_lookup.services.food_search import FoodSearchClient

_NUTRIENT_IDS = {
    "calories": (1008, 2047, 2048),
    "protein": (1003,),
    "fat": (1004,),
    "carbs": (1005,),
}


@dataclass
class HttpFdcSearchClient(FoodSearchClient):
    """Primary provider backed by the FDC ``/foods/search`` endpoint."""

    http_client: HttpClient
    api_key: str
    base_url: str
    page_size: int = 20

    async def search_foods(self, query: str, page: int) -> list[SearchResult]:
        """Search FDC foods for one page of results."""
        request = HttpRequest(
            url=f"{self.base_url}/foods/search",
            method=HttpMethod.POST,
            params={"api_key": self.api_key},
            json={"query": query, "pageNumber": page, "pageSize": self.page_size},
        )
        try:
            payload = await self.http_client.send(request)
        except ProviderError as exc:
            exc.provider = exc.provider or FoodSource.FDC.value
            raise
        foods = require_list(payload, "foods", FoodSource.FDC.value)
        return [
            result
            for result in (_to_search_result(food) for food in foods)
            if result is not None
        ]


@dataclass
class StubFdcSearchClient(FoodSearchClient):
    """Offline FDC stand-in returning one sample food per page."""

    async def search_foods(self, query: str, page: int) -> list[SearchResult]:
        """Return a deterministic sample result."""
        if not query.strip():
            return []
        return [
            SearchResult(
                id=f"fdc_stub_{page}",
                name="Sample FDC Food",
                brand="FDC",
                calories_per_100g=150,
                protein_per_100g=8,
                carbs_per_100g=18,
                fat_per_100g=5,
                source=FoodSource.FDC,
            )
        ]


def _to_search_result(food: object) -> SearchResult | None:
    if not isinstance(food, dict) or food.get("fdcId") is None:
        return None
    nutrients = _extract_nutrients(food.get("foodNutrients") or [])
    return SearchResult(
        id=f"fdc_{food['fdcId']}",
        name=optional_str(food.get("description")) or str(food["fdcId"]),
        brand=optional_str(food.get("brandName"))
        or optional_str(food.get("brandOwner")),
        calories_per_100g=nutrients["calories"],
        protein_per_100g=nutrients["protein"],
        carbs_per_100g=nutrients["carbs"],
        fat_per_100g=nutrients["fat"],
        source=FoodSource.FDC,
    )


def _extract_nutrients(food_nutrients: list[object]) -> dict[str, float | None]:
    """Pick calories, protein, carbs and fat out of FDC nutrient rows."""
    by_id: dict[int, float] = {}
    for nutrient in food_nutrients:
        if not isinstance(nutrient, dict):
            continue
        nutrient_info = nutrient.get("nutrient")
        if not isinstance(nutrient_info, dict):
            nutrient_info = {}
        nutrient_id = nutrient.get("nutrientId") or nutrient_info.get("id")
        amount = optional_float(nutrient.get("value", nutrient.get("amount")))
        if isinstance(nutrient_id, int) and amount is not None:
            by_id.setdefault(nutrient_id, amount)

    values: dict[str, float | None] = {}
    for name, ids in _NUTRIENT_IDS.items():
        values[name] = next((by_id[i] for i in ids if i in by_id), None)
    return values
