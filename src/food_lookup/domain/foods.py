"""Food search domain models."""

from dataclasses import dataclass
from enum import StrEnum

from food_lookup.domain.nutrition import MacroProfile


class FoodSource(StrEnum):
    """Upstream provider a search result came from."""

    FDC = "fdc"
    OFF = "off"


@dataclass(frozen=True)
class SearchResult:
    """Normalized food item returned by a provider search.

    ``id`` is only unique within the provider named by ``source``.
    Nutrient values are per 100 g and may be missing.
    """

    id: str
    name: str
    brand: str | None
    calories_per_100g: float | None
    protein_per_100g: float | None
    carbs_per_100g: float | None
    fat_per_100g: float | None
    source: FoodSource

    def macros_for(self, grams: float) -> MacroProfile:
        """Scale per-100 g nutrients to a portion, treating gaps as zero."""
        factor = grams / 100.0
        return MacroProfile(
            calories=(self.calories_per_100g or 0.0) * factor,
            protein_g=(self.protein_per_100g or 0.0) * factor,
            carbs_g=(self.carbs_per_100g or 0.0) * factor,
            fat_g=(self.fat_per_100g or 0.0) * factor,
        )
