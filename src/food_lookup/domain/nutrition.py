"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for a portion of food."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MacroPercentages:
    """Share of total calories contributed by each macronutrient."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MacroPlan:
    """Daily macro targets expressed in calories and grams."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
