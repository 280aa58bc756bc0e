"""Nutrition arithmetic: calories, macro splits and energy expenditure."""

from food_lookup.domain.nutrition import MacroPercentages, MacroPlan

_PROTEIN_KCAL_PER_G = 4.0
_CARBS_KCAL_PER_G = 4.0
_FAT_KCAL_PER_G = 9.0
_RATIO_TOLERANCE = 0.0001


def calories_from_macros(protein: float, carbs: float, fat: float) -> float:
    """Total calories for the given grams of each macronutrient."""
    return (
        protein * _PROTEIN_KCAL_PER_G
        + carbs * _CARBS_KCAL_PER_G
        + fat * _FAT_KCAL_PER_G
    )


def macro_percentages(protein: float, carbs: float, fat: float) -> MacroPercentages:
    """Fraction of calories from each macro; all zeros when there are none."""
    total = calories_from_macros(protein, carbs, fat)
    if total <= 0:
        return MacroPercentages(protein=0.0, carbs=0.0, fat=0.0)
    return MacroPercentages(
        protein=protein * _PROTEIN_KCAL_PER_G / total,
        carbs=carbs * _CARBS_KCAL_PER_G / total,
        fat=fat * _FAT_KCAL_PER_G / total,
    )


def bmr_male(weight_kg: float, height_cm: float, age_years: int) -> float:
    """Mifflin-St Jeor basal metabolic rate for men."""
    return 10.0 * weight_kg + 6.25 * height_cm - 5.0 * age_years + 5.0


def bmr_female(weight_kg: float, height_cm: float, age_years: int) -> float:
    """Mifflin-St Jeor basal metabolic rate for women."""
    return 10.0 * weight_kg + 6.25 * height_cm - 5.0 * age_years - 161.0


def tdee(bmr: float, activity_multiplier: float) -> float:
    """Total daily energy expenditure."""
    return bmr * activity_multiplier


def macro_plan(
    calories: float, protein_ratio: float, carb_ratio: float, fat_ratio: float
) -> MacroPlan:
    """Split a calorie target into gram targets by calorie ratio."""
    ratio_sum = protein_ratio + carb_ratio + fat_ratio
    if abs(ratio_sum - 1.0) >= _RATIO_TOLERANCE:
        raise ValueError(f"Macro ratios must sum to 1.0, got {ratio_sum}")
    return MacroPlan(
        calories=calories,
        protein_g=calories * protein_ratio / _PROTEIN_KCAL_PER_G,
        carbs_g=calories * carb_ratio / _CARBS_KCAL_PER_G,
        fat_g=calories * fat_ratio / _FAT_KCAL_PER_G,
    )


def grams_to_kilograms(grams: float) -> float:
    return grams / 1000.0


def kilograms_to_grams(kilograms: float) -> float:
    return kilograms * 1000.0


def servings_for_grams(grams: float, grams_per_serving: float) -> float:
    """Number of servings in a weight; 0 when the serving size is unknown."""
    if grams_per_serving <= 0:
        return 0.0
    return grams / grams_per_serving


def grams_for_servings(servings: float, grams_per_serving: float) -> float:
    return servings * grams_per_serving
