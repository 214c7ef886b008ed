"""Grouping of logged meals by meal type."""

from collections.abc import Iterable

from macro_tracker.domain.meals import MEAL_ORDER, MealTypeTotals, MealWithFoods


def group_meals_by_type(
    meals: Iterable[MealWithFoods],
) -> dict[str, list[MealWithFoods]]:
    """Bucket meals that have line items by meal type, keeping input order."""
    grouped: dict[str, list[MealWithFoods]] = {}
    for meal in meals:
        if not meal.meal_foods:
            continue
        grouped.setdefault(meal.meal_type, []).append(meal)
    return grouped


def calculate_meal_type_totals(
    meal_type: str, meals: list[MealWithFoods]
) -> MealTypeTotals:
    """Sum precomputed meal totals for a single meal type."""
    return MealTypeTotals(
        meal_type=meal_type,
        meals=meals,
        total_calories=sum(meal.total_calories or 0 for meal in meals),
        total_protein=sum(meal.total_protein_g or 0 for meal in meals),
        total_carbs=sum(meal.total_carbs_g or 0 for meal in meals),
        total_fats=sum(meal.total_fats_g or 0 for meal in meals),
    )


def sort_meals_by_type(
    grouped: dict[str, list[MealWithFoods]],
) -> list[MealTypeTotals]:
    """Return totals per meal type in display order, skipping empty types."""
    return [
        calculate_meal_type_totals(meal_type, grouped[meal_type])
        for meal_type in MEAL_ORDER
        if grouped.get(meal_type)
    ]


def summarize_meals(meals: Iterable[MealWithFoods]) -> list[MealTypeTotals]:
    """Group meals and return ordered per-type totals."""
    return sort_meals_by_type(group_meals_by_type(meals))
