"""Parsing of Supabase rows into domain models."""

from datetime import date, datetime
from uuid import UUID

from macro_tracker.domain.foods import Food, FoodAddon, FoodPortion, FoodSearchResult
from macro_tracker.domain.goals import UserGoal
from macro_tracker.domain.meals import DailySummary, MealFood, MealWithFoods
from macro_tracker.domain.models import Profile, WeightLog


def parse_uuid(value: object) -> UUID | None:
    """Return a UUID for a non-empty string value."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, str) and value:
        return UUID(value)
    return None


def parse_date(value: object) -> date | None:
    """Parse an ISO date (or the date part of a timestamp)."""
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    return None


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO timestamp as returned by PostgREST."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def _float(value: object, default: float = 0.0) -> float:
    return float(value) if isinstance(value, int | float) else default


def _optional_float(value: object) -> float | None:
    return float(value) if isinstance(value, int | float) else None


def parse_profile(row: dict[str, object]) -> Profile:
    """Build a profile from a `profiles` row."""
    return Profile(
        id=UUID(str(row["id"])),
        full_name=str(row.get("full_name") or ""),
        role=str(row.get("role") or "user"),
        height_cm=row.get("height_cm"),
        age=row.get("age"),
        weight_kg=_optional_float(row.get("weight_kg")),
        activity_level=row.get("activity_level"),
        is_active=row.get("is_active"),
    )


def parse_weight_log(row: dict[str, object]) -> WeightLog:
    """Build a weight log from a `weight_logs` row."""
    return WeightLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        log_date=date.fromisoformat(str(row["log_date"])),
        weight_kg=_float(row.get("weight_kg")),
        notes=row.get("notes"),
    )


def parse_food(row: dict[str, object]) -> Food:
    """Build a food from a `foods` row."""
    return Food(
        id=UUID(str(row["id"])),
        display_name=str(row.get("display_name", "")),
        category=str(row.get("category", "")),
        name=row.get("name"),
        subcategory=row.get("subcategory"),
        description=row.get("description"),
        is_approved=row.get("is_approved"),
        requested_by=parse_uuid(row.get("requested_by")),
        approved_by=parse_uuid(row.get("approved_by")),
        created_at=parse_datetime(row.get("created_at")),
    )


def parse_search_result(row: dict[str, object]) -> FoodSearchResult:
    """Build a search hit from a partial `foods` row."""
    return FoodSearchResult(
        id=UUID(str(row["id"])),
        display_name=str(row.get("display_name", "")),
        category=str(row.get("category", "")),
        subcategory=row.get("subcategory"),
        description=row.get("description"),
    )


def parse_portion(row: dict[str, object]) -> FoodPortion:
    """Build a portion from a `food_portions` row."""
    return FoodPortion(
        id=UUID(str(row["id"])),
        food_id=UUID(str(row["food_id"])),
        display_name=str(row.get("display_name", "")),
        calories=_float(row.get("calories")),
        protein_g=_float(row.get("protein_g")),
        carbs_g=_float(row.get("carbs_g")),
        fats_g=_float(row.get("fats_g")),
        fiber_g=_optional_float(row.get("fiber_g")),
        name=row.get("name"),
        description=row.get("description"),
    )


def parse_addon(row: dict[str, object]) -> FoodAddon:
    """Build an add-on from a `food_addons` row."""
    return FoodAddon(
        id=UUID(str(row["id"])),
        food_id=UUID(str(row["food_id"])),
        display_name=str(row.get("display_name", "")),
        calories=_float(row.get("calories")),
        protein_g=_float(row.get("protein_g")),
        carbs_g=_float(row.get("carbs_g")),
        fats_g=_float(row.get("fats_g")),
        fiber_g=_optional_float(row.get("fiber_g")),
        name=row.get("name"),
        category=row.get("category"),
    )


def parse_meal_food(row: dict[str, object]) -> MealFood:
    """Build a meal food from a `meal_foods` row."""
    return MealFood(
        id=UUID(str(row["id"])),
        meal_id=UUID(str(row["meal_id"])),
        food_name=str(row.get("food_name", "")),
        portion_display=str(row.get("portion_display", "")),
        calories=_float(row.get("calories")),
        protein_g=_float(row.get("protein_g")),
        carbs_g=_float(row.get("carbs_g")),
        fats_g=_float(row.get("fats_g")),
        fiber_g=_optional_float(row.get("fiber_g")),
        food_id=parse_uuid(row.get("food_id")),
        portion_id=parse_uuid(row.get("portion_id")),
        selected_addons=[
            UUID(str(addon)) for addon in row.get("selected_addons") or []
        ],
        addons_display=[str(label) for label in row.get("addons_display") or []],
        created_at=parse_datetime(row.get("created_at")),
    )


def parse_meal(row: dict[str, object]) -> MealWithFoods:
    """Build a meal from a `meals` row with optional embedded `meal_foods`."""
    return MealWithFoods(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        meal_type=str(row.get("meal_type", "")),
        meal_date=date.fromisoformat(str(row["meal_date"])),
        total_calories=_optional_float(row.get("total_calories")),
        total_protein_g=_optional_float(row.get("total_protein_g")),
        total_carbs_g=_optional_float(row.get("total_carbs_g")),
        total_fats_g=_optional_float(row.get("total_fats_g")),
        total_fiber_g=_optional_float(row.get("total_fiber_g")),
        meal_foods=[parse_meal_food(item) for item in row.get("meal_foods") or []],
        created_at=parse_datetime(row.get("created_at")),
    )


def parse_summary(row: dict[str, object]) -> DailySummary:
    """Build a daily summary from a `daily_summaries` row."""
    return DailySummary(
        user_id=UUID(str(row["user_id"])),
        summary_date=date.fromisoformat(str(row["summary_date"])),
        total_calories=_float(row.get("total_calories")),
        total_protein_g=_float(row.get("total_protein_g")),
        total_carbs_g=_float(row.get("total_carbs_g")),
        total_fats_g=_float(row.get("total_fats_g")),
        total_fiber_g=_float(row.get("total_fiber_g")),
        meals_logged=row.get("meals_logged"),
        target_calories=_optional_float(row.get("target_calories")),
        target_protein_g=_optional_float(row.get("target_protein_g")),
        target_carbs_g=_optional_float(row.get("target_carbs_g")),
        target_fats_g=_optional_float(row.get("target_fats_g")),
        target_fiber_g=_optional_float(row.get("target_fiber_g")),
    )


def parse_goal(row: dict[str, object]) -> UserGoal:
    """Build a goal from a `user_goals` row."""
    return UserGoal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        daily_calorie=int(_float(row.get("daily_calorie"))),
        daily_protein_g=_float(row.get("daily_protein_g")),
        daily_carbs_g=_float(row.get("daily_carbs_g")),
        daily_fats_g=_float(row.get("daily_fats_g")),
        daily_fiber_g=_float(row.get("daily_fiber_g")),
        start_date=date.fromisoformat(str(row["start_date"])),
        end_date=parse_date(row.get("end_date")),
        is_active=row.get("is_active"),
        set_by=str(row.get("set_by") or "self"),
        set_by_user_id=parse_uuid(row.get("set_by_user_id")),
        reason=row.get("reason"),
    )
