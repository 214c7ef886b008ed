"""Meal logging and daily meal views."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.errors import InvalidInputError, NotFoundError
from macro_tracker.domain.goals import UserGoal
from macro_tracker.domain.meals import (
    DailySummary,
    MealDay,
    MealFood,
    MealFoodEntry,
    MealTypeTotals,
    MealWithFoods,
)
from macro_tracker.services.cache import Cache
from macro_tracker.services.dates import iter_days, utc_today
from macro_tracker.services.foods import (
    FoodService,
    calculate_total_nutrition,
    find_portion,
    selected_addons,
)
from macro_tracker.services.goals import GoalService
from macro_tracker.services.grouping import summarize_meals
from macro_tracker.services.refresh import RefreshBus, RefreshEvent

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals and their line items."""

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[MealWithFoods]:
        """Return meals with foods between two days inclusive.

        Rows are ordered by meal date descending, then creation time.
        """

    def list_summaries(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailySummary]:
        """Return daily summaries between two days inclusive."""

    def get_meal(self, meal_id: UUID) -> MealWithFoods | None:
        """Return a meal row by id, if present."""

    def create_meal(self, user_id: UUID, meal_type: str, meal_date: date) -> UUID:
        """Create an empty meal and return its id."""

    def get_meal_food(self, meal_food_id: UUID) -> MealFood | None:
        """Return a meal food by id, if present."""

    def create_meal_food(self, meal_id: UUID, entry: MealFoodEntry) -> MealFood:
        """Create a meal food row and return it."""

    def update_meal_food(self, meal_food_id: UUID, entry: MealFoodEntry) -> MealFood:
        """Replace the portion, add-ons and nutrition of a meal food."""

    def delete_meal_food(self, meal_food_id: UUID) -> None:
        """Delete a meal food row."""

    def recalculate_daily_summary(self, user_id: UUID, day: date) -> None:
        """Ask the backend to rebuild the user's summary for a day."""


@dataclass(frozen=True)
class TodayData:
    """Everything the dashboard shows for today."""

    day: date
    meals: list[MealWithFoods]
    groups: list[MealTypeTotals]
    summary: DailySummary | None
    goal: UserGoal | None


@dataclass
class MealService:
    """Reads meal days through a per-user cache and logs meal foods."""

    repository: MealRepository
    food_service: FoodService
    goal_service: GoalService
    refresh_bus: RefreshBus
    cache: Cache
    cache_ttl_seconds: int = 300
    prefetch_days: int = 7
    _subscribed: bool = field(default=False, init=False, repr=False)
    _generations: dict[UUID, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.refresh_bus.subscribe(RefreshEvent.TODAY, self._invalidate_today)
        self.refresh_bus.subscribe(RefreshEvent.GOALS, self._invalidate_today)
        self.refresh_bus.subscribe(RefreshEvent.MEALS, self._invalidate_days)
        self._subscribed = True

    def close(self) -> None:
        """Detach cache invalidation from the refresh bus."""
        if not self._subscribed:
            return
        self.refresh_bus.unsubscribe(RefreshEvent.TODAY, self._invalidate_today)
        self.refresh_bus.unsubscribe(RefreshEvent.GOALS, self._invalidate_today)
        self.refresh_bus.unsubscribe(RefreshEvent.MEALS, self._invalidate_days)
        self._subscribed = False

    async def get_today(self, user_id: UUID, today: date | None = None) -> TodayData:
        """Return today's meals, summary and goal, fetched together."""
        day = today or utc_today()
        key = _today_key(user_id, day)
        cached = self.cache.get(key)
        if isinstance(cached, TodayData):
            return cached
        generation = self._generation(user_id)
        meals, summaries, goal = await asyncio.gather(
            asyncio.to_thread(self.repository.list_meals, user_id, day, day),
            asyncio.to_thread(self.repository.list_summaries, user_id, day, day),
            asyncio.to_thread(self.goal_service.get_active_goal, user_id, day),
        )
        data = TodayData(
            day=day,
            meals=meals,
            groups=summarize_meals(meals),
            summary=_summary_for(summaries, day),
            goal=goal,
        )
        if self._generation(user_id) == generation:
            self.cache.set(key, data, self.cache_ttl_seconds)
        return data

    async def get_day(self, user_id: UUID, day: date) -> MealDay:
        """Return one day of meals, fetching it only on a cache miss."""
        cached = self.cache.get(_day_key(user_id, day))
        if isinstance(cached, MealDay):
            return cached
        generation = self._generation(user_id)
        meals, summaries = await asyncio.gather(
            asyncio.to_thread(self.repository.list_meals, user_id, day, day),
            asyncio.to_thread(self.repository.list_summaries, user_id, day, day),
        )
        meal_day = MealDay(day=day, meals=meals, summary=_summary_for(summaries, day))
        if self._generation(user_id) == generation:
            self.cache.set(_day_key(user_id, day), meal_day, self.cache_ttl_seconds)
        return meal_day

    async def prefetch_range(
        self, user_id: UUID, end: date | None = None, days: int | None = None
    ) -> dict[date, MealDay]:
        """Load a window of days in one query each and cache every day."""
        last = end or utc_today()
        span = days or self.prefetch_days
        first = last - timedelta(days=span - 1)
        generation = self._generation(user_id)
        meals, summaries = await asyncio.gather(
            asyncio.to_thread(self.repository.list_meals, user_id, first, last),
            asyncio.to_thread(self.repository.list_summaries, user_id, first, last),
        )
        fresh = self._generation(user_id) == generation
        result: dict[date, MealDay] = {}
        for day in iter_days(first, last):
            meal_day = MealDay(
                day=day,
                meals=[meal for meal in meals if meal.meal_date == day],
                summary=_summary_for(summaries, day),
            )
            if fresh:
                self.cache.set(
                    _day_key(user_id, day), meal_day, self.cache_ttl_seconds
                )
            result[day] = meal_day
        return result

    def get_meal_food(self, user_id: UUID, meal_food_id: UUID) -> MealFood:
        """Return a logged food owned by the user."""
        meal_food = self._require_meal_food(meal_food_id)
        self._require_meal(user_id, meal_food.meal_id)
        return meal_food

    async def add_meal_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        *,
        food_id: UUID,
        food_name: str,
        portion_id: UUID,
        addon_ids: list[UUID],
        meal_type: str | None = None,
        meal_date: date | None = None,
        meal_id: UUID | None = None,
    ) -> MealFood:
        """Log a food into an existing meal or a new one."""
        entry = await self._build_entry(food_id, food_name, portion_id, addon_ids)
        if meal_id is None:
            if not meal_type:
                raise InvalidInputError("Please select a meal type")
            day = meal_date or utc_today()
            meal_id = self.repository.create_meal(user_id, meal_type, day)
        else:
            day = self._require_meal(user_id, meal_id).meal_date
        meal_food = self.repository.create_meal_food(meal_id, entry)
        self.repository.recalculate_daily_summary(user_id, day)
        logger.info(
            "Logged meal food",
            extra={"meal_id": str(meal_id), "food_id": str(food_id)},
        )
        await self._emit_meal_change(user_id)
        return meal_food

    async def update_meal_food(
        self,
        user_id: UUID,
        meal_food_id: UUID,
        portion_id: UUID,
        addon_ids: list[UUID],
    ) -> MealFood:
        """Change the portion and add-ons of a logged food."""
        current = self._require_meal_food(meal_food_id)
        meal = self._require_meal(user_id, current.meal_id)
        if current.food_id is None:
            raise NotFoundError(f"Meal food {meal_food_id} has no food")
        entry = await self._build_entry(
            current.food_id, current.food_name, portion_id, addon_ids
        )
        meal_food = self.repository.update_meal_food(meal_food_id, entry)
        self.repository.recalculate_daily_summary(user_id, meal.meal_date)
        await self._emit_meal_change(user_id)
        return meal_food

    async def delete_meal_food(self, user_id: UUID, meal_food_id: UUID) -> None:
        """Remove a logged food."""
        current = self._require_meal_food(meal_food_id)
        meal = self._require_meal(user_id, current.meal_id)
        self.repository.delete_meal_food(meal_food_id)
        self.repository.recalculate_daily_summary(user_id, meal.meal_date)
        await self._emit_meal_change(user_id)

    async def _build_entry(
        self,
        food_id: UUID,
        food_name: str,
        portion_id: UUID,
        addon_ids: list[UUID],
    ) -> MealFoodEntry:
        options = await self.food_service.get_options(food_id)
        portion = find_portion(options, portion_id)
        if portion is None:
            raise NotFoundError(f"Portion {portion_id} not found for food {food_id}")
        addons = selected_addons(options, addon_ids)
        return MealFoodEntry(
            food_id=food_id,
            food_name=food_name,
            portion_id=portion.id,
            portion_display=portion.display_name,
            selected_addons=[addon.id for addon in addons],
            addons_display=[addon.display_name for addon in addons],
            nutrition=calculate_total_nutrition(options, portion_id, addon_ids),
        )

    def _require_meal(self, user_id: UUID, meal_id: UUID) -> MealWithFoods:
        meal = self.repository.get_meal(meal_id)
        if meal is None or meal.user_id != user_id:
            raise NotFoundError(f"Meal {meal_id} not found")
        return meal

    def _require_meal_food(self, meal_food_id: UUID) -> MealFood:
        meal_food = self.repository.get_meal_food(meal_food_id)
        if meal_food is None:
            raise NotFoundError(f"Meal food {meal_food_id} not found")
        return meal_food

    async def _emit_meal_change(self, user_id: UUID) -> None:
        await self.refresh_bus.emit(RefreshEvent.TODAY, user_id)
        await self.refresh_bus.emit(RefreshEvent.MEALS, user_id)

    def _generation(self, user_id: UUID) -> int:
        return self._generations.get(user_id, 0)

    def _bump_generation(self, user_id: UUID) -> None:
        # Reads that started before an invalidation must not refill the cache.
        self._generations[user_id] = self._generation(user_id) + 1

    def _invalidate_today(self, user_id: UUID) -> None:
        self._bump_generation(user_id)
        self.cache.delete_prefix(f"today:{user_id}:")

    def _invalidate_days(self, user_id: UUID) -> None:
        self._bump_generation(user_id)
        self.cache.delete_prefix(f"meals:{user_id}:")


def _summary_for(summaries: list[DailySummary], day: date) -> DailySummary | None:
    for summary in summaries:
        if summary.summary_date == day:
            return summary
    return None


def _today_key(user_id: UUID, day: date) -> str:
    return f"today:{user_id}:{day.isoformat()}"


def _day_key(user_id: UUID, day: date) -> str:
    return f"meals:{user_id}:{day.isoformat()}"
