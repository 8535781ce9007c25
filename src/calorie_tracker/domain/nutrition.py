"""Nutrition domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MacroTotals:
    """Calories and macronutrient grams."""

    calories: float
    protein: float
    carbs: float
    fat: float


DEFAULT_GOAL = MacroTotals(calories=2000, protein=150, carbs=200, fat=65)
ZERO_TOTALS = MacroTotals(calories=0.0, protein=0.0, carbs=0.0, fat=0.0)


@dataclass(frozen=True)
class DailyGoal:
    """A user's daily macro goal row."""

    id: UUID
    user_id: UUID
    calories: float
    protein: float
    carbs: float
    fat: float
    is_active: bool

    @property
    def totals(self) -> MacroTotals:
        return MacroTotals(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


@dataclass(frozen=True)
class FoodLogEntry:
    """A logged food item."""

    id: UUID
    user_id: UUID
    food_name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_size: str | None
    meal_type: str
    logged_at: datetime


@dataclass(frozen=True)
class MacroSlice:
    """Calories contributed by one macronutrient."""

    name: str
    grams: float
    calories: float


@dataclass(frozen=True)
class CatalogFood:
    """A food offered by the food picker."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving: str
