"""Daily nutrition aggregation against macro goals."""

from collections.abc import Iterable, Mapping

from calorie_tracker.domain.nutrition import (
    ZERO_TOTALS,
    FoodLogEntry,
    MacroSlice,
    MacroTotals,
)

_MACRO_FIELDS = ("calories", "protein", "carbs", "fat")
_CALORIES_PER_GRAM = {"protein": 4, "carbs": 4, "fat": 9}


def compute_consumed(
    rows: Iterable[FoodLogEntry | Mapping[str, object]],
) -> MacroTotals:
    """Sum calories and macros over food log rows.

    Values are coerced to float first since the data store may return numeric
    columns as strings.
    """
    total = ZERO_TOTALS
    for row in rows:
        total = MacroTotals(
            calories=total.calories + _number(row, "calories"),
            protein=total.protein + _number(row, "protein"),
            carbs=total.carbs + _number(row, "carbs"),
            fat=total.fat + _number(row, "fat"),
        )
    return total


def compute_remaining(goal: MacroTotals, consumed: MacroTotals) -> MacroTotals:
    """Return what is left of each goal, never below zero."""
    return MacroTotals(
        calories=max(0.0, goal.calories - consumed.calories),
        protein=max(0.0, goal.protein - consumed.protein),
        carbs=max(0.0, goal.carbs - consumed.carbs),
        fat=max(0.0, goal.fat - consumed.fat),
    )


def compute_progress_pct(consumed: MacroTotals, goal: MacroTotals) -> MacroTotals:
    """Return consumed as a percentage of goal per field.

    Results are not capped at 100. Goal fields must be positive.
    """
    return MacroTotals(
        calories=consumed.calories / goal.calories * 100,
        protein=consumed.protein / goal.protein * 100,
        carbs=consumed.carbs / goal.carbs * 100,
        fat=consumed.fat / goal.fat * 100,
    )


def compute_macro_breakdown(consumed: MacroTotals) -> list[MacroSlice]:
    """Split consumed macros into calories per macronutrient."""
    return [
        MacroSlice(
            name=name.capitalize(),
            grams=getattr(consumed, name),
            calories=getattr(consumed, name) * factor,
        )
        for name, factor in _CALORIES_PER_GRAM.items()
    ]


def _number(row: FoodLogEntry | Mapping[str, object], name: str) -> float:
    value = row.get(name) if isinstance(row, Mapping) else getattr(row, name)
    if value is None:
        return 0.0
    return float(value)
