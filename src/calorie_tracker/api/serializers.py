"""JSON serialization for API responses."""

from dataclasses import asdict

from calorie_tracker.domain.body import (
    BodyCompositionEntry,
    BodyMeasurementEntry,
    BodyProgress,
    ChartPoint,
    Trend,
    WeightLogEntry,
    WeightProgress,
)
from calorie_tracker.domain.models import Profile
from calorie_tracker.domain.nutrition import DailyGoal, FoodLogEntry, MacroTotals
from calorie_tracker.services.dashboard import DailySummary


def serialize_totals(totals: MacroTotals) -> dict[str, float]:
    return asdict(totals)


def serialize_food_log(entry: FoodLogEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "food_name": entry.food_name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "serving_size": entry.serving_size,
        "meal_type": entry.meal_type,
        "logged_at": entry.logged_at.isoformat(),
    }


def serialize_goal(goal: DailyGoal) -> dict[str, object]:
    return {"id": str(goal.id), "is_active": goal.is_active, **asdict(goal.totals)}


def serialize_profile(profile: Profile | None) -> dict[str, object] | None:
    if profile is None:
        return None
    return {
        "id": str(profile.id),
        "email": profile.email,
        "full_name": profile.full_name,
        "age": profile.age,
        "gender": profile.gender,
        "height_cm": profile.height_cm,
        "activity_level": profile.activity_level,
        "goal_type": profile.goal_type,
    }


def serialize_summary(summary: DailySummary) -> dict[str, object]:
    return {
        "day": summary.day.isoformat(),
        "profile": serialize_profile(summary.profile),
        "goal": serialize_totals(summary.goal),
        "goal_is_default": summary.goal_is_default,
        "food_logs": [serialize_food_log(entry) for entry in summary.food_logs],
        "consumed": serialize_totals(summary.consumed),
        "remaining": serialize_totals(summary.remaining),
        "progress": serialize_totals(summary.progress),
        "macro_breakdown": [asdict(item) for item in summary.macro_breakdown],
    }


def serialize_series(series: list[ChartPoint]) -> list[dict[str, object]]:
    return [
        {
            "date": point.date,
            "value": point.value,
            "full_date": point.full_date.isoformat(),
        }
        for point in series
    ]


def serialize_trend(trend: Trend | None) -> dict[str, object] | None:
    if trend is None:
        return None
    return {"direction": trend.direction.value, "magnitude": trend.magnitude}


def serialize_weight_log(entry: WeightLogEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "weight_kg": entry.weight_kg,
        "logged_at": entry.logged_at.isoformat(),
        "notes": entry.notes,
    }


def serialize_weight_progress(progress: WeightProgress) -> dict[str, object]:
    return {
        "has_data": progress.has_data,
        "series": serialize_series(progress.series),
        "current_weight": progress.current_weight,
        "trend": serialize_trend(progress.trend),
        "total_change": progress.total_change,
        "entry_count": progress.entry_count,
    }


def serialize_composition(
    entry: BodyCompositionEntry | None,
) -> dict[str, object] | None:
    if entry is None:
        return None
    return {
        "id": str(entry.id),
        "body_fat_percentage": entry.body_fat_percentage,
        "muscle_mass_kg": entry.muscle_mass_kg,
        "bone_mass_kg": entry.bone_mass_kg,
        "water_percentage": entry.water_percentage,
        "visceral_fat_rating": entry.visceral_fat_rating,
        "logged_at": entry.logged_at.isoformat(),
        "notes": entry.notes,
    }


def serialize_measurement(entry: BodyMeasurementEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "measurement_type": entry.measurement_type,
        "value_cm": entry.value_cm,
        "logged_at": entry.logged_at.isoformat(),
        "notes": entry.notes,
    }


def serialize_body_progress(progress: BodyProgress) -> dict[str, object]:
    return {
        "has_data": progress.has_data,
        "has_composition": progress.has_composition,
        "has_measurements": progress.has_measurements,
        "composition": {
            name: serialize_series(series)
            for name, series in progress.composition.items()
        },
        "latest_composition": serialize_composition(progress.latest_composition),
        "measurements": {
            name: serialize_series(series)
            for name, series in progress.measurements.items()
        },
        "latest_measurements": progress.latest_measurements,
    }
