"""Tests for daily nutrition aggregation."""

from uuid import uuid4

import pytest

from calorie_tracker.domain.nutrition import DEFAULT_GOAL, ZERO_TOTALS, MacroTotals
from calorie_tracker.services.aggregation import (
    compute_consumed,
    compute_macro_breakdown,
    compute_progress_pct,
    compute_remaining,
)
from calorie_tracker.services.foods import FoodCatalog


def test_compute_consumed_empty_is_zero() -> None:
    assert compute_consumed([]) == ZERO_TOTALS


def test_compute_consumed_coerces_string_values() -> None:
    rows = [
        {"calories": "250", "protein": "20.5", "carbs": 30, "fat": "8"},
        {"calories": 100, "protein": 4.5, "carbs": "10", "fat": None},
    ]

    consumed = compute_consumed(rows)

    assert consumed == MacroTotals(calories=350, protein=25, carbs=40, fat=8)


def test_compute_consumed_is_order_independent() -> None:
    rows = [
        {"calories": 300, "protein": 10, "carbs": 40, "fat": 9},
        {"calories": 120, "protein": 3, "carbs": 20, "fat": 2},
        {"calories": 80, "protein": 1, "carbs": 19, "fat": 0.5},
    ]

    assert compute_consumed(rows) == compute_consumed(list(reversed(rows)))


def test_adding_banana_updates_consumed_and_remaining(container) -> None:
    earlier = {"calories": 1245, "protein": 85, "carbs": 120, "fat": 45}
    banana_form = FoodCatalog.to_form(container.food_catalog.get("Banana"))
    repository = container.food_log_service.repository
    banana = repository.create_food_log(uuid4(), banana_form.to_payload())

    consumed = compute_consumed([banana, earlier])
    remaining = compute_remaining(DEFAULT_GOAL, consumed)

    assert consumed.calories == pytest.approx(1334)
    assert consumed.protein == pytest.approx(86.1)
    assert consumed.carbs == pytest.approx(143)
    assert consumed.fat == pytest.approx(45.3)
    assert remaining.calories == pytest.approx(666)
    assert remaining.protein == pytest.approx(63.9)
    assert remaining.carbs == pytest.approx(57)
    assert remaining.fat == pytest.approx(19.7)


def test_compute_remaining_never_negative() -> None:
    consumed = MacroTotals(calories=2500, protein=100, carbs=250, fat=65)

    remaining = compute_remaining(DEFAULT_GOAL, consumed)

    assert remaining == MacroTotals(calories=0, protein=50, carbs=0, fat=0)


def test_compute_progress_pct_is_not_clamped() -> None:
    consumed = MacroTotals(calories=3000, protein=75, carbs=100, fat=0)

    progress = compute_progress_pct(consumed, DEFAULT_GOAL)

    assert progress.calories == pytest.approx(150)
    assert progress.protein == pytest.approx(50)
    assert progress.carbs == pytest.approx(50)
    assert progress.fat == 0


def test_compute_macro_breakdown_uses_calorie_factors() -> None:
    consumed = MacroTotals(calories=600, protein=30, carbs=50, fat=10)

    breakdown = compute_macro_breakdown(consumed)

    assert [item.name for item in breakdown] == ["Protein", "Carbs", "Fat"]
    assert [item.calories for item in breakdown] == [120, 200, 90]
    assert [item.grams for item in breakdown] == [30, 50, 10]
