"""Form models for user-submitted entries.

Every numeric field arrives as user input, usually a string. Values are parsed
with plain float/int parsing (no locale handling), NaN and infinity are
rejected, and blank optional fields become ``None`` so they can be left out of
insert payloads entirely.
"""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from calorie_tracker.domain.body import COMPOSITION_FIELDS, MeasurementType

DEFAULT_MEAL_TYPE = "snack"


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        return value.strip() or None
    return value


def _number_input(value: object) -> object:
    if isinstance(value, bool):
        raise ValueError("Enter a number")
    return _blank_to_none(value)


_Blank = BeforeValidator(_blank_to_none)
_Number = BeforeValidator(_number_input)

RequiredText = Annotated[str, _Blank, Field(min_length=1)]
OptionalText = Annotated[str | None, _Blank]
NonNegative = Annotated[float, _Number, Field(ge=0, allow_inf_nan=False)]
Positive = Annotated[float, _Number, Field(gt=0, allow_inf_nan=False)]
OptionalNonNegative = Annotated[
    Annotated[float, Field(ge=0, allow_inf_nan=False)] | None, _Number
]
OptionalCount = Annotated[Annotated[int, Field(ge=0)] | None, _Number]


class _PayloadForm(BaseModel):
    def to_payload(self) -> dict[str, object]:
        """Return the insert payload without any empty fields."""
        return self.model_dump(mode="json", exclude_none=True)


class FoodLogForm(_PayloadForm):
    """Manual or picker-selected food entry."""

    food_name: RequiredText
    calories: NonNegative
    protein: NonNegative
    carbs: NonNegative
    fat: NonNegative
    serving_size: OptionalText = None
    meal_type: OptionalText = None

    def to_payload(self) -> dict[str, object]:
        payload = super().to_payload()
        payload["meal_type"] = self.meal_type or DEFAULT_MEAL_TYPE
        return payload


class GoalForm(_PayloadForm):
    """Daily macro goal update."""

    calories: Positive
    protein: Positive
    carbs: Positive
    fat: Positive


class WeightLogForm(_PayloadForm):
    """Body weight entry in kilograms."""

    weight_kg: Positive
    notes: OptionalText = None


class BodyCompositionForm(_PayloadForm):
    """Partial body composition reading."""

    body_fat_percentage: OptionalNonNegative = None
    muscle_mass_kg: OptionalNonNegative = None
    bone_mass_kg: OptionalNonNegative = None
    water_percentage: OptionalNonNegative = None
    visceral_fat_rating: OptionalCount = None
    notes: OptionalText = None

    @model_validator(mode="after")
    def _require_one_value(self) -> "BodyCompositionForm":
        if all(getattr(self, name) is None for name in COMPOSITION_FIELDS):
            raise ValueError("Enter at least one body composition value")
        return self


class BodyMeasurementForm(_PayloadForm):
    """Circumference measurement for one body site."""

    measurement_type: MeasurementType
    value_cm: Positive
    notes: OptionalText = None


class SignUpForm(BaseModel):
    """Account registration request."""

    email: RequiredText
    password: Annotated[str, Field(min_length=6)]
    full_name: OptionalText = None


class SignInForm(BaseModel):
    """Password sign-in request."""

    email: RequiredText
    password: Annotated[str, Field(min_length=1)]
