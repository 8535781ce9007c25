"""Domain models for weight and body composition tracking."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class MeasurementType(StrEnum):
    """Supported body measurement sites."""

    CHEST = "chest"
    WAIST = "waist"
    HIPS = "hips"
    NECK = "neck"
    THIGH = "thigh"
    BICEP = "bicep"
    FOREARM = "forearm"
    CALF = "calf"


COMPOSITION_FIELDS = (
    "body_fat_percentage",
    "muscle_mass_kg",
    "bone_mass_kg",
    "water_percentage",
    "visceral_fat_rating",
)


@dataclass(frozen=True)
class WeightLogEntry:
    """A logged body weight."""

    id: UUID
    user_id: UUID
    weight_kg: float
    logged_at: datetime
    notes: str | None = None


@dataclass(frozen=True)
class BodyCompositionEntry:
    """A body composition reading; every value is optional."""

    id: UUID
    user_id: UUID
    logged_at: datetime
    body_fat_percentage: float | None = None
    muscle_mass_kg: float | None = None
    bone_mass_kg: float | None = None
    water_percentage: float | None = None
    visceral_fat_rating: int | None = None
    notes: str | None = None


@dataclass(frozen=True)
class BodyMeasurementEntry:
    """A circumference measurement in centimeters."""

    id: UUID
    user_id: UUID
    measurement_type: str
    value_cm: float
    logged_at: datetime
    notes: str | None = None


@dataclass(frozen=True)
class ChartPoint:
    """Single point of a line chart; None breaks the line."""

    date: str
    value: float | None
    full_date: datetime


class TrendDirection(StrEnum):
    """Direction of a two-point trend."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class Trend:
    """Short-horizon trend between the last two samples."""

    direction: TrendDirection
    magnitude: float


@dataclass(frozen=True)
class WeightProgress:
    """Chart data and summary for weight tracking."""

    series: list[ChartPoint]
    current_weight: float | None
    trend: Trend | None
    total_change: float | None

    @property
    def entry_count(self) -> int:
        return len(self.series)

    @property
    def has_data(self) -> bool:
        return bool(self.series)


@dataclass(frozen=True)
class BodyProgress:
    """Chart data for body composition and measurements."""

    composition: dict[str, list[ChartPoint]]
    latest_composition: BodyCompositionEntry | None
    measurements: dict[str, list[ChartPoint]] = field(default_factory=dict)
    latest_measurements: dict[str, float | None] = field(default_factory=dict)

    @property
    def has_composition(self) -> bool:
        return self.latest_composition is not None

    @property
    def has_measurements(self) -> bool:
        return bool(self.measurements)

    @property
    def has_data(self) -> bool:
        return self.has_composition or self.has_measurements
