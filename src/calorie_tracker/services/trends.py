"""Chart series and trend helpers for body metrics."""

import math
from collections.abc import Sequence
from datetime import UTC, datetime, tzinfo

from calorie_tracker.domain.body import (
    COMPOSITION_FIELDS,
    BodyMeasurementEntry,
    ChartPoint,
    Trend,
    TrendDirection,
)

TREND_THRESHOLD = 0.1


def format_chart_date(moment: datetime, tz: tzinfo = UTC) -> str:
    """Format a timestamp as a short date label such as 'Oct 19'."""
    local = moment.astimezone(tz) if moment.tzinfo else moment
    return f"{local:%b} {local.day}"


def to_chart_series(
    rows: Sequence[object], value_field: str, tz: tzinfo = UTC
) -> list[ChartPoint]:
    """Map rows to chart points, keeping input order.

    Missing or unparseable values become None so a line chart breaks instead
    of drawing a false zero.
    """
    return [
        ChartPoint(
            date=format_chart_date(row.logged_at, tz),
            value=_parse_value(getattr(row, value_field, None)),
            full_date=row.logged_at,
        )
        for row in rows
    ]


def composition_series(
    rows: Sequence[object], tz: tzinfo = UTC
) -> dict[str, list[ChartPoint]]:
    """Return one series per body composition field."""
    return {name: to_chart_series(rows, name, tz) for name in COMPOSITION_FIELDS}


def compute_trend(series: Sequence[ChartPoint]) -> Trend | None:
    """Classify the change between the last two points of a series.

    The series must already be in ascending time order.
    """
    if len(series) < 2:  # noqa: PLR2004
        return None
    previous, latest = series[-2].value, series[-1].value
    if previous is None or latest is None:
        return None
    diff = latest - previous
    if diff > TREND_THRESHOLD:
        return Trend(direction=TrendDirection.UP, magnitude=abs(diff))
    if diff < -TREND_THRESHOLD:
        return Trend(direction=TrendDirection.DOWN, magnitude=abs(diff))
    return Trend(direction=TrendDirection.STABLE, magnitude=0.0)


def total_change(series: Sequence[ChartPoint]) -> float | None:
    """Return last minus first value for series with two or more points."""
    if len(series) < 2:  # noqa: PLR2004
        return None
    first, last = series[0].value, series[-1].value
    if first is None or last is None:
        return None
    return last - first


def latest_value(series: Sequence[ChartPoint]) -> float | None:
    """Return the value of the last point, if any."""
    if not series:
        return None
    return series[-1].value


def group_by_measurement_type(
    rows: Sequence[BodyMeasurementEntry], tz: tzinfo = UTC
) -> dict[str, list[ChartPoint]]:
    """Partition measurements into one chart series per measurement type."""
    grouped: dict[str, list[ChartPoint]] = {}
    for row in rows:
        grouped.setdefault(str(row.measurement_type), []).extend(
            to_chart_series([row], "value_cm", tz)
        )
    return grouped


def _parse_value(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed
