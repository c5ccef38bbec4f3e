"""
Purpose: Synthetic case counts for the trends dashboard.
Historical points follow a noisy sine wave around a base level; the seven
forecast points decay 5% per step from the last historical value.

Testing: Seeded random.Random and a fixed `today` make series reproducible.
"""

from __future__ import annotations
import calendar
import math
import random
from datetime import date, timedelta
from typing import Optional

from ..models import CaseDataPoint, PointType, Timeframe, TrendSummary

FORECAST_POINTS = 7
FORECAST_DECAY = 0.95
TREND_AMPLITUDE = 0.2
STABLE_BAND_PCT = 5.0
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# timeframe -> (historical points, base cases, volatility)
TIMEFRAME_PARAMS: dict[Timeframe, tuple[int, int, int]] = {
    Timeframe.DAILY: (30, 1500, 200),
    Timeframe.WEEKLY: (12, 10000, 1500),
    Timeframe.MONTHLY: (12, 40000, 5000),
}


def _add_months(d: date, months: int) -> date:
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def shift_date(d: date, timeframe: Timeframe, steps: int) -> date:
    """Move `steps` units of the timeframe (negative goes back)."""
    if timeframe == Timeframe.DAILY:
        return d + timedelta(days=steps)
    if timeframe == Timeframe.WEEKLY:
        return d + timedelta(days=7 * steps)
    return _add_months(d, steps)


def format_label(d: date, timeframe: Timeframe) -> str:
    month = MONTH_ABBR[d.month - 1]
    if timeframe == Timeframe.MONTHLY:
        return f"{month} {d:%y}"
    return f"{month} {d.day}"


def generate_case_series(
    timeframe: Timeframe = Timeframe.DAILY,
    *,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> list[CaseDataPoint]:
    """Return historical points (oldest first) followed by 7 forecast points."""
    timeframe = Timeframe(timeframe)
    today = today or date.today()
    rng = rng or random.Random()
    points, base_cases, volatility = TIMEFRAME_PARAMS[timeframe]

    data: list[CaseDataPoint] = []
    for i in range(points, 0, -1):
        noise = rng.random() * volatility - volatility / 2
        trend = math.sin(i / 5) * (base_cases * TREND_AMPLITUDE)
        day = shift_date(today, timeframe, -i)
        data.append(
            CaseDataPoint(
                date=format_label(day, timeframe),
                cases=max(0, math.floor(base_cases + trend + noise)),
                type=PointType.HISTORICAL,
                day=day,
            )
        )

    last_cases = data[-1].cases
    for i in range(1, FORECAST_POINTS + 1):
        predicted = last_cases * FORECAST_DECAY**i + rng.random() * volatility * 0.5
        day = shift_date(today, timeframe, i)
        data.append(
            CaseDataPoint(
                date=format_label(day, timeframe),
                cases=max(0, math.floor(predicted)),
                type=PointType.PREDICTION,
                day=day,
            )
        )
    return data


def summarize_trend(points: list[CaseDataPoint]) -> TrendSummary:
    """Dashboard cards: last observed value vs. end of the forecast."""
    historical = [p for p in points if p.type == PointType.HISTORICAL]
    forecast = [p for p in points if p.type == PointType.PREDICTION]
    if not historical:
        raise ValueError("Series has no historical points.")

    last = historical[-1].cases
    end = forecast[-1].cases if forecast else last
    change = ((end - last) / last * 100.0) if last else 0.0

    if change > STABLE_BAND_PCT:
        label = "Rising"
    elif change < -STABLE_BAND_PCT:
        label = "Declining"
    else:
        label = "Stabilizing"
    return TrendSummary(
        last_historical=last,
        forecast_end=end,
        change_pct=round(change, 1),
        label=label,
    )
