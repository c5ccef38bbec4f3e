"""
Controller for the trends dashboard.
Generates the synthetic case series for a timeframe and derives the summary cards.
"""

from __future__ import annotations
import logging
import random
from datetime import date
from typing import Optional

from .models import CaseDataPoint, PointType, Timeframe, TrendSummary
from .services.trend_data import generate_case_series, summarize_trend

logger = logging.getLogger(__name__)


class TrendsController:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.timeframe: Timeframe = Timeframe.DAILY
        self.series: list[CaseDataPoint] = []
        self.summary: Optional[TrendSummary] = None

    def reset(self) -> None:
        """Forget the cached series and go back to the daily view."""
        self.timeframe = Timeframe.DAILY
        self.series = []
        self.summary = None

    def load(
        self, timeframe: Timeframe | str, *, today: Optional[date] = None
    ) -> tuple[list[CaseDataPoint], TrendSummary]:
        """Regenerate the series for `timeframe` and cache it with its summary."""
        self.timeframe = Timeframe(timeframe)
        self.series = generate_case_series(self.timeframe, today=today, rng=self.rng)
        self.summary = summarize_trend(self.series)
        logger.debug(
            "Loaded %s series (%d points, %s)",
            self.timeframe.value,
            len(self.series),
            self.summary.label,
        )
        return self.series, self.summary

    def forecast_start_label(self) -> Optional[str]:
        """Label of the last historical point, where the forecast begins."""
        historical = [p for p in self.series if p.type == PointType.HISTORICAL]
        return historical[-1].date if historical else None
