"""TrendsController: caching of the generated series per timeframe."""

import random
from datetime import date

from core.controller_trends import TrendsController
from core.models import PointType, Timeframe

TODAY = date(2026, 10, 19)


def test_initial_state():
    trends = TrendsController()
    assert trends.timeframe == Timeframe.DAILY
    assert trends.series == []
    assert trends.summary is None
    assert trends.forecast_start_label() is None


def test_load_caches_series_and_summary():
    trends = TrendsController(rng=random.Random(42))

    series, summary = trends.load("weekly", today=TODAY)

    assert trends.timeframe == Timeframe.WEEKLY
    assert trends.series is series
    assert trends.summary is summary
    assert len(series) == 12 + 7
    last_historical = [p for p in series if p.type == PointType.HISTORICAL][-1]
    assert summary.last_historical == last_historical.cases
    assert summary.forecast_end == series[-1].cases
    assert trends.forecast_start_label() == last_historical.date


def test_same_seed_gives_same_series():
    a = TrendsController(rng=random.Random(3)).load(Timeframe.MONTHLY, today=TODAY)
    b = TrendsController(rng=random.Random(3)).load(Timeframe.MONTHLY, today=TODAY)
    assert a == b


def test_reset():
    trends = TrendsController(rng=random.Random(1))
    trends.load(Timeframe.MONTHLY, today=TODAY)

    trends.reset()

    assert trends.timeframe == Timeframe.DAILY
    assert trends.series == []
    assert trends.summary is None
