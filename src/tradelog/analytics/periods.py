"""Period rollups: net result and win rate per day, week or month."""

from __future__ import annotations

import datetime as dt
import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Sequence

from tradelog.core.enums import Period
from tradelog.core.models import Trade

UNKNOWN_PERIOD = "Unknown"


@dataclass(frozen=True, slots=True)
class PeriodPerformance:
    period: str
    trade_count: int
    net_result: float
    win_rate: float


def period_key(day: dt.date | None, period: Period | str = Period.MONTHLY) -> str:
    """Bucket key for *day*: ``YYYY-MM-DD``, ``YYYY-Www`` or ``YYYY-MM``."""
    if day is None:
        return UNKNOWN_PERIOD
    period = Period(period)
    if period == Period.DAILY:
        return day.isoformat()
    if period == Period.WEEKLY:
        year, week, _ = day.isocalendar()
        return f"{year}-W{week:02d}"
    return day.strftime("%Y-%m")


def _sort_key(key: str) -> tuple[bool, str]:
    # "Unknown" after every dated bucket
    return (key == UNKNOWN_PERIOD, key)


def period_performance(
    trades: Sequence[Trade],
    period: Period | str = Period.MONTHLY,
) -> list[PeriodPerformance]:
    """Group *trades* by calendar period, oldest period first.

    Trades without a usable date land in the ``"Unknown"`` bucket rather
    than being dropped.
    """
    buckets: dict[str, list[float]] = defaultdict(list)
    for trade in trades:
        buckets[period_key(trade.date, period)].append(trade.result)

    out: list[PeriodPerformance] = []
    for key in sorted(buckets, key=_sort_key):
        results = buckets[key]
        wins = sum(1 for r in results if r > 0)
        out.append(
            PeriodPerformance(
                period=key,
                trade_count=len(results),
                net_result=round(math.fsum(results), 2),
                win_rate=round(wins / len(results) * 100, 2) if results else 0.0,
            )
        )
    return out


def monthly_performance(trades: Sequence[Trade]) -> list[PeriodPerformance]:
    """Per-month rollup (``YYYY-MM``) in ascending order."""
    return period_performance(trades, Period.MONTHLY)
