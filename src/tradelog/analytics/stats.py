"""Aggregate statistics over a slice of the ledger.

:func:`compute_stats` turns an unordered list of trades and a starting
balance into the numbers behind every summary card, chart and account
card.  It is a pure function of its inputs: the ledger is never mutated
and no state survives between calls, so any number of slices can be
computed concurrently.

Trades are replayed in date order (stable, undated trades last) to
build the equity curve, drawdown and streaks.  Counts, profit factor and
average risk/reward do not depend on order.

Rounding happens only on output.  The running balance is accumulated
unrounded so long ledgers do not drift; each equity point is the running
balance rounded to cents.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import asdict, dataclass
from typing import Any, Sequence

from tradelog.core.enums import TradeOutcome
from tradelog.core.models import Trade

from .metrics import risk_reward_ratio


@dataclass(frozen=True, slots=True)
class StatsResult:
    """Derived statistics for one slice of trades.

    ``profit_factor`` is ``math.inf`` when there are winning trades and
    no losing ones.
    """

    balance: float
    initial_balance: float
    total_result: float
    growth: float
    wins: int
    losses: int
    breakeven: int
    total: int
    win_rate: float
    max_drawdown: float
    profit_factor: float
    avg_risk_reward: float
    max_win_streak: int
    max_loss_streak: int
    equity_points: tuple[float, ...]

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe dict; an infinite profit factor becomes ``"inf"``."""
        data = asdict(self)
        data["equity_points"] = list(self.equity_points)
        if math.isinf(self.profit_factor):
            data["profit_factor"] = "inf"
        return data


def sort_by_date(trades: Sequence[Trade]) -> list[Trade]:
    """Chronological order; ties and undated trades keep input order."""
    return sorted(trades, key=lambda t: (t.date is None, t.date or dt.date.min))


def compute_growth(balance: float, initial_balance: float) -> float:
    """Percentage growth over the initial balance; 0 when it is 0."""
    if not initial_balance:
        return 0.0
    return round((balance - initial_balance) / initial_balance * 100, 2)


def _max_streaks(ordered: Sequence[Trade]) -> tuple[int, int]:
    current = 0
    streak_type: TradeOutcome | None = None
    max_win = 0
    max_loss = 0

    for trade in ordered:
        outcome = trade.outcome
        if outcome == TradeOutcome.BREAKEVEN:
            current = 0
            streak_type = None
            continue
        if outcome == streak_type:
            current += 1
        else:
            current = 1
            streak_type = outcome
        if outcome == TradeOutcome.WIN:
            max_win = max(max_win, current)
        else:
            max_loss = max(max_loss, current)

    return max_win, max_loss


def _profit_factor(gross_win: float, gross_loss: float) -> float:
    if gross_loss > 0:
        return round(gross_win / gross_loss, 2)
    return math.inf if gross_win > 0 else 0.0


def compute_stats(trades: Sequence[Trade], initial_balance: float) -> StatsResult:
    """Compute the full statistics record for *trades*.

    Never raises for well-formed trades: an empty slice, a zero initial
    balance or an all-losing slice each yield defined values.
    """
    ordered = sort_by_date(trades)

    balance = float(initial_balance)
    peak = balance
    max_dd = 0.0
    equity_points = [round(balance, 2)]

    for trade in ordered:
        balance += trade.result
        equity_points.append(round(balance, 2))
        peak = max(peak, balance)
        dd = (peak - balance) / peak * 100 if peak > 0 else 0.0
        max_dd = max(max_dd, dd)

    results = [t.result for t in trades]
    total = len(results)
    wins = sum(1 for r in results if r > 0)
    losses = sum(1 for r in results if r < 0)
    breakeven = total - wins - losses
    win_rate = wins / total * 100 if total else 0.0

    gross_win = math.fsum(r for r in results if r > 0)
    gross_loss = abs(math.fsum(r for r in results if r < 0))

    ratios = [
        ratio
        for ratio in (
            risk_reward_ratio(t.direction, t.entry_price, t.stop_loss, t.take_profit)
            for t in trades
        )
        if ratio is not None
    ]
    avg_rr = round(math.fsum(ratios) / len(ratios), 2) if ratios else 0.0

    max_win_streak, max_loss_streak = _max_streaks(ordered)

    return StatsResult(
        balance=round(balance, 2),
        initial_balance=float(initial_balance),
        total_result=round(balance - initial_balance, 2),
        growth=compute_growth(balance, initial_balance),
        wins=wins,
        losses=losses,
        breakeven=breakeven,
        total=total,
        win_rate=round(win_rate, 2),
        max_drawdown=round(max_dd, 2),
        profit_factor=_profit_factor(gross_win, gross_loss),
        avg_risk_reward=avg_rr,
        max_win_streak=max_win_streak,
        max_loss_streak=max_loss_streak,
        equity_points=tuple(equity_points),
    )
