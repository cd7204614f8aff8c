"""Trading analytics engine.

Pure functions from a ledger slice (and its initial balance) to derived
statistics.  Nothing here reads or writes storage.

compute_pips             Signed pip movement of one trade
compute_monetary_result  Price movement x lot x account multiplier
compute_risk_reward      "1 : X.XX" display ratio, or NO_RATIO
compute_stats            Equity curve, drawdown, win rate, profit factor, streaks
monthly_performance      Per-month trade count, net result and win rate
"""

from .metrics import (
    CLASS_MULTIPLIERS,
    NO_RATIO,
    PIP_SIZE,
    compute_monetary_result,
    compute_pips,
    compute_risk_reward,
    risk_reward_ratio,
)
from .periods import PeriodPerformance, monthly_performance, period_performance
from .stats import StatsResult, compute_stats, sort_by_date

__all__ = [
    "CLASS_MULTIPLIERS",
    "NO_RATIO",
    "PIP_SIZE",
    "compute_pips",
    "compute_monetary_result",
    "compute_risk_reward",
    "risk_reward_ratio",
    "compute_stats",
    "sort_by_date",
    "StatsResult",
    "monthly_performance",
    "period_performance",
    "PeriodPerformance",
]
