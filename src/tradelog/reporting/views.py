"""Presentation helpers: turn engine output into display strings and series.

Every view is built from :func:`~tradelog.analytics.compute_stats` so
the summary cards, equity chart and account cards agree to the cent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

from tradelog.analytics.metrics import NO_RATIO, compute_risk_reward
from tradelog.analytics.stats import StatsResult, compute_stats, sort_by_date
from tradelog.core.enums import AccountType
from tradelog.core.models import Account, Trade
from tradelog.ledger.store import LedgerStore


def format_currency(amount: float, account_type: AccountType | str) -> str:
    """``$1,234.50`` for Standard accounts, ``1,234.50 USC`` for Cent."""
    formatted = f"{abs(amount):,.2f}"
    if AccountType.parse(account_type) == AccountType.CENT:
        return f"{'-' if amount < 0 else ''}{formatted} USC"
    return f"{'-$' if amount < 0 else '$'}{formatted}"


def format_profit_factor(value: float) -> str:
    return "∞" if math.isinf(value) else f"{value:.2f}"


def format_signed_pct(value: float) -> str:
    return f"{'+' if value >= 0 else ''}{value:.2f}%"


@dataclass(frozen=True)
class EquitySeries:
    labels: list[str]
    values: list[float]


def equity_series(trades: Sequence[Trade], initial_balance: float) -> EquitySeries:
    """Chart series: ``"Start"`` then one ``MM-DD`` label per trade."""
    stats = compute_stats(trades, initial_balance)
    labels = ["Start"] + [
        t.date.strftime("%m-%d") if t.date else "" for t in sort_by_date(trades)
    ]
    return EquitySeries(labels=labels, values=list(stats.equity_points))


def dashboard_summary(
    stats: StatsResult, account_type: AccountType | str
) -> dict[str, str]:
    """Strings for the summary cards."""
    return {
        "balance": format_currency(stats.balance, account_type),
        "growth": format_signed_pct(stats.growth),
        "win_rate": f"{stats.win_rate:.1f}%",
        "trades": str(stats.total),
        "drawdown": f"{stats.max_drawdown:.2f}%",
        "profit_factor": format_profit_factor(stats.profit_factor),
        "avg_risk_reward": (
            f"1 : {stats.avg_risk_reward:.2f}" if stats.avg_risk_reward else NO_RATIO
        ),
        "max_win_streak": str(stats.max_win_streak),
        "max_loss_streak": str(stats.max_loss_streak),
    }


@dataclass(frozen=True)
class AccountCard:
    account: Account
    stats: StatsResult


def account_cards(store: LedgerStore) -> list[AccountCard]:
    """Per-account stats over each account's own trades and balance."""
    return [
        AccountCard(
            account=acc,
            stats=compute_stats(store.trades_for_account(acc.id), acc.initial_balance),
        )
        for acc in store.accounts
    ]


def trade_row(trade: Trade, account_type: AccountType | str) -> dict[str, Any]:
    """One journal table row."""
    return {
        "id": trade.id,
        "date": trade.date.isoformat() if trade.date else "",
        "pair": trade.pair,
        "timeframe": trade.timeframe,
        "direction": trade.direction.value,
        "lot": trade.lot,
        "entry": trade.entry_price,
        "close": trade.close_price if trade.close_price is not None else "",
        "pips": f"{trade.pips:+.1f}",
        "risk_reward": compute_risk_reward(
            trade.direction, trade.entry_price, trade.stop_loss, trade.take_profit
        ),
        "result": format_currency(trade.result, account_type),
    }
