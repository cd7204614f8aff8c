"""Display formatting for engine output."""

from .views import (
    AccountCard,
    EquitySeries,
    account_cards,
    dashboard_summary,
    equity_series,
    format_currency,
    format_profit_factor,
    trade_row,
)

__all__ = [
    "AccountCard",
    "EquitySeries",
    "account_cards",
    "dashboard_summary",
    "equity_series",
    "format_currency",
    "format_profit_factor",
    "trade_row",
]
