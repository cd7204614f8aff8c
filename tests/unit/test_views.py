"""Tests for presentation helpers built on the analytics engine."""

import math

import pytest

from tradelog.analytics import compute_stats
from tradelog.core.enums import AccountType
from tradelog.reporting.views import (
    account_cards,
    dashboard_summary,
    equity_series,
    format_currency,
    format_profit_factor,
    trade_row,
)

from ..conftest import make_trade


class TestFormatting:
    @pytest.mark.parametrize(
        "amount, account_type, expected",
        [
            (1234.5, "Standard", "$1,234.50"),
            (-1234.5, AccountType.STANDARD, "-$1,234.50"),
            (0, "Standard", "$0.00"),
            (1234.5, "Cent", "1,234.50 USC"),
            (-0.12, AccountType.CENT, "-0.12 USC"),
        ],
    )
    def test_format_currency(self, amount, account_type, expected):
        assert format_currency(amount, account_type) == expected

    def test_profit_factor(self):
        assert format_profit_factor(math.inf) == "∞"
        assert format_profit_factor(2.4) == "2.40"


class TestEquitySeries:
    def test_labels_follow_replay_order(self):
        trades = [make_trade(-50, "2024-02-03"), make_trade(100, "2024-02-01")]
        series = equity_series(trades, 1000)
        assert series.labels == ["Start", "02-01", "02-03"]
        assert series.values == [1000, 1100, 1050]

    def test_matches_summary(self):
        trades = [make_trade(r, f"2024-01-{d:02d}") for d, r in ((1, 10.1), (2, -3.3), (3, 7))]
        assert equity_series(trades, 250).values[-1] == compute_stats(trades, 250).balance


class TestDashboardSummary:
    def test_strings(self):
        trades = [
            make_trade(100, "2024-01-01", sl=1890, tp=1920),
            make_trade(-50, "2024-01-02"),
            make_trade(20, "2024-01-03"),
        ]
        summary = dashboard_summary(compute_stats(trades, 1000), "Standard")
        assert summary == {
            "balance": "$1,070.00",
            "growth": "+7.00%",
            "win_rate": "66.7%",
            "trades": "3",
            "drawdown": "4.55%",
            "profit_factor": "2.40",
            "avg_risk_reward": "1 : 2.00",
            "max_win_streak": "1",
            "max_loss_streak": "1",
        }

    def test_empty_ledger(self):
        summary = dashboard_summary(compute_stats([], 0), "Cent")
        assert summary["balance"] == "0.00 USC"
        assert summary["avg_risk_reward"] == "-"
        assert summary["profit_factor"] == "0.00"


class TestAccountCards:
    def test_each_account_uses_own_balance(self, populated_store):
        cards = {c.account.name: c.stats for c in account_cards(populated_store)}
        assert cards["Main"].balance == 962.0
        assert cards["Swing"].balance == 600.0
        assert cards["Cent"].balance == 10_000.12
        assert cards["Swing"].growth == 20.0


class TestTradeRow:
    def test_row(self):
        trade = make_trade(12, "2024-01-15", close=1901.2, sl=1890, tp=1920, pips=12)
        row = trade_row(trade, "Standard")
        assert row["date"] == "2024-01-15"
        assert row["pips"] == "+12.0"
        assert row["risk_reward"] == "1 : 2.00"
        assert row["result"] == "$12.00"

    def test_open_trade_row(self):
        row = trade_row(make_trade(0, None), "Cent")
        assert row["close"] == ""
        assert row["date"] == ""
        assert row["risk_reward"] == "-"
