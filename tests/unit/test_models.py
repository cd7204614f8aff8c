"""Tests for ledger records and their sanitising validators."""

import math
from datetime import date

import pytest
from pydantic import ValidationError

from tradelog.core.enums import AccountType, Direction, TradeOutcome
from tradelog.core.models import Account, LedgerState, Trade, finite_or_none, parse_trade_date


class TestFiniteOrNone:
    @pytest.mark.parametrize("value", [None, "", "abc", math.nan, math.inf, True])
    def test_non_numbers(self, value):
        assert finite_or_none(value) is None

    def test_numbers_and_strings(self):
        assert finite_or_none("1.5") == 1.5
        assert finite_or_none(0) == 0.0


class TestParseTradeDate:
    def test_iso_strings(self):
        assert parse_trade_date("2024-01-15") == date(2024, 1, 15)
        assert parse_trade_date("2024-01-15T10:30:00") == date(2024, 1, 15)

    def test_garbage(self):
        assert parse_trade_date("15/01/2024") is None
        assert parse_trade_date("") is None


class TestTradeSanitising:
    def test_original_document_keys(self):
        trade = Trade.model_validate({
            "id": "tr_1",
            "accountId": "acc_1",
            "date": "2024-01-15",
            "tf": "M15",
            "dir": "Sell",
            "lot": "0.5",
            "entry": "1900",
            "close": 1890,
            "sl": 1905,
            "tp": 1880,
            "result": 500,
            "isManualResult": 1,
            "risk": "25",
        })
        assert trade.account_id == "acc_1"
        assert trade.direction == Direction.SELL
        assert trade.lot == 0.5
        assert trade.entry_price == 1900.0
        assert trade.close_price == 1890.0
        assert trade.is_manual_result is True
        assert trade.risk_amount == 25.0

    def test_bad_values_are_coerced(self):
        trade = Trade.model_validate({
            "dir": "sideways",
            "lot": -3,
            "entry": "abc",
            "close": "",
            "sl": 0,
            "tp": None,
            "result": "nan",
            "date": "yesterday",
        })
        assert trade.id.startswith("tr_")
        assert trade.direction == Direction.BUY
        assert trade.lot == 0.0
        assert trade.entry_price == 0.0
        assert trade.close_price is None
        assert trade.stop_loss is None
        assert trade.take_profit is None
        assert trade.result == 0.0
        assert trade.date is None
        assert trade.pair == "XAUUSD"

    def test_json_dict_uses_document_names(self):
        trade = Trade(account_id="acc_1", date="2024-01-15", result=12.5)
        data = trade.to_json_dict()
        assert data["accountId"] == "acc_1"
        assert data["date"] == "2024-01-15"
        assert data["dir"] == "Buy"
        assert data["sl"] is None
        assert Trade.model_validate(data).to_json_dict() == data

    def test_outcome(self):
        assert Trade(result=1).outcome == TradeOutcome.WIN
        assert Trade(result=-1).outcome == TradeOutcome.LOSS
        assert Trade(result=0).outcome == TradeOutcome.BREAKEVEN

    def test_open_trade(self):
        assert Trade(entry_price=1900).is_open
        assert not Trade(entry_price=1900, close_price=1901).is_open

    def test_trades_are_immutable(self):
        trade = Trade(result=1)
        with pytest.raises(ValidationError):
            trade.result = 2


class TestAccountSanitising:
    def test_defaults(self):
        acc = Account.model_validate({})
        assert acc.id.startswith("acc_")
        assert acc.name == "Unnamed Account"
        assert acc.account_type == AccountType.STANDARD

    def test_type_and_balance(self):
        assert Account.model_validate({"type": "Cent"}).account_type == AccountType.CENT
        assert Account.model_validate({"type": "Gold"}).account_type == AccountType.STANDARD
        assert Account.model_validate({"initialBalance": -10}).initial_balance == 0.0
        assert Account.model_validate({"initialBalance": "250.5"}).initial_balance == 250.5


class TestLedgerState:
    def test_drops_malformed_records(self):
        state = LedgerState.model_validate({
            "accounts": [{"name": "A"}, "junk", None],
            "trades": "not a list",
        })
        assert len(state.accounts) == 1
        assert state.trades == []

    def test_filters_and_user(self):
        state = LedgerState.model_validate({
            "user": {"username": "sam"},
            "activeAccountId": "",
            "activeTypeFilter": "Platinum",
            "pagination": {"currentPage": 3},
        })
        assert state.user.username == "sam"
        assert state.active_account_id == "all"
        assert state.active_type_filter == "all"

    def test_json_dict_keys(self):
        data = LedgerState().to_json_dict()
        assert set(data) == {"user", "accounts", "trades", "activeAccountId", "activeTypeFilter"}
