"""Tests for account and trade form validation."""

import pytest

from tradelog.ledger.validation import validate_account, validate_trade

from ...conftest import make_input


class TestValidateAccount:
    def test_valid(self):
        result = validate_account("Main", "Standard", 1000)
        assert result.valid
        assert result.errors == []

    def test_zero_balance_allowed(self):
        assert validate_account("Main", "Cent", 0).valid

    def test_all_errors_reported(self):
        result = validate_account("  ", "Gold", -1)
        assert not result.valid
        assert result.errors == [
            "Account name is required.",
            "Account type must be Standard or Cent.",
            "Initial balance must be a non-negative number.",
        ]

    def test_non_numeric_balance(self):
        assert not validate_account("Main", "Standard", "lots").valid


class TestValidateTrade:
    def test_valid_form(self):
        assert validate_trade(make_input()).valid

    def test_open_trade_without_close(self):
        assert validate_trade(make_input(close=None)).valid
        assert validate_trade(make_input(close="")).valid

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("date", "", "Date is required."),
            ("date", "31/01/2024", "Date must be a calendar date (YYYY-MM-DD)."),
            ("pair", " ", "Pair is required."),
            ("timeframe", "", "Timeframe is required."),
            ("direction", "Up", "Direction must be Buy or Sell."),
            ("lot", 0, "Lot must be a positive number greater than 0."),
            ("entry", None, "Entry price is required and must be greater than 0."),
            ("close", -1, "Close price must be a positive number if provided."),
            ("stop_loss", -5, "Stop loss must be a positive number if provided."),
            ("take_profit", "x", "Take profit must be a positive number if provided."),
            ("result", "abc", "Result must be a valid number."),
        ],
    )
    def test_single_field_errors(self, field, value, message):
        result = validate_trade(make_input(**{field: value}))
        assert result.errors == [message]

    def test_zero_stop_and_target_mean_not_set(self):
        assert validate_trade(make_input(stop_loss=0, take_profit=0)).valid
        assert validate_trade(make_input(stop_loss="", take_profit=None)).valid

    def test_zero_result_allowed(self):
        assert validate_trade(make_input(result=0)).valid
