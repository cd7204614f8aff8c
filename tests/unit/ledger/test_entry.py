"""Tests for building ledger trades from form input."""

import pytest

from tradelog.core.config import InstrumentConfig
from tradelog.core.enums import AccountType, Direction
from tradelog.core.errors import TradeValidationError
from tradelog.core.models import Account
from tradelog.ledger.entry import build_trade

from ...conftest import make_input


@pytest.fixture
def standard():
    return Account(id="acc_std", name="Main", account_type=AccountType.STANDARD, initial_balance=1000)


@pytest.fixture
def cent():
    return Account(id="acc_cent", name="Cent", account_type=AccountType.CENT, initial_balance=1000)


class TestBuildTrade:
    def test_derives_pips_and_result(self, standard):
        trade = build_trade(make_input(), standard)
        assert trade.account_id == "acc_std"
        assert trade.pips == 12.0
        assert trade.result == 12.0
        assert trade.direction == Direction.BUY
        assert trade.stop_loss == 1890.0

    def test_cent_account_multiplier(self, cent):
        assert build_trade(make_input(), cent).result == 0.12

    def test_manual_result_is_kept(self, standard):
        trade = build_trade(make_input(result=-7.5, is_manual_result=True), standard)
        assert trade.result == -7.5
        assert trade.is_manual_result
        assert trade.pips == 12.0

    def test_open_trade(self, standard):
        trade = build_trade(make_input(close=None, result=None), standard)
        assert trade.close_price is None
        assert trade.pips == 0.0
        assert trade.result == 0.0

    def test_derived_result_overrides_typed_value(self, standard):
        trade = build_trade(make_input(result=999), standard)
        assert trade.result == 12.0

    def test_unset_stop_and_target(self, standard):
        trade = build_trade(make_input(stop_loss=0, take_profit=""), standard)
        assert trade.stop_loss is None
        assert trade.take_profit is None

    def test_instrument_settings(self, standard):
        instrument = InstrumentConfig(pip_size=0.01, standard_multiplier=10)
        trade = build_trade(make_input(), standard, instrument=instrument)
        assert trade.pips == 120.0
        assert trade.result == 1.2

    def test_keeps_given_id(self, standard):
        assert build_trade(make_input(), standard, trade_id="tr_fixed").id == "tr_fixed"

    def test_invalid_input_raises_with_messages(self, standard):
        with pytest.raises(TradeValidationError) as excinfo:
            build_trade(make_input(lot=0, timeframe=""), standard)
        assert excinfo.value.errors == [
            "Timeframe is required.",
            "Lot must be a positive number greater than 0.",
        ]
