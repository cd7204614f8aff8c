"""Shared fixtures for the tradelog test suite."""

from __future__ import annotations

from datetime import date

import pytest

from tradelog.core.enums import AccountType
from tradelog.core.models import Trade
from tradelog.ledger.entry import TradeInput
from tradelog.ledger.store import LedgerStore


def make_trade(
    result: float = 0.0,
    trade_date: date | str | None = "2024-01-01",
    *,
    direction: str = "Buy",
    entry: float = 1900.0,
    close: float | None = None,
    sl: float | None = None,
    tp: float | None = None,
    account_id: str = "acc_1",
    **kwargs,
) -> Trade:
    """Create a ledger trade with a given monetary result."""
    return Trade(
        account_id=account_id,
        date=trade_date,
        timeframe="H1",
        direction=direction,
        lot=0.1,
        entry_price=entry,
        close_price=close,
        stop_loss=sl,
        take_profit=tp,
        result=result,
        **kwargs,
    )


def make_input(**overrides) -> TradeInput:
    """A valid trade form: Buy 0.1 lot 1900.00 -> 1901.20."""
    fields = dict(
        date="2024-01-15",
        pair="XAUUSD",
        timeframe="H1",
        direction="Buy",
        lot=0.1,
        entry=1900.0,
        close=1901.2,
        stop_loss=1890.0,
        take_profit=1920.0,
    )
    fields.update(overrides)
    return TradeInput(**fields)


@pytest.fixture
def store() -> LedgerStore:
    return LedgerStore()


@pytest.fixture
def populated_store() -> LedgerStore:
    """Two Standard accounts and one Cent account with a few trades each."""
    s = LedgerStore()
    main = s.add_account("Main", AccountType.STANDARD, 1000)
    swing = s.add_account("Swing", AccountType.STANDARD, 500)
    cent = s.add_account("Cent", AccountType.CENT, 10_000)
    s.add_trade(make_input(date="2024-01-10"), main.id)                   # +12.00
    s.add_trade(make_input(date="2024-01-12", close=1895.0), main.id)     # -50.00
    s.add_trade(make_input(date="2024-02-01", direction="Sell", close=1890.0), swing.id)  # +100.00
    s.add_trade(make_input(date="2024-01-20"), cent.id)                   # +0.12
    return s
