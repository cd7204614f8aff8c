"""Form-level validation for account and trade input.

Checks raw user input before it is turned into a ledger record.  Every
rule that fails contributes one message; nothing is raised here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tradelog.core.enums import AccountType, Direction
from tradelog.core.models import finite_or_none, parse_trade_date

if TYPE_CHECKING:
    from .entry import TradeInput


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _unset_price(value: Any) -> bool:
    # Empty, None and 0 all mean "not provided" for stop loss / take profit.
    if _blank(value):
        return True
    return finite_or_none(value) == 0


def validate_account(
    name: Any, account_type: Any, initial_balance: Any
) -> ValidationResult:
    errors: list[str] = []
    if _blank(name):
        errors.append("Account name is required.")
    try:
        AccountType.parse(account_type)
    except ValueError:
        errors.append("Account type must be Standard or Cent.")
    balance = finite_or_none(initial_balance)
    if balance is None or balance < 0:
        errors.append("Initial balance must be a non-negative number.")
    return ValidationResult(errors)


def validate_trade(data: TradeInput) -> ValidationResult:
    errors: list[str] = []

    if _blank(data.date):
        errors.append("Date is required.")
    elif parse_trade_date(data.date) is None:
        errors.append("Date must be a calendar date (YYYY-MM-DD).")
    if _blank(data.pair):
        errors.append("Pair is required.")
    if _blank(data.timeframe):
        errors.append("Timeframe is required.")
    try:
        Direction.parse(data.direction)
    except ValueError:
        errors.append("Direction must be Buy or Sell.")

    lot = finite_or_none(data.lot)
    if lot is None or lot <= 0:
        errors.append("Lot must be a positive number greater than 0.")
    entry = finite_or_none(data.entry)
    if entry is None or entry <= 0:
        errors.append("Entry price is required and must be greater than 0.")

    # Close is optional (open trade), but must be valid when given.
    if not _blank(data.close):
        close = finite_or_none(data.close)
        if close is None or close <= 0:
            errors.append("Close price must be a positive number if provided.")

    if not _unset_price(data.stop_loss):
        sl = finite_or_none(data.stop_loss)
        if sl is None or sl <= 0:
            errors.append("Stop loss must be a positive number if provided.")
    if not _unset_price(data.take_profit):
        tp = finite_or_none(data.take_profit)
        if tp is None or tp <= 0:
            errors.append("Take profit must be a positive number if provided.")

    # A zero result is fine: the trade may still be open.
    if not _blank(data.result) and finite_or_none(data.result) is None:
        errors.append("Result must be a valid number.")

    return ValidationResult(errors)
