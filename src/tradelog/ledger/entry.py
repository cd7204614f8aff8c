"""Turn raw trade input into a ledger :class:`~tradelog.core.models.Trade`.

Pips are derived whenever a close price is given.  The monetary result
is derived from price movement unless the user marked it as manual, in
which case the typed-in value is kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tradelog.analytics.metrics import compute_monetary_result, compute_pips
from tradelog.core.config import InstrumentConfig
from tradelog.core.enums import Direction
from tradelog.core.errors import TradeValidationError
from tradelog.core.models import Account, Trade, finite_or_none, parse_trade_date

from .validation import validate_trade


@dataclass
class TradeInput:
    """Raw trade form values, before validation."""

    date: Any = None
    pair: str = "XAUUSD"
    timeframe: str = ""
    direction: Any = Direction.BUY
    lot: Any = None
    entry: Any = None
    close: Any = None
    stop_loss: Any = None
    take_profit: Any = None
    result: Any = None
    is_manual_result: bool = False
    risk: Any = None
    emotion: str = ""
    notes: str = ""


def build_trade(
    data: TradeInput,
    account: Account,
    *,
    instrument: InstrumentConfig | None = None,
    trade_id: str | None = None,
) -> Trade:
    """Validate *data* and build the trade it describes for *account*.

    Raises:
        TradeValidationError: One or more fields failed validation.
    """
    check = validate_trade(data)
    if not check.valid:
        raise TradeValidationError(check.errors)

    instrument = instrument or InstrumentConfig()
    direction = Direction.parse(data.direction)
    entry = float(data.entry)
    lot = float(data.lot)
    close = finite_or_none(data.close)

    result = finite_or_none(data.result) or 0.0
    if not data.is_manual_result and close is not None:
        result = compute_monetary_result(
            account.account_type,
            direction,
            entry,
            close,
            lot,
            multiplier=instrument.multiplier_for(account.account_type),
        )
    pips = (
        compute_pips(direction, entry, close, pip_size=instrument.pip_size)
        if close is not None
        else 0.0
    )

    fields: dict[str, Any] = {
        "account_id": account.id,
        "date": parse_trade_date(data.date),
        "pair": data.pair.strip(),
        "timeframe": data.timeframe.strip(),
        "direction": direction,
        "lot": lot,
        "entry_price": entry,
        "close_price": close,
        "pips": pips,
        "stop_loss": data.stop_loss,
        "take_profit": data.take_profit,
        "result": result,
        "is_manual_result": data.is_manual_result,
        "risk_amount": data.risk,
        "emotion": (data.emotion or "").strip(),
        "notes": (data.notes or "").strip(),
    }
    if trade_id:
        fields["id"] = trade_id
    return Trade(**fields)
