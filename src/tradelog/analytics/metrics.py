"""Per-trade metrics: pips, monetary result and risk/reward.

All functions are pure.  Inputs that are missing or non-finite are not
errors: an open trade simply has no price movement, and a trade without
a stop or target has no risk/reward ratio.

Risk/reward uses absolute distances and ignores direction.  A stop on
the "wrong" side of entry still produces a ratio; a stop or target
sitting exactly on the entry price produces :data:`NO_RATIO`.
"""

from __future__ import annotations

from typing import Any

from tradelog.core.enums import AccountType, Direction
from tradelog.core.models import finite_or_none

# 1 pip = 0.10 price move on XAUUSD
PIP_SIZE = 0.10

CLASS_MULTIPLIERS: dict[AccountType, float] = {
    AccountType.STANDARD: 100.0,
    AccountType.CENT: 1.0,
}

# Rendered in place of "1 : X.XX" when no ratio can be computed.
NO_RATIO = "-"


def _price_move(direction: Direction | str, entry: float, close: float) -> float:
    if Direction.parse(direction) == Direction.BUY:
        return close - entry
    return entry - close


def compute_pips(
    direction: Direction | str,
    entry: Any,
    close: Any,
    *,
    pip_size: float = PIP_SIZE,
) -> float:
    """Signed pip movement, rounded to one decimal.

    Buy:  (close - entry) / pip_size
    Sell: (entry - close) / pip_size
    """
    entry_f = finite_or_none(entry)
    close_f = finite_or_none(close)
    if entry_f is None or close_f is None:
        return 0.0
    return round(_price_move(direction, entry_f, close_f) / pip_size, 1)


def compute_monetary_result(
    account_type: AccountType | str,
    direction: Direction | str,
    entry: Any,
    close: Any,
    lot: Any,
    *,
    multiplier: float | None = None,
) -> float:
    """Monetary result of a closed trade, rounded to two decimals.

    ``price_move * lot * multiplier`` where the multiplier is 100 for
    Standard accounts and 1 for Cent accounts unless given explicitly.
    Never call this for manual-result trades; their stored result wins.
    """
    entry_f = finite_or_none(entry)
    close_f = finite_or_none(close)
    lot_f = finite_or_none(lot)
    if entry_f is None or close_f is None or lot_f is None or lot_f <= 0:
        return 0.0
    if multiplier is None:
        multiplier = CLASS_MULTIPLIERS[AccountType.parse(account_type)]
    move = _price_move(direction, entry_f, close_f)
    return round(move * lot_f * multiplier, 2)


def risk_reward_ratio(
    direction: Direction | str,
    entry: Any,
    stop_loss: Any,
    take_profit: Any,
) -> float | None:
    """Reward/risk as a float rounded to two decimals, or ``None``.

    ``direction`` is accepted for call-site symmetry only; distances are
    absolute.
    """
    entry_f = finite_or_none(entry)
    sl_f = finite_or_none(stop_loss)
    tp_f = finite_or_none(take_profit)
    if entry_f is None or sl_f is None or tp_f is None:
        return None
    if sl_f == 0 or tp_f == 0:
        return None
    risk = abs(entry_f - sl_f)
    reward = abs(tp_f - entry_f)
    if risk <= 0 or reward <= 0:
        return None
    return round(reward / risk, 2)


def compute_risk_reward(
    direction: Direction | str,
    entry: Any,
    stop_loss: Any,
    take_profit: Any,
) -> str:
    """Risk/reward rendered as ``"1 : X.XX"``, or :data:`NO_RATIO`."""
    ratio = risk_reward_ratio(direction, entry, stop_loss, take_profit)
    if ratio is None:
        return NO_RATIO
    return f"1 : {ratio:.2f}"
