"""Core domain models for the trading journal.

These are the canonical records held by the ledger store and handed to
the analytics engine.  Field aliases match the persisted JSON document
(``accountId``, ``dir``, ``sl`` ...) so backups written by older
versions of the journal load unchanged.

Validators sanitise rather than reject: a stored document is always
coerced into well-formed records.  Rejecting bad user input is the job
of :mod:`tradelog.ledger.validation`, which runs before a record is
built.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import AccountType, Direction, TradeOutcome
from .ids import new_id, utc_now


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

def finite_or_none(value: Any) -> float | None:
    """Return *value* as a finite float, or ``None`` if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _number(value: Any) -> float:
    number = finite_or_none(value)
    return 0.0 if number is None else number


def _price_or_unset(value: Any) -> float | None:
    # Zero is the stored form of "not set".
    number = finite_or_none(value)
    if number is None or number == 0:
        return None
    return number


def parse_trade_date(value: Any) -> dt.date | None:
    """Parse a calendar date; anything unparseable becomes ``None``."""
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class Account(BaseModel):
    """A trading account with its starting balance."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str = Field(default_factory=lambda: new_id("acc_"))
    name: str = "Unnamed Account"
    account_type: AccountType = Field(default=AccountType.STANDARD, alias="type")
    initial_balance: float = Field(default=0.0, alias="initialBalance")
    created_at: str = Field(
        default_factory=lambda: utc_now().isoformat(), alias="createdAt"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v: Any) -> str:
        return str(v) if v else new_id("acc_")

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, v: Any) -> str:
        return str(v) if v else "Unnamed Account"

    @field_validator("account_type", mode="before")
    @classmethod
    def _account_type(cls, v: Any) -> AccountType:
        try:
            return AccountType.parse(v)
        except ValueError:
            return AccountType.STANDARD

    @field_validator("initial_balance", mode="before")
    @classmethod
    def _initial_balance(cls, v: Any) -> float:
        return max(0.0, _number(v))

    @field_validator("created_at", mode="before")
    @classmethod
    def _created_at(cls, v: Any) -> str:
        if isinstance(v, dt.datetime):
            return v.isoformat()
        return str(v) if v else utc_now().isoformat()


class Trade(BaseModel):
    """One journal entry.

    ``result`` is the monetary outcome in account units.  It is derived
    from price movement unless ``is_manual_result`` is set, in which case
    the value typed in by the user is authoritative.  ``risk_amount``,
    ``emotion`` and ``notes`` are carried for the journal only.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str = Field(default_factory=lambda: new_id("tr_"))
    account_id: str = Field(default="", alias="accountId")
    date: dt.date | None = None
    pair: str = "XAUUSD"
    timeframe: str = Field(default="", alias="tf")
    direction: Direction = Field(default=Direction.BUY, alias="dir")
    lot: float = 0.0
    entry_price: float = Field(default=0.0, alias="entry")
    close_price: float | None = Field(default=None, alias="close")
    pips: float = 0.0
    stop_loss: float | None = Field(default=None, alias="sl")
    take_profit: float | None = Field(default=None, alias="tp")
    result: float = 0.0
    is_manual_result: bool = Field(default=False, alias="isManualResult")
    risk_amount: float = Field(default=0.0, alias="risk")
    emotion: str = ""
    notes: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v: Any) -> str:
        return str(v) if v else new_id("tr_")

    @field_validator("account_id", "timeframe", "emotion", "notes", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return str(v) if v else ""

    @field_validator("pair", mode="before")
    @classmethod
    def _pair(cls, v: Any) -> str:
        return str(v) if v else "XAUUSD"

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, v: Any) -> dt.date | None:
        return parse_trade_date(v)

    @field_validator("direction", mode="before")
    @classmethod
    def _direction(cls, v: Any) -> Direction:
        try:
            return Direction.parse(v)
        except ValueError:
            return Direction.BUY

    @field_validator("lot", mode="before")
    @classmethod
    def _lot(cls, v: Any) -> float:
        return max(0.0, _number(v))

    @field_validator("entry_price", "pips", "result", "risk_amount", mode="before")
    @classmethod
    def _numbers(cls, v: Any) -> float:
        return _number(v)

    @field_validator("close_price", "stop_loss", "take_profit", mode="before")
    @classmethod
    def _optional_prices(cls, v: Any) -> float | None:
        return _price_or_unset(v)

    @field_validator("is_manual_result", mode="before")
    @classmethod
    def _manual(cls, v: Any) -> bool:
        return bool(v)

    @property
    def outcome(self) -> TradeOutcome:
        if self.result > 0:
            return TradeOutcome.WIN
        if self.result < 0:
            return TradeOutcome.LOSS
        return TradeOutcome.BREAKEVEN

    @property
    def is_open(self) -> bool:
        return self.close_price is None

    def to_json_dict(self) -> dict[str, Any]:
        """Persisted form, using the document's field names."""
        return self.model_dump(mode="json", by_alias=True)


class User(BaseModel):
    """Session stub: the journal only remembers who is logged in."""

    username: str


class LedgerState(BaseModel):
    """Everything the ledger store persists."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user: User | None = None
    accounts: list[Account] = Field(default_factory=list)
    trades: list[Trade] = Field(default_factory=list)
    active_account_id: str = Field(default="all", alias="activeAccountId")
    active_type_filter: str = Field(default="all", alias="activeTypeFilter")

    @field_validator("user", mode="before")
    @classmethod
    def _user(cls, v: Any) -> Any:
        if isinstance(v, User):
            return v
        if isinstance(v, dict) and v.get("username"):
            return v
        if isinstance(v, str) and v:
            return {"username": v}
        return None

    @field_validator("accounts", "trades", mode="before")
    @classmethod
    def _records(cls, v: Any) -> list:
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, (dict, BaseModel))]

    @field_validator("active_account_id", mode="before")
    @classmethod
    def _active_account(cls, v: Any) -> str:
        return str(v) if v else "all"

    @field_validator("active_type_filter", mode="before")
    @classmethod
    def _type_filter(cls, v: Any) -> str:
        if v in (AccountType.STANDARD.value, AccountType.CENT.value):
            return AccountType(v).value
        return "all"

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
