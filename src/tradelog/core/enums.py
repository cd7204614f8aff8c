"""Enumerations used across the trading journal."""

from enum import Enum


class Direction(str, Enum):
    BUY = "Buy"    # Long
    SELL = "Sell"  # Short

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        """Accept enum members, "Buy"/"Sell" or "Long"/"Short" (any case)."""
        if isinstance(value, Direction):
            return value
        text = str(value).strip().lower()
        if text in ("buy", "long"):
            return cls.BUY
        if text in ("sell", "short"):
            return cls.SELL
        raise ValueError(f"Unknown trade direction: {value!r}")


class AccountType(str, Enum):
    STANDARD = "Standard"
    CENT = "Cent"  # Micro

    @classmethod
    def parse(cls, value: "AccountType | str") -> "AccountType":
        if isinstance(value, AccountType):
            return value
        text = str(value).strip().lower()
        if text == "standard":
            return cls.STANDARD
        if text in ("cent", "micro"):
            return cls.CENT
        raise ValueError(f"Unknown account type: {value!r}")


class TradeOutcome(str, Enum):
    """Win / loss / break-even classification."""

    WIN = "win"
    LOSS = "loss"
    BREAKEVEN = "breakeven"


class Period(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
