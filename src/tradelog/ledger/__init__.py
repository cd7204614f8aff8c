"""Ledger store: accounts, trades, validation and persistence."""

from .entry import TradeInput, build_trade
from .persistence import export_backup, import_backup, load_state, save_state
from .store import ALL, LedgerStore
from .validation import ValidationResult, validate_account, validate_trade

__all__ = [
    "ALL",
    "LedgerStore",
    "TradeInput",
    "build_trade",
    "ValidationResult",
    "validate_account",
    "validate_trade",
    "load_state",
    "save_state",
    "export_backup",
    "import_backup",
]
